"""Utility helpers for vertexkit."""
