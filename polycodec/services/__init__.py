"""Codec services: varints, coordinates and sequences."""
