"""Organizer - applies a transformation spec to request parameters."""

from parameterizer.organizer.engine import Organizer, organize

__all__ = ["Organizer", "organize"]
