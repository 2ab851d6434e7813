"""Voxel chunk storage and editing helpers, with a pygame block editor."""

__version__ = "0.1.0"