"""Dragboard: a kanban board kept consistent under continuous drag gestures."""

__version__ = "0.1.0"
