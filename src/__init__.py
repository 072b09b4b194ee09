# src/__init__.py — v1
"""aidetector — estimate whether short-form social text was AI-generated."""

from aidetector.version import __version__

__all__ = ["__version__"]
