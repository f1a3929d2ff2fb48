"""scopetext - cascading, scope-aware translation resolution."""

__version__ = "0.1.0"
