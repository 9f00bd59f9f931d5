"""Directory-structure listing engine."""
from .engine import view_structure

__all__ = ["view_structure"]
