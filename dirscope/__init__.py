"""dirscope - bounded, paginated directory-structure exploration for agents."""

__version__ = "0.1.0"
