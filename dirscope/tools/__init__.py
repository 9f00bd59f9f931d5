"""Tool modules exposed to agents."""
from .registry import discover_tools

__all__ = ["discover_tools"]
