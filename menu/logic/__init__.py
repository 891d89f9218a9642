"""Core business logic layer.

Subpackages:
- menu: weekly menu composition, pinned-slot reshuffling and week assembly
"""
__all__ = ["menu"]
