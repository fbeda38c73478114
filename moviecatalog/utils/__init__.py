"""Utility helpers for the What To Watch backend.

Submodules:
- common: entity → response projection and id parsing
"""

__all__: list[str] = []
