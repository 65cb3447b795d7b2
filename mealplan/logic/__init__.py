"""Core business logic layer.

Subpackages:
- shopping: turning a week plan into a shopping list
"""
__all__ = ["shopping"]
