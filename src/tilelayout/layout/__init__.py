"""Declarative tile layouts loaded from YAML."""

from .loader import LayoutLoader

__all__ = ["LayoutLoader"]
