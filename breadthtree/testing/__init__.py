"""Testing utilities for breadthtree consumers."""

from .fixtures import SyntheticFileSystem

__all__ = ['SyntheticFileSystem']
