"""Metadata providers for breadthtree."""

from .filesystem import FileSystemMetadataProvider

__all__ = ['FileSystemMetadataProvider']
