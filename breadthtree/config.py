"""Configuration system for breadthtree.

A report is described by a single immutable ReportConfig value. It is built
once, before the first entry is visited, and handed by reference to every
component that needs it.
"""

import os
from dataclasses import dataclass, replace
from typing import List, Union


@dataclass(frozen=True)
class ReportConfig:
    """Complete configuration for one breadth-first report.

    Each ``show_*`` flag turns one optional column on. The path column is
    always printed last. ``show_size`` is on by default because the size
    column is part of every line unless a caller explicitly drops it;
    ``size_in_units`` only changes how that column is rendered.
    """

    root: str
    follow_symlinks: bool = False

    # Output columns, in rendering order
    show_file_type: bool = False
    show_permissions: bool = False
    show_link_count: bool = False
    show_owner: bool = False
    show_group: bool = False
    show_size: bool = True
    size_in_units: bool = False
    show_last_modified: bool = False

    def __post_init__(self):
        # Accept PathLike roots but always keep the string form
        if not isinstance(self.root, str):
            object.__setattr__(self, 'root', os.fspath(self.root))

    # Convenience constructors for common configurations

    @classmethod
    def long_listing(cls, root: Union[str, os.PathLike], **overrides) -> 'ReportConfig':
        """Create config for the long listing shortcut.

        Enables file type, permissions, link count, owner, group and
        size-in-units together. Any keyword in ``overrides`` is applied on
        top, so ``long_listing(root, show_last_modified=True)`` works.

        Args:
            root: Directory to report on
            **overrides: Extra ReportConfig fields

        Returns:
            ReportConfig with the long listing columns enabled
        """
        config = cls(
            root=root,
            show_file_type=True,
            show_permissions=True,
            show_link_count=True,
            show_owner=True,
            show_group=True,
            size_in_units=True,
        )
        return replace(config, **overrides) if overrides else config

    def needs_identity_lookup(self) -> bool:
        """Check if rendering will resolve user or group names."""
        return self.show_owner or self.show_group

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.root, str) or not self.root:
            errors.append("root path cannot be empty")
        elif '\0' in self.root:
            errors.append("root path cannot contain NUL bytes")

        for name in ('follow_symlinks', 'show_file_type', 'show_permissions',
                     'show_link_count', 'show_owner', 'show_group',
                     'show_size', 'size_in_units', 'show_last_modified'):
            if not isinstance(getattr(self, name), bool):
                errors.append(f"{name} must be a bool")

        return errors
