"""Test fixtures for breadthtree consumers.

SyntheticFileSystem is an in-memory MetadataProvider. It lets tests build
trees that are awkward or impossible to create on a real disk (sockets,
device nodes, unreadable directories when running as root, unknown uids,
files of many gigabytes) and control listing order exactly.
"""

import errno
import os
import posixpath
import stat
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..core.adapter import MetadataProvider
from ..core.snapshot import MetadataSnapshot
from ..exceptions import IdentityLookupError


MAX_SYMLINK_HOPS = 40


@dataclass
class _Entry:
    file_type: int
    perm: int
    size: int = 0
    uid: int = 0
    gid: int = 0
    mtime: float = 0.0
    nlink: int = 1
    ino: int = 0
    target: Optional[str] = None
    children: List[str] = field(default_factory=list)


class SyntheticFileSystem(MetadataProvider):
    """In-memory filesystem that behaves like stat/lstat/readdir.

    Children are listed in the order they were added. Paths are POSIX
    style; relative symlink targets resolve against the link's directory.

    Example:
        fs = SyntheticFileSystem()
        fs.add_directory('/top')
        fs.add_file('/top/a.txt', size=5)
        fs.add_symlink('/top/link', 'a.txt')
        lines = list(iter_tree_lines('/top', provider=fs))
    """

    DEVICE = 1

    def __init__(self, users: Optional[Dict[int, str]] = None,
                 groups: Optional[Dict[int, str]] = None):
        """Initialize an empty filesystem.

        Args:
            users: uid -> name map (defaults to {0: 'root'})
            groups: gid -> name map (defaults to {0: 'root'})
        """
        self.users = dict(users) if users is not None else {0: 'root'}
        self.groups = dict(groups) if groups is not None else {0: 'root'}
        self._entries: Dict[str, _Entry] = {}
        self._unlistable: Dict[str, int] = {}
        self._next_ino = 1
        self.probe_calls = 0

    # Building the tree

    def add_directory(self, path: str, perm: int = 0o755, **attrs) -> str:
        """Add a directory; its parent, if any, must already exist."""
        return self._add(path, stat.S_IFDIR, perm, nlink=attrs.pop('nlink', 2), **attrs)

    def add_file(self, path: str, size: int = 0, perm: int = 0o644, **attrs) -> str:
        """Add a regular file."""
        return self._add(path, stat.S_IFREG, perm, size=size, **attrs)

    def add_symlink(self, path: str, target: str, **attrs) -> str:
        """Add a symbolic link pointing at ``target``."""
        return self._add(path, stat.S_IFLNK, 0o777, size=len(target), target=target, **attrs)

    def add_node(self, path: str, file_type: int, perm: int = 0o644, **attrs) -> str:
        """Add an entry of any ``S_IF*`` type (fifo, socket, device...)."""
        return self._add(path, file_type, perm, **attrs)

    def deny_listing(self, path: str, error_number: int = errno.EACCES) -> None:
        """Make ``list_directory(path)`` fail with the given errno."""
        self._unlistable[posixpath.normpath(path)] = error_number

    def remove(self, path: str) -> None:
        """Remove an entry (and everything below it)."""
        path = posixpath.normpath(path)
        parent, name = posixpath.split(path)
        if parent in self._entries:
            self._entries[parent].children.remove(name)
        prefix = path.rstrip('/') + '/'
        for key in [k for k in self._entries if k == path or k.startswith(prefix)]:
            del self._entries[key]

    def _add(self, path: str, file_type: int, perm: int, **attrs) -> str:
        path = posixpath.normpath(path)
        if path in self._entries:
            raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), path)

        parent, name = posixpath.split(path)
        if name and parent in self._entries:
            parent_entry = self._entries[parent]
            if parent_entry.file_type != stat.S_IFDIR:
                raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), parent)
            parent_entry.children.append(name)
        elif name and parent not in ('', '/') and self._entries:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), parent)

        ino = attrs.pop('ino', self._next_ino)
        self._entries[path] = _Entry(file_type=file_type, perm=perm, ino=ino, **attrs)
        self._next_ino += 1
        return path

    # MetadataProvider interface

    def probe(self, path: str, follow_links: bool) -> MetadataSnapshot:
        self.probe_calls += 1
        _, entry = self._resolve(path, follow_links)
        return MetadataSnapshot(
            mode=entry.file_type | entry.perm,
            nlink=entry.nlink,
            uid=entry.uid,
            gid=entry.gid,
            size=entry.size,
            mtime=entry.mtime,
            dev=self.DEVICE,
            ino=entry.ino,
        )

    def list_directory(self, path: str) -> List[str]:
        resolved, entry = self._resolve(path, True)
        if entry.file_type != stat.S_IFDIR:
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)
        for candidate in (posixpath.normpath(path), resolved):
            if candidate in self._unlistable:
                code = self._unlistable[candidate]
                raise OSError(code, os.strerror(code), path)
        return list(entry.children)

    def lookup_owner(self, uid: int) -> str:
        try:
            return self.users[uid]
        except KeyError:
            raise IdentityLookupError('user', uid) from None

    def lookup_group(self, gid: int) -> str:
        try:
            return self.groups[gid]
        except KeyError:
            raise IdentityLookupError('group', gid) from None

    # Path resolution

    def _resolve(self, path: str, follow_final: bool, hops: int = 0) -> Tuple[str, _Entry]:
        if hops > MAX_SYMLINK_HOPS:
            raise OSError(errno.ELOOP, os.strerror(errno.ELOOP), path)

        normalized = posixpath.normpath(path)
        current = '/' if normalized.startswith('/') else ''
        parts = [part for part in normalized.split('/') if part]

        if not parts:
            return self._get(current or '.', path)

        entry = None
        for index, part in enumerate(parts):
            current = posixpath.join(current, part) if current else part
            entry = self._get(current, path)[1]
            last = index == len(parts) - 1

            if entry.file_type == stat.S_IFLNK and (follow_final or not last):
                target = posixpath.join(posixpath.dirname(current), entry.target)
                current, entry = self._resolve(target, True, hops + 1)

            if not last and entry.file_type != stat.S_IFDIR:
                raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)

        return current, entry

    def _get(self, key: str, path: str) -> Tuple[str, _Entry]:
        try:
            return key, self._entries[key]
        except KeyError:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path) from None
