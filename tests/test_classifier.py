"""
Tests for the expansion rule.
"""

import stat

import pytest

from breadthtree import (
    CollectErrorsPolicy,
    DirectoryClassifier,
    MetadataSnapshot,
    ReportConfig,
)
from breadthtree.testing import SyntheticFileSystem


@pytest.fixture
def fs():
    fs = SyntheticFileSystem()
    fs.add_directory("/r")
    fs.add_directory("/r/dir")
    fs.add_file("/r/file")
    fs.add_node("/r/fifo", stat.S_IFIFO)
    fs.add_node("/r/sock", stat.S_IFSOCK)
    fs.add_symlink("/r/dirlink", "dir")
    fs.add_symlink("/r/filelink", "file")
    fs.add_symlink("/r/broken", "nowhere")
    return fs


def make_classifier(fs, follow):
    policy = CollectErrorsPolicy()
    config = ReportConfig(root="/r", follow_symlinks=follow)
    return DirectoryClassifier(config, fs, policy), policy


class TestWithoutFollowing:

    def test_directory_is_expandable(self, fs):
        classifier, _ = make_classifier(fs, follow=False)
        assert classifier.is_expandable("/r/dir")

    @pytest.mark.parametrize("path", ["/r/file", "/r/fifo", "/r/sock"])
    def test_non_directories(self, fs, path):
        classifier, _ = make_classifier(fs, follow=False)
        assert not classifier.is_expandable(path)

    def test_symlink_to_directory_never_expanded(self, fs):
        classifier, policy = make_classifier(fs, follow=False)
        assert not classifier.is_expandable("/r/dirlink")
        assert policy.errors == []

    def test_broken_symlink_is_just_a_link(self, fs):
        classifier, policy = make_classifier(fs, follow=False)
        assert not classifier.is_expandable("/r/broken")
        assert policy.errors == []


class TestWithFollowing:

    def test_symlink_to_directory_expanded(self, fs):
        classifier, _ = make_classifier(fs, follow=True)
        snapshot = classifier.classify("/r/dirlink")
        assert snapshot is not None
        assert snapshot.identity() == fs.probe("/r/dir", False).identity()

    def test_symlink_to_file_not_expanded(self, fs):
        classifier, _ = make_classifier(fs, follow=True)
        assert not classifier.is_expandable("/r/filelink")

    def test_broken_symlink_reported_not_expanded(self, fs):
        classifier, policy = make_classifier(fs, follow=True)
        assert not classifier.is_expandable("/r/broken")
        assert len(policy.errors) == 1
        assert policy.errors[0]["operation"] == "classify"
        assert policy.errors[0]["path"] == "/r/broken"


class TestApproves:
    """The rule applied to a snapshot directly."""

    def snapshot(self, file_type):
        return MetadataSnapshot(mode=file_type | 0o755, nlink=1, uid=0, gid=0,
                                size=0, mtime=0.0)

    def test_unresolved_symlink_follows_policy(self, fs):
        off, _ = make_classifier(fs, follow=False)
        on, _ = make_classifier(fs, follow=True)
        link = self.snapshot(stat.S_IFLNK)
        assert not off.approves(link)
        assert on.approves(link)

    def test_directory_always(self, fs):
        off, _ = make_classifier(fs, follow=False)
        assert off.approves(self.snapshot(stat.S_IFDIR))

    def test_missing_path_is_not_expandable(self, fs):
        classifier, policy = make_classifier(fs, follow=False)
        assert classifier.classify("/r/ghost") is None
        assert policy.errors[0]["error_type"] == "FileNotFoundError"
