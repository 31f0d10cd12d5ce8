"""
Unit tests for carthagecache.core.filesystem module.
"""

import os

import pytest

from carthagecache.core.exceptions import FilesystemError
from carthagecache.core.filesystem import Filesystem, is_metadata_file


@pytest.fixture
def fs():
    return Filesystem()


class TestIsMetadataFile:
    @pytest.mark.parametrize("name", [".DS_Store", "Thumbs.db", "._Foo.framework"])
    def test_housekeeping_names(self, name):
        assert is_metadata_file(name) is True

    @pytest.mark.parametrize("name", ["Foo.framework", ".gitkeep", "Info.plist"])
    def test_content_names(self, name):
        assert is_metadata_file(name) is False

    def test_empty_name_is_not_housekeeping(self):
        assert is_metadata_file("") is False


class TestReadWrite:
    def test_read_missing_returns_none(self, fs, tmp_path):
        assert fs.read_text(tmp_path / "missing") is None

    def test_write_then_read(self, fs, tmp_path):
        path = tmp_path / "Cartfile"
        assert fs.write_text(path, 'github "Foo/Bar"\n') is True
        assert fs.read_text(path) == 'github "Foo/Bar"\n'

    def test_read_directory_returns_none(self, fs, tmp_path):
        assert fs.read_text(tmp_path) is None


class TestRemove:
    def test_remove_tree(self, fs, tmp_path):
        tree = tmp_path / "Build" / "iOS"
        (tree / "Foo.framework").mkdir(parents=True)
        assert fs.remove(tmp_path / "Build") is True
        assert not (tmp_path / "Build").exists()

    def test_remove_missing_is_ok(self, fs, tmp_path):
        assert fs.remove(tmp_path / "nothing") is True

    def test_remove_file(self, fs, tmp_path):
        path = tmp_path / "file"
        path.write_text("x")
        fs.remove(path)
        assert not path.exists()


class TestMove:
    def test_move_directory(self, fs, tmp_path):
        source = tmp_path / "src"
        (source / "Foo.framework").mkdir(parents=True)
        destination = tmp_path / "cache" / "1.0"
        destination.parent.mkdir()

        fs.move(source, destination)

        assert (destination / "Foo.framework").is_dir()
        assert not source.exists()

    def test_move_missing_source_raises(self, fs, tmp_path):
        with pytest.raises(FilesystemError):
            fs.move(tmp_path / "missing", tmp_path / "dest")

    def test_move_onto_existing_raises(self, fs, tmp_path):
        (tmp_path / "src").mkdir()
        (tmp_path / "dest").mkdir()
        with pytest.raises(FilesystemError):
            fs.move(tmp_path / "src", tmp_path / "dest")


class TestCopyTree:
    def test_merges_into_existing_destination(self, fs, tmp_path):
        source = tmp_path / "src"
        (source / "B.framework").mkdir(parents=True)
        (source / "B.framework" / "B").write_text("b")
        destination = tmp_path / "dest"
        (destination / "A.framework").mkdir(parents=True)

        fs.copy_tree(source, destination)

        assert (destination / "A.framework").is_dir()
        assert (destination / "B.framework" / "B").read_text() == "b"
        assert (source / "B.framework" / "B").exists()

    def test_overwrites_existing_files(self, fs, tmp_path):
        source = tmp_path / "src"
        source.mkdir()
        (source / "Info.plist").write_text("new")
        destination = tmp_path / "dest"
        destination.mkdir()
        (destination / "Info.plist").write_text("old")

        fs.copy_tree(source, destination)

        assert (destination / "Info.plist").read_text() == "new"

    @pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
    def test_replaces_existing_symlinks(self, fs, tmp_path):
        source = tmp_path / "src"
        (source / "Versions" / "A").mkdir(parents=True)
        os.symlink("A", source / "Versions" / "Current")
        destination = tmp_path / "dest"
        (destination / "Versions" / "B").mkdir(parents=True)
        os.symlink("B", destination / "Versions" / "Current")

        fs.copy_tree(source, destination)

        assert os.readlink(destination / "Versions" / "Current") == "A"

    def test_missing_source_raises(self, fs, tmp_path):
        with pytest.raises(FilesystemError):
            fs.copy_tree(tmp_path / "missing", tmp_path / "dest")


class TestListing:
    def test_list_subdirectories_sorted_dirs_only(self, fs, tmp_path):
        (tmp_path / "RxSwift").mkdir()
        (tmp_path / "Alamofire").mkdir()
        (tmp_path / ".DS_Store").write_text("")
        (tmp_path / "notes.txt").write_text("")

        assert fs.list_subdirectories(tmp_path) == ["Alamofire", "RxSwift"]

    def test_list_missing_directory_raises(self, fs, tmp_path):
        with pytest.raises(FilesystemError):
            fs.list_subdirectories(tmp_path / "missing")

    def test_contains_files_ignores_metadata(self, fs, tmp_path):
        (tmp_path / ".DS_Store").write_text("")
        assert fs.contains_files(tmp_path) is False

        (tmp_path / "Foo.framework").mkdir()
        assert fs.contains_files(tmp_path) is True

    def test_contains_files_missing_directory(self, fs, tmp_path):
        assert fs.contains_files(tmp_path / "missing") is False
