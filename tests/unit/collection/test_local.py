from pathlib import Path

import pytest

from md_segmenter.collection.local import LocalFileHandle, LocalFileResolver


class TestLocalFileResolver:
    def test_resolves_absolute_path(self, tmp_path: Path) -> None:
        """Without a root, paths are used as given."""
        (tmp_path / "a.md").write_text("A")

        handle = LocalFileResolver().get(str(tmp_path / "a.md"))

        assert handle.path == str(tmp_path / "a.md")
        assert handle.name == "a.md"
        assert handle.is_file()
        assert not handle.is_dir()

    def test_rooted_paths_ignore_leading_slash(self, tmp_path: Path) -> None:
        """A leading slash is ignored under a root."""
        (tmp_path / "docs").mkdir()
        resolver = LocalFileResolver(root=tmp_path)

        assert resolver.get("/docs").local_path == tmp_path / "docs"
        assert resolver.get("docs").local_path == tmp_path / "docs"

    def test_root_itself(self, tmp_path: Path) -> None:
        """A bare slash resolves to the root directory."""
        handle = LocalFileResolver(root=str(tmp_path)).get("/")

        assert handle.is_dir()
        assert not handle.is_file()

    def test_missing_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="not found"):
            LocalFileResolver(root=tmp_path).get("nope.md")


class TestLocalFileHandle:
    def test_children_wrap_directory_entries(self, tmp_path: Path) -> None:
        """Directory entries come back as handles."""
        (tmp_path / "a.md").write_text("A")
        (tmp_path / "sub").mkdir()

        names = sorted(child.name for child in LocalFileHandle(tmp_path).children())

        assert names == ["a.md", "sub"]

    def test_open_keeps_carriage_returns(self, tmp_path: Path) -> None:
        """Files are opened without newline translation."""
        path = tmp_path / "crlf.md"
        path.write_bytes(b"one\r\ntwo")

        with LocalFileHandle(path).open() as f:
            assert f.read() == "one\r\ntwo"

    def test_open_uses_encoding(self, tmp_path: Path) -> None:
        """The configured encoding is used to decode the file."""
        path = tmp_path / "latin.md"
        path.write_bytes("café".encode("latin-1"))

        with LocalFileHandle(path, encoding="latin-1").open() as f:
            assert f.read() == "café"

    def test_dangling_symlink_is_neither_file_nor_dir(self, tmp_path: Path) -> None:
        """A broken link is not a regular file."""
        link = tmp_path / "link.md"
        link.symlink_to(tmp_path / "gone.md")

        handle = LocalFileHandle(link)

        assert not handle.is_file()
        assert not handle.is_dir()
