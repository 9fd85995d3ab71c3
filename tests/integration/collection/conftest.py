from pathlib import Path

import pytest


def _create_docs_tree(root: Path) -> None:
    """
    Creates a small documentation tree:
    - a.md at the top level
    - sub/b.md with a comment and a code block at end of file
    - sub/c.txt that must never be collected
    - sub/deeper/D.MD with CRLF line endings and an upper-case extension
    """
    (root / "sub" / "deeper").mkdir(parents=True)

    (root / "a.md").write_text("# Title\n\nIntro to A.\n\n")
    (root / "sub" / "b.md").write_text(
        "B text <!-- hidden -->\n\nRun this:\n\n```\nprint('b')\n```\n"
    )
    (root / "sub" / "c.txt").write_text("Never collected.\n\n")
    (root / "sub" / "deeper" / "D.MD").write_bytes(b"Deep paragraph.\r\n\r\n")


@pytest.fixture(scope="module")
def docs_root(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create the documentation tree once per module."""
    root: Path = tmp_path_factory.mktemp("docs")
    _create_docs_tree(root)
    return root


@pytest.fixture
def simple_tree(tmp_path: Path) -> Path:
    """root/{a.md, sub/{b.md, c.txt}}"""
    (tmp_path / "sub").mkdir()
    (tmp_path / "a.md").write_text("From a.\n\nStill a.\n\n")
    (tmp_path / "sub" / "b.md").write_text("From b.\n\n")
    (tmp_path / "sub" / "c.txt").write_text("From c.\n\n")
    return tmp_path
