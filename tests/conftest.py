"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

TreeBuilder = Callable[[Iterable[str]], Path]


def build_tree(root: Path, paths: Iterable[str]) -> Path:
    """Create files and directories under ``root``.

    Names ending with ``/`` become directories, everything else becomes a
    file whose content is its own relative path.
    """
    root.mkdir(parents=True, exist_ok=True)
    for relative in paths:
        target = root / relative
        if relative.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(relative)
    return root


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeBuilder:
    """Factory building a directory tree under ``tmp_path / "root"``."""

    def _make(paths: Iterable[str]) -> Path:
        return build_tree(tmp_path / "root", paths)

    return _make


@pytest.fixture
def assets_tree(make_tree: TreeBuilder) -> Path:
    """Small image tree with one nested directory."""
    return make_tree(
        [
            "stuff.jpg",
            "otherstuff.gif",
            "animals/cat.jpg",
            "animals/dog.jpg",
            "animals/giraffe.tga",
        ]
    )
