"""Test configuration and fixtures."""

import json
from pathlib import Path

import pytest

from blogger.domain.model import Author, Post, Tag
from blogger.persistence import Store, Table


def write_record(directory: Path, file_name: str, payload: dict | str) -> Path:
    """Helper to place a record file on disk as another process would.

    Args:
        directory: Table directory (created if missing)
        file_name: File name, normally the record id
        payload: JSON object, or raw text written verbatim

    Returns:
        Path of the written file
    """
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / file_name
    text = payload if isinstance(payload, str) else json.dumps(payload)
    path.write_text(text, encoding="utf-8")
    return path


def read_record(directory: Path, file_name: str) -> dict:
    """Helper to read a record file back as a dict."""
    return json.loads((directory / file_name).read_text(encoding="utf-8"))


@pytest.fixture
def store(tmp_path: Path) -> Store:
    """Store rooted in a fresh temporary directory."""
    return Store(tmp_path / "data")


@pytest.fixture
def post_table(tmp_path: Path) -> Table[Post]:
    """Bootstrapped posts table."""
    table = Table(Post, tmp_path / "posts")
    table.bootstrap()
    return table


@pytest.fixture
def tag_table(tmp_path: Path) -> Table[Tag]:
    """Bootstrapped tags table."""
    table = Table(Tag, tmp_path / "tags")
    table.bootstrap()
    return table


@pytest.fixture
def author_table(tmp_path: Path) -> Table[Author]:
    """Bootstrapped authors table."""
    table = Table(Author, tmp_path / "authors")
    table.bootstrap()
    return table
