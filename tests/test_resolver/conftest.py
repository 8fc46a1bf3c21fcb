"""Shared fixtures for resolver tests: throwaway project trees."""

import textwrap

import pytest

from src.resolver.config import ResolverSettings


@pytest.fixture
def settings() -> ResolverSettings:
    return ResolverSettings()


@pytest.fixture
def make_project(tmp_path):
    """
    Write a project tree and return its root as a posix string.

    Usage:
        root = make_project({"src/a.mdx": 'import b from "./b"'})
    """

    def _make(files: dict[str, str]) -> str:
        for rel_path, content in files.items():
            path = tmp_path / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(content), encoding="utf-8")
        return tmp_path.as_posix()

    return _make
