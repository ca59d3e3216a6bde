"""Collection of fixtures for facilitation test implementations"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
)

if TYPE_CHECKING:
    from pathlib import Path

import pytest

from gitcfg_core.config import ConfigStore

standard_gitconfig = """\
# a comment
[core]
\tbare = true
\trepositoryformatversion = 0
\tfilemode = false
[remote "origin"]
\turl = https://example.com/repo.git
\tfetch = +refs/heads/*:refs/remotes/origin/*
[wiki "Main"]
\tpage-file-dir = pages
\tallow-uploads
[wiki "main"]
\tpage-file-dir = other
"""


@pytest.fixture(autouse=False, scope='function')  # noqa: PT003
def cfgtext() -> str:
    """Return the text of a standard configuration"""
    return standard_gitconfig


@pytest.fixture(autouse=False, scope='function')  # noqa: PT003
def cfgstore() -> ConfigStore:
    """Return a loaded configuration store with a standard configuration"""
    return ConfigStore('standard.cfg', standard_gitconfig).load()


@pytest.fixture(autouse=False, scope='function')  # noqa: PT003
def cfgfile(tmp_path) -> Path:
    """Return the path to a file with a standard configuration"""
    path = tmp_path / 'config'
    path.write_text(standard_gitconfig, encoding='utf-8')
    return path
