"""Shared pytest fixtures for filesystem trees and throwaway git repositories."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

type TreeWriter = Callable[[Path, dict[str, str]], Path]



def _write_tree(root: Path, files: dict[str, str]) -> Path:
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture()
def write_tree() -> TreeWriter:
    """Return a helper that writes ``{relative_path: content}`` under a root."""
    return _write_tree


def run_git(cwd: Path, *args: str) -> str:
    result = subprocess.run(["git", *args], cwd=cwd, capture_output=True, text=True, check=True)
    return result.stdout


@pytest.fixture()
def git_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate git from the user's global configuration."""
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(tmp_path / "gitconfig"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "wtree tests")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "tests@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "wtree tests")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "tests@example.com")


@pytest.fixture()
def git_repo(tmp_path: Path, git_env: None) -> Path:
    """An npm-style repository on ``main`` with an untracked, populated ``node_modules``."""
    if shutil.which("git") is None:
        pytest.skip("git executable not available")
    repo = tmp_path / "repo"
    repo.mkdir()
    run_git(repo, "init", "--initial-branch=main")
    run_git(repo, "config", "commit.gpgsign", "false")
    _write_tree(
        repo,
        {
            "package-lock.json": "{}\n",
            ".gitignore": "node_modules/\n.worktrees/\n",
            "index.js": "console.log('hi')\n",
        },
    )
    run_git(repo, "add", ".")
    run_git(repo, "commit", "-m", "initial")
    _write_tree(repo, {"node_modules/left-pad/index.js": "module.exports = 1\n"})
    return repo
