"""Tests for add/restore/remove/clean against a stubbed git client."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from wtree.commands import clean, remove, restore
from wtree.commands.add import resolve_branch
from wtree.exceptions import DetectionFailedError, GitError, WorktreeNotFoundError
from wtree.linker import ArtifactLinker
from wtree.types import Worktree


@pytest.mark.parametrize(
    ("branch", "new_branch", "expected"),
    [
        (None, None, ("feature-x", True)),
        ("develop", None, ("develop", False)),
        (None, "topic", ("topic", True)),
    ],
    ids=["from-directory", "existing", "new"],
)
def test_resolve_branch(branch: str | None, new_branch: str | None, expected: tuple[str, bool]) -> None:
    assert resolve_branch(Path("/work/feature-x"), branch=branch, new_branch=new_branch) == expected


def _git(*worktrees: Worktree, current: Worktree | None = None) -> MagicMock:
    git = MagicMock()
    git.list_worktrees.return_value = list(worktrees)
    git.current_worktree.return_value = current or worktrees[0]
    git.find_worktree_by_path.side_effect = lambda path: next(
        (w for w in worktrees if w.path.resolve() == Path(path).resolve()), None
    )
    git.find_worktree_by_branch.side_effect = lambda branch: next((w for w in worktrees if w.branch == branch), None)
    return git


def test_remove_by_branch(tmp_path: Path) -> None:
    main = Worktree(path=tmp_path / "main", branch="main", is_main=True)
    feature = Worktree(path=tmp_path / "feature", branch="feature")
    git = _git(main, feature)

    result = remove(target="feature", git=git, force=True)

    assert result.removed == feature
    git.remove_worktree.assert_called_once_with(feature.path, force=True)


def test_remove_refuses_current_worktree(tmp_path: Path) -> None:
    main = Worktree(path=tmp_path / "main", branch="main", is_main=True)
    git = _git(main)

    with pytest.raises(GitError, match="Cannot remove the current worktree"):
        remove(target=str(main.path), git=git)

    git.remove_worktree.assert_not_called()


def test_remove_unknown_target(tmp_path: Path) -> None:
    git = _git(Worktree(path=tmp_path / "main", branch="main", is_main=True))

    with pytest.raises(WorktreeNotFoundError, match="Worktree not found: ghost"):
        remove(target="ghost", git=git)


def test_restore_rejects_non_worktree(tmp_path: Path) -> None:
    git = _git(Worktree(path=tmp_path, branch="main", is_main=True))

    with pytest.raises(WorktreeNotFoundError, match="Target path is not a valid worktree"):
        restore(path=tmp_path / "plain", git=git, linker=ArtifactLinker(use_reflink=False))


def test_restore_links_from_named_source(tmp_path: Path, write_tree: Callable[..., Path]) -> None:
    main = write_tree(tmp_path / "main", {"Cargo.lock": "", "target/debug/app": "bin"})
    feature = write_tree(tmp_path / "feature", {".git": "gitdir: elsewhere\n", "Cargo.lock": ""})
    git = _git(
        Worktree(path=main, branch="main", is_main=True),
        Worktree(path=feature, branch="feature"),
    )

    result = restore(path=feature, git=git, linker=ArtifactLinker(use_reflink=False), from_branch="main")

    assert result.artifacts.copied == ("target",)
    assert result.warning is None
    assert (feature / "target/debug/app").read_text() == "bin"


def test_restore_fails_without_configuration(tmp_path: Path, write_tree: Callable[..., Path]) -> None:
    main = write_tree(tmp_path / "main", {"README.md": ""})
    feature = write_tree(tmp_path / "feature", {".git": "gitdir: elsewhere\n"})
    git = _git(Worktree(path=main, branch="main", is_main=True), Worktree(path=feature, branch="feature"))

    with pytest.raises(DetectionFailedError):
        restore(path=feature, git=git, linker=ArtifactLinker(use_reflink=False), from_branch="main")


def test_restore_unknown_source_branch(tmp_path: Path, write_tree: Callable[..., Path]) -> None:
    feature = write_tree(tmp_path / "feature", {".git": "gitdir: elsewhere\n"})
    git = _git(Worktree(path=feature, branch="feature"))

    with pytest.raises(WorktreeNotFoundError, match="Source worktree not found: main"):
        restore(path=feature, git=git, linker=ArtifactLinker(use_reflink=False), from_branch="main")


def test_clean_dry_run_reports_empty_caches_and_stale_entries(tmp_path: Path) -> None:
    main = tmp_path / "main"
    (main / "node_modules").mkdir(parents=True)
    (main / "package-lock.json").write_text("{}", encoding="utf-8")
    git = _git(
        Worktree(path=main, branch="main", is_main=True),
        Worktree(path=tmp_path / "gone", branch="gone"),
    )

    result = clean(git=git, dry_run=True)

    assert [item.path for item in result.items] == [main / "node_modules"]
    assert result.pruned == 1
    assert (main / "node_modules").is_dir()
    git.prune_worktrees.assert_not_called()


def test_clean_removes_empty_caches_and_prunes(tmp_path: Path) -> None:
    main = tmp_path / "main"
    (main / "node_modules").mkdir(parents=True)
    (main / "package-lock.json").write_text("{}", encoding="utf-8")
    stale = Worktree(path=tmp_path / "gone", branch="gone")
    git = MagicMock()
    git.list_worktrees.side_effect = [
        [Worktree(path=main, branch="main", is_main=True), stale],
        [Worktree(path=main, branch="main", is_main=True), stale],
        [Worktree(path=main, branch="main", is_main=True)],
    ]

    result = clean(git=git)

    assert result.cleaned == 1
    assert result.pruned == 1
    assert not (main / "node_modules").exists()
    git.prune_worktrees.assert_called_once_with()
