"""End-to-end worktree lifecycle against a real git repository."""

from __future__ import annotations

import json
import os
import subprocess
from pathlib import Path

import pytest
import yaml

from wtree.cli.main import main
from wtree.commands import add, clean, doctor, init, list_worktrees, remove, restore
from wtree.exceptions import WorktreeExistsError
from wtree.linker import ArtifactLinker
from wtree.vcs import GitClient

@pytest.fixture()
def linker() -> ArtifactLinker:
    return ArtifactLinker(use_reflink=False)


def test_add_links_node_modules_into_new_worktree(git_repo: Path, tmp_path: Path, linker: ArtifactLinker) -> None:
    git = GitClient(git_repo)
    target = tmp_path / "feature"

    result = add(path=target, git=git, linker=linker)

    assert result.worktree.branch == "feature"
    assert result.source.branch == "main"
    assert result.detection.recipe == "npm"
    assert result.artifacts.copied == ("node_modules",)
    assert result.warning is None
    source_file = git_repo / "node_modules/left-pad/index.js"
    linked_file = target / "node_modules/left-pad/index.js"
    assert os.stat(source_file).st_ino == os.stat(linked_file).st_ino
    assert git.find_worktree_by_branch("feature") is not None
    assert GitClient(target).current_branch() == "feature"


def test_add_refuses_branch_already_checked_out(git_repo: Path, tmp_path: Path, linker: ArtifactLinker) -> None:
    with pytest.raises(WorktreeExistsError, match="Worktree already exists for branch 'main'"):
        add(path=tmp_path / "again", git=GitClient(git_repo), linker=linker, branch="main")

    assert not (tmp_path / "again").exists()


def test_nested_worktree_without_ignore_entry_warns(git_repo: Path, linker: ArtifactLinker) -> None:
    result = add(path=git_repo / "trees" / "nested", git=GitClient(git_repo), linker=linker)

    assert result.warning == 'Add "trees/" to .gitignore to avoid committing worktree contents'


def test_lifecycle_list_restore_clean_remove(git_repo: Path, tmp_path: Path, linker: ArtifactLinker) -> None:
    git = GitClient(git_repo)
    target = tmp_path / "feature"
    add(path=target, git=git, linker=linker)

    listing = list_worktrees(git=git)
    by_branch = {entry.worktree.branch: entry for entry in listing.worktrees}
    assert set(by_branch) == {"main", "feature"}
    assert by_branch["main"].current is True
    assert [status.exists for status in by_branch["feature"].artifacts] == [True]

    restored = restore(path=target, git=git, linker=linker)
    assert restored.source.branch == "main"
    assert restored.warning is None
    assert restored.artifacts.copied == ()

    dry_run = clean(git=git, dry_run=True)
    assert dry_run.items == ()
    assert dry_run.pruned == 0

    removed = remove(target="feature", git=git, force=True)
    assert removed.removed.branch == "feature"
    assert not target.exists()
    assert (git_repo / "node_modules/left-pad/index.js").read_text() == "module.exports = 1\n"


def test_doctor_reports_healthy_repository(git_repo: Path) -> None:
    result = doctor(git=GitClient(git_repo))

    assert result.healthy is True
    assert {check.name for check in result.checks} >= {"Git repository", "Configuration file", "Cache patterns"}


def test_init_extends_detected_recipe(git_repo: Path) -> None:
    result = init(git=GitClient(git_repo))

    assert result.created is True
    assert result.recipe == "npm"
    assert yaml.safe_load((git_repo / ".wtree.yaml").read_text(encoding="utf-8")) == {"extends": "npm"}


def test_analyze_json_from_repository(
    git_repo: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(git_repo)

    exit_code = main(["analyze", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["detection"] == {"method": "single-signature", "recipe": "npm"}
    assert payload["config"] == {"cache": ["node_modules"], "recipe": "npm"}
    assert payload["files"] == {"detected": ["package-lock.json"]}


def test_git_client_outside_repository(
    git_repo: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    plain = tmp_path / "plain"
    plain.mkdir()

    assert GitClient(plain).is_git_repo() is False
    assert GitClient(git_repo).is_git_repo() is True


def test_detached_head_reports_short_hash(git_repo: Path) -> None:
    subprocess.run(["git", "checkout", "--detach"], cwd=git_repo, capture_output=True, check=True)

    assert len(GitClient(git_repo).current_branch()) >= 7
