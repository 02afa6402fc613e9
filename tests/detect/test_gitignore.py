"""Tests for .gitignore-based cache inference."""

from __future__ import annotations

from pathlib import Path

from wtree.detect.gitignore import infer_from_gitignore, infer_from_gitignore_text, parse_gitignore


def test_parse_gitignore_drops_comments_blanks_and_negations() -> None:
    content = "# deps\n\nnode_modules/\n!keep.txt\n  dist  \n/build/\n"

    assert parse_gitignore(content) == ["node_modules", "dist", "build"]


def test_parse_gitignore_strips_repeated_trailing_separators() -> None:
    assert parse_gitignore("target//\n") == ["target"]


def test_parse_gitignore_removes_one_leading_anchor() -> None:
    assert parse_gitignore("/node_modules/\n//vendor\n") == ["node_modules", "/vendor"]


def test_infer_skips_entries_mapped_to_nothing() -> None:
    config = infer_from_gitignore_text("node_modules\ndist\n__pycache__\n")

    assert config is not None
    assert config.cache == ("node_modules", "dist")
    assert config.post_restore is None
    assert config.recipe is None


def test_infer_returns_none_when_only_empty_mappings_match() -> None:
    assert infer_from_gitignore_text("__pycache__/\n.pytest_cache\n.pnp.*\n") is None


def test_infer_returns_none_for_unrecognised_entries() -> None:
    assert infer_from_gitignore_text("*.log\n.env\ncoverage/\n") is None


def test_infer_maps_nx_to_its_cache_directory() -> None:
    config = infer_from_gitignore_text(".nx\n")

    assert config is not None
    assert config.cache == (".nx/cache",)


def test_infer_deduplicates_repeated_entries() -> None:
    config = infer_from_gitignore_text("node_modules\n/node_modules/\nnode_modules\n")

    assert config is not None
    assert config.cache == ("node_modules",)


def test_negated_entries_never_contribute() -> None:
    assert infer_from_gitignore_text("!node_modules\n") is None


def test_infer_from_gitignore_missing_file(tmp_path: Path) -> None:
    assert infer_from_gitignore(tmp_path) is None


def test_infer_from_gitignore_reads_root_file(tmp_path: Path) -> None:
    (tmp_path / ".gitignore").write_text("venv/\ntarget/\n", encoding="utf-8")

    config = infer_from_gitignore(tmp_path)

    assert config is not None
    assert config.cache == ("venv", "target")
