"""Configuration filenames, keys and init-template defaults."""

from __future__ import annotations

CONFIG_FILENAME: str = ".wtree.yaml"
GITIGNORE_FILENAME: str = ".gitignore"

CONFIG_KEY_EXTENDS: str = "extends"
CONFIG_KEY_CACHE: str = "cache"
CONFIG_KEY_POST_RESTORE: str = "post_restore"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {CONFIG_KEY_EXTENDS, CONFIG_KEY_CACHE, CONFIG_KEY_POST_RESTORE}
)

INIT_CONFIG_TEMP_PREFIX: str = ".wtree-init-"
INIT_CONFIG_TEMP_SUFFIX: str = ".yaml"

TEMPLATE_CACHE_HINTS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Node.js", ("node_modules", ".turbo", ".next")),
    ("Python", (".venv", "__pypackages__")),
    ("Rust", ("target",)),
    ("Go", ("vendor",)),
    ("Generic build directories", ("build", "dist", "out")),
)
