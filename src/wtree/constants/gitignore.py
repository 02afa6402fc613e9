"""Mapping from common ``.gitignore`` entries to cacheable artifact paths."""

from __future__ import annotations

# Entries mapped to an empty tuple are recognised but too small to be worth linking.
GITIGNORE_HINTS: dict[str, tuple[str, ...]] = {
    # Node.js
    "node_modules": ("node_modules",),
    # Python
    ".venv": (".venv",),
    "venv": ("venv",),
    "__pycache__": (),
    ".pytest_cache": (),
    # Rust
    "target": ("target",),
    # Go
    "vendor": ("vendor",),
    # Build outputs
    "dist": ("dist",),
    "build": ("build",),
    "out": ("out",),
    # Tool caches
    ".turbo": (".turbo",),
    ".nx": (".nx/cache",),
    ".next": (".next",),
    ".nuxt": (".nuxt",),
    # Yarn
    ".yarn/cache": (".yarn/cache",),
    ".pnp.*": (),
}

COMMENT_PREFIX: str = "#"
NEGATION_PREFIX: str = "!"
