"""Branding constants for help text and terminal output."""

from __future__ import annotations

PROGRAM_NAME: str = "wtree"
CLI_DESCRIPTION: str = "Accelerate git worktree creation with hardlinked build artifacts"
CLI_EPILOG: str = "\n".join(
    (
        "examples:",
        "  wtree add ../feature-x                  new branch 'feature-x'",
        "  wtree add ../feature-x main             check out existing 'main'",
        "  wtree add -b feature-x ../feature-x     explicit new branch",
        "  wtree restore ./my-worktree --from main",
        "  wtree analyze --json",
        "",
        "configuration (.wtree.yaml in the repository root):",
        "  extends: pnpm",
        "  cache:",
        "    - .next",
        "    - dist",
        "  post_restore: pnpm install --frozen-lockfile",
    )
)
