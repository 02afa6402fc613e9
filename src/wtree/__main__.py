"""Allow ``python -m wtree``."""

from __future__ import annotations

from wtree.cli.main import main

raise SystemExit(main())
