"""Stable validation error codes for ``.wtree.yaml`` checks."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit path)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # unknown recipe in extends

ALL_CFG_CODES: tuple[str, ...] = (CFG001, CFG002, CFG003, CFG004, CFG005, CFG006)

SUGGESTION_CUTOFF: float = 0.6
