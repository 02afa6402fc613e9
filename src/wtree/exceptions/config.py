"""Configuration-related exceptions."""

from __future__ import annotations

from wtree.exceptions.base import ErrorCode, WtreeError


class ConfigError(WtreeError, ValueError):
    """Raised when a ``.wtree.yaml`` file cannot be read or is invalid."""

    code = ErrorCode.CONFIG_ERROR


class UnknownRecipeError(ConfigError):
    """Raised when ``extends`` names a recipe that does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown recipe in extends: {name}")
        self.name = name
