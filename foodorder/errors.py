"""Exceptions raised by the ordering core."""

from __future__ import annotations

from pathlib import Path


class FoodOrderError(Exception):
    """Base class for ordering errors."""


class ItemNotFound(FoodOrderError, LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"No menu item named {name!r}")
        self.name = name


class ItemUnavailable(FoodOrderError):
    """The item exists but cannot be ordered right now."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} is currently unavailable")
        self.name = name


class EmptyCartOnCheckout(FoodOrderError):
    def __init__(self) -> None:
        super().__init__("Cannot check out an empty cart")


class LogWriteFailure(FoodOrderError):
    """Writing the daily order log failed."""

    def __init__(self, path: Path, reason: OSError) -> None:
        super().__init__(f"Error writing order log file {path}: {reason}")
        self.path = path
        self.reason = reason
