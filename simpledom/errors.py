"""Exception types raised by simpledom."""

from __future__ import annotations


class DomError(Exception):
    """Base class for all simpledom errors."""


class MalformedInputError(DomError, ValueError):
    """Markup could not be turned into a node."""


class DetachedNodeError(DomError):
    """The wrapped node has no parent, no node at all, or was replaced."""


class InvalidSelectorError(DomError, ValueError):
    """The CSS selector was rejected by the selector engine."""

    def __init__(self, selector: str, reason: str) -> None:
        super().__init__(f"Invalid selector {selector!r}: {reason}")
        self.selector = selector


class ConfigError(DomError):
    """Options file could not be read or validated."""


__all__ = [
    "ConfigError",
    "DetachedNodeError",
    "DomError",
    "InvalidSelectorError",
    "MalformedInputError",
]
