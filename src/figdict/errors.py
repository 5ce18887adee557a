"""Error types raised by FigDict."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from figdict.models import TargetSelector


class FigDictError(Exception):
    """Base class for all FigDict failures."""


class ConfigurationError(FigDictError):
    """Required configuration is missing or invalid."""


class FetchError(FigDictError):
    """The Figma document could not be retrieved or is malformed."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(FigDictError):
    """A target selector did not resolve to any node."""

    def __init__(self, selector: "TargetSelector") -> None:
        super().__init__(f"Could not find target {selector.describe()}")
        self.selector = selector
