"""Errors raised by css-audit."""

from pathlib import Path


class CSSAuditError(Exception):
    """Base class for css-audit errors."""


class InputNotFoundError(CSSAuditError):
    """Nothing to analyze: no stylesheets were supplied."""


class SourceNotFoundError(InputNotFoundError):
    """A file or directory given as input does not exist."""

    def __init__(self, path: Path | str):
        self.path = path
        super().__init__(f"Path not found: {path}")


class FetchError(CSSAuditError):
    """A remote page or stylesheet could not be retrieved."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"{reason} ({url})")
