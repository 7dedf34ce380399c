"""htmlbuilder Exceptions

Custom exceptions for the template compiler and the event registry.
"""

from __future__ import annotations


class HtmlBuilderError(Exception):
    """Base exception for all htmlbuilder errors."""

    pass


class TemplateSyntaxError(HtmlBuilderError):
    """Raised when a template line cannot be turned into a node."""

    def __init__(self, reason: str, text: str, line: int | None = None):
        self.reason = reason
        self.text = text
        self.line = line
        where = f"line {line}: " if line is not None else ""
        super().__init__(f"{where}{reason}: {text!r}")


class MissingFieldError(HtmlBuilderError):
    """Raised when an event registration lacks a required field."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field: {field}")


class ConfigError(HtmlBuilderError):
    """Raised when a config file cannot be loaded."""

    def __init__(self, path: str, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config {path}: {detail}")
