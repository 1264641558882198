"""Custom exceptions for EndpointDiff."""

from __future__ import annotations

from typing import Optional


class EndpointDiffError(Exception):
    """Base exception for EndpointDiff errors."""
    pass


class ConfigError(EndpointDiffError):
    """Raised when the configuration file cannot be loaded or is invalid."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PathSyntaxError(EndpointDiffError):
    """Raised when a JSONPath expression cannot be parsed."""
    def __init__(self, expression: str, reason: str, side: Optional[str] = None):
        prefix = f"[{side}] " if side else ""
        super().__init__(f"{prefix}Invalid JSONPath expression '{expression}': {reason}")
        self.expression = expression
        self.reason = reason
        self.side = side


class PathEvaluationError(EndpointDiffError):
    """Raised when evaluating a valid JSONPath expression fails."""
    def __init__(self, expression: str, reason: str, side: Optional[str] = None):
        prefix = f"[{side}] " if side else ""
        super().__init__(f"{prefix}Failed to evaluate JSONPath '{expression}': {reason}")
        self.expression = expression
        self.reason = reason
        self.side = side


class FetchError(EndpointDiffError):
    """Raised when an endpoint cannot be fetched or its body is not JSON."""
    def __init__(
        self,
        url: str,
        message: str,
        status_code: Optional[int] = None,
        side: Optional[str] = None
    ):
        prefix = f"[{side}] " if side else ""
        super().__init__(f"{prefix}Error fetching {url}: {message}")
        self.url = url
        self.message = message
        self.status_code = status_code
        self.side = side
