"""Error types raised by the data layer."""

from typing import List, Optional


class NBAPredictorError(Exception):
    """Base class for package errors."""


class MissingParameterError(NBAPredictorError, ValueError):
    """A required request parameter was not supplied."""

    def __init__(self, parameter: str, message: Optional[str] = None):
        self.parameter = parameter
        super().__init__(message or f"{parameter} parameter required")


class UpstreamError(NBAPredictorError):
    """Transport failure or non-success status from an upstream API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class InvalidPayloadError(UpstreamError):
    """Upstream answered, but the body failed schema validation."""

    def __init__(self, source: str, errors: List[str]):
        self.errors = list(errors)
        preview = "; ".join(self.errors[:3])
        super().__init__(f"{source} payload failed validation: {preview}")
