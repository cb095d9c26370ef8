"""Exceptions raised while turning probe output into metadata."""

from typing import Any


class MetadataError(Exception):
    """Base class for probemeta failures."""


class RepairError(MetadataError):
    """Raised when captured probe output cannot be repaired into JSON bytes."""


class MetadataDecodeError(MetadataError):
    """Raised when repaired JSON does not describe a valid media file.

    Attributes:
        errors: Validation error details (pydantic error dicts), empty when
            the payload was rejected before field validation.
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []
