# File: src/round_opening_generator/core/errors.py
"""
Exception hierarchy for round opening generation.

Skips (walls that are not simple slabs, ducts that do not cross a wall)
are normal outcomes and are never raised. The exceptions below signal
structural problems with the input data or the host model.
"""

from typing import Any, Dict, Optional


class OpeningGenerationError(Exception):
    """
    Base class for all errors raised by the opening generator.

    Carries optional structured context (wall/duct ids, values) that the
    orchestrator copies into its report.
    """
    def __init__(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.message = message
        self.extra = extra or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        result = {"error": type(self).__name__, "message": self.message}
        if self.extra:
            result["extra"] = self.extra
        return result


class MalformedDuctError(OpeningGenerationError):
    """A duct does not expose two distinct connector endpoints."""
    def __init__(self, duct_id: str, detail: str):
        super().__init__(
            f"Duct '{duct_id}' is malformed: {detail}",
            extra={"duct_id": duct_id},
        )
        self.duct_id = duct_id


class GeometryError(OpeningGenerationError):
    """Geometric input cannot be used (degenerate faces, bad dimensions)."""


class PlacementError(OpeningGenerationError):
    """The host model refused to create or parametrize an opening."""


class ConfigurationError(OpeningGenerationError):
    """Invalid configuration value."""
    def __init__(self, detail: str, field: Optional[str] = None):
        message = "Configuration error"
        if field:
            message += f" for field '{field}'"
        message += f": {detail}"
        super().__init__(message, extra={"field": field} if field else None)


class RevitUnavailableError(OpeningGenerationError):
    """A Revit-only operation was called outside a Revit session."""
