# File: src/round_opening_generator/model/revit_api.py
"""
Conditional Revit API imports.

The Revit adapters import DB from here. Outside a Revit session (tests,
batch runs) REVIT_AVAILABLE stays False and REVIT_ERROR holds the reason;
adapters raise RevitUnavailableError instead of failing at import time.
"""

import logging
from typing import Any, Optional

from src.round_opening_generator.core.errors import RevitUnavailableError

logger = logging.getLogger(__name__)

REVIT_AVAILABLE = False
REVIT_ERROR: Optional[str] = None
DB: Any = None
Duct: Any = None

try:
    import clr
    clr.AddReference("RevitAPI")
    from Autodesk.Revit import DB
    from Autodesk.Revit.DB.Mechanical import Duct
    REVIT_AVAILABLE = True
except ImportError as e:
    REVIT_ERROR = str(e)
except Exception as e:
    REVIT_ERROR = str(e)


def require_revit(operation: str) -> None:
    """
    Fail fast when a Revit-only operation runs without Revit.

    Raises:
        RevitUnavailableError: If the Revit API could not be imported
    """
    if not REVIT_AVAILABLE:
        logger.warning("Revit API not available: %s", REVIT_ERROR)
        raise RevitUnavailableError(
            f"{operation} requires the Revit API ({REVIT_ERROR})"
        )
