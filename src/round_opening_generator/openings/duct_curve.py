# File: src/round_opening_generator/openings/duct_curve.py
"""Duct centerline construction from connector endpoints."""

import logging

from src.round_opening_generator.core.errors import MalformedDuctError
from src.round_opening_generator.core.geometry import normalize, subtract
from src.round_opening_generator.core.model_types import DuctGeometry, UnboundLine

logger = logging.getLogger(__name__)


def find_duct_curve(duct: DuctGeometry) -> UnboundLine:
    """
    Build the unbounded centerline through a duct's first two connectors.

    A straight duct segment has exactly two connectors; extra connectors
    are ignored.

    Args:
        duct: Duct with connector endpoints in connector order

    Returns:
        Infinite line through the first connector, directed to the second

    Raises:
        MalformedDuctError: Fewer than two connectors, or coincident endpoints
    """
    origins = duct.connector_origins
    if len(origins) < 2:
        raise MalformedDuctError(
            duct.id, f"expected 2 connector endpoints, found {len(origins)}"
        )

    start, end = origins[0], origins[1]
    try:
        direction = normalize(subtract(end, start))
    except ValueError:
        raise MalformedDuctError(duct.id, f"connector endpoints coincide at {start}")

    if len(origins) > 2:
        logger.debug(f"Duct {duct.id} has {len(origins)} connectors, using the first two")

    return UnboundLine(origin=start, direction=direction)
