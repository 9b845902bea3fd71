# File: src/round_opening_generator/model/revit_placement.py
"""
Placement service creating face-based round openings in Revit.

The family symbol must already be loaded and active, and the caller
must hold an open Transaction on the document while openings are placed.
"""

import logging
from typing import Any, Callable, Optional

from src.round_opening_generator.config.settings import OpeningSettings
from src.round_opening_generator.core.errors import PlacementError
from src.round_opening_generator.core.interfaces import PlacementService
from src.round_opening_generator.core.model_types import OpeningSpec, PlanarFace
from src.round_opening_generator.model import revit_api

logger = logging.getLogger(__name__)


class RevitPlacementService(PlacementService):
    """Places one family instance per opening on the host wall face.

    Args:
        doc: Revit Document
        family_symbol: Active FamilySymbol of a face-based opening family
        settings: Parameter names for depth and diameter
        xyz_factory: Callable building a Revit XYZ from x, y, z; DB.XYZ by default

    Raises:
        RevitUnavailableError: No xyz_factory given outside a Revit session
    """

    def __init__(
        self,
        doc: Any,
        family_symbol: Any,
        settings: Optional[OpeningSettings] = None,
        xyz_factory: Optional[Callable[[float, float, float], Any]] = None,
    ):
        if xyz_factory is None:
            revit_api.require_revit("RevitPlacementService")
            xyz_factory = revit_api.DB.XYZ

        self._doc = doc
        self._family_symbol = family_symbol
        self._settings = settings or OpeningSettings()
        self._xyz = xyz_factory

    def place_opening(self, spec: OpeningSpec, host_face: PlanarFace) -> Any:
        if host_face.reference is None:
            raise PlacementError(
                f"Face {host_face.id} has no Revit face to host the opening",
                extra={"wall_id": spec.wall_id, "duct_id": spec.duct_id},
            )

        try:
            instance = self._doc.Create.NewFamilyInstance(
                host_face.reference,
                self._xyz(*spec.center),
                self._xyz(*spec.orientation),
                self._family_symbol,
            )
        except Exception as e:
            raise PlacementError(
                f"Revit rejected opening on face {host_face.id}: {e}",
                extra={"wall_id": spec.wall_id, "duct_id": spec.duct_id},
            )

        self._set_parameter(instance, self._settings.depth_parameter, spec.depth)
        self._set_parameter(instance, self._settings.diameter_parameter, spec.diameter)

        logger.debug(f"Placed opening for duct {spec.duct_id} in wall {spec.wall_id}")
        return instance

    def _set_parameter(self, instance: Any, name: str, value: float) -> None:
        parameters = list(instance.GetParameters(name))
        if not parameters:
            raise PlacementError(
                f"Opening family has no parameter '{name}'",
                extra={"parameter": name},
            )
        parameters[0].Set(value)
