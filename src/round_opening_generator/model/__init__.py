# File: src/round_opening_generator/model/__init__.py
"""
Model repositories and placement services.

The in-memory pair and the slab builders work anywhere; the Revit
adapters need a Revit session (see revit_api.REVIT_AVAILABLE).
"""

from .in_memory import InMemoryModelRepository, RecordingPlacementService, PlacedOpening
from .slab_wall import build_slab_wall, build_round_duct

__all__ = [
    "InMemoryModelRepository",
    "RecordingPlacementService",
    "PlacedOpening",
    "build_slab_wall",
    "build_round_duct",
]
