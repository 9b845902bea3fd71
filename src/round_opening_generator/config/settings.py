# File: src/round_opening_generator/config/settings.py

"""
Runtime settings for the round opening generator.

Defaults match the "M_Round Face Opening" face-based family shipped with
Revit's metric library. Any field can be overridden from a dictionary or
from environment variables prefixed with ``ROUND_OPENING_``.
"""

import logging
import os
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional

from src.round_opening_generator.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "ROUND_OPENING_"

DEFAULT_FAMILY_NAME = "M_Round Face Opening"
DEFAULT_DEPTH_PARAMETER = "Depth"
DEFAULT_DIAMETER_PARAMETER = "D"
DEFAULT_TOLERANCE = 1e-9


@dataclass
class OpeningSettings:
    """
    Settings shared by the opening algorithm and its adapters.

    Attributes:
        family_name: Face-based opening family placed by the Revit adapter
        depth_parameter: Instance parameter receiving the wall width
        diameter_parameter: Instance parameter receiving the opening diameter
        horizontal_tolerance: Max |Z| of a face normal counted as horizontal
        component_tolerance: Slack when matching |normal| to |orientation| components
        parallel_tolerance: |normal . direction| under which a line misses a face
        boundary_tolerance: Slack for the point-in-face boundary test
    """
    family_name: str = DEFAULT_FAMILY_NAME
    depth_parameter: str = DEFAULT_DEPTH_PARAMETER
    diameter_parameter: str = DEFAULT_DIAMETER_PARAMETER
    horizontal_tolerance: float = DEFAULT_TOLERANCE
    component_tolerance: float = DEFAULT_TOLERANCE
    parallel_tolerance: float = DEFAULT_TOLERANCE
    boundary_tolerance: float = DEFAULT_TOLERANCE

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """
        Check every field.

        Raises:
            ConfigurationError: If a name is empty or a tolerance is negative
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if f.type is str and not str(value).strip():
                raise ConfigurationError("must not be empty", field=f.name)
            if f.type is float and value < 0:
                raise ConfigurationError(f"must be non-negative, got {value}", field=f.name)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OpeningSettings":
        """
        Build settings from a dictionary, rejecting unknown keys.

        Raises:
            ConfigurationError: On unknown keys or invalid values
        """
        known = {f.name: f for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            if key not in known:
                raise ConfigurationError("unknown setting", field=key)
            kwargs[key] = _coerce(known[key].type, key, value)
        return cls(**kwargs)

    @classmethod
    def from_env(
        cls,
        prefix: str = ENV_PREFIX,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "OpeningSettings":
        """
        Build settings from environment variables.

        ``ROUND_OPENING_FAMILY_NAME`` maps to ``family_name`` and so on.
        Variables without a matching field are ignored.

        Args:
            prefix: Variable name prefix
            environ: Mapping to read instead of os.environ
        """
        environ = os.environ if environ is None else environ
        data = {}
        for f in fields(cls):
            env_name = prefix + f.name.upper()
            if env_name in environ:
                data[f.name] = environ[env_name]
                logger.debug(f"Setting {f.name} from {env_name}")
        return cls.from_dict(data)


def _coerce(field_type: Any, key: str, value: Any) -> Any:
    if field_type is float:
        try:
            return float(value)
        except (TypeError, ValueError):
            raise ConfigurationError(f"expected a number, got {value!r}", field=key)
    return str(value)
