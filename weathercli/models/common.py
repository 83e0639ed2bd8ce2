"""Common types shared by the current-weather and forecast records."""

from enum import StrEnum

from pydantic import BaseModel

from weathercli.errors import MissingConditionDescriptor

RECORD_CONFIG = {"frozen": True, "populate_by_name": True}


class Units(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"
    STANDARD = "standard"


_UNIT_FLAGS = {
    "M": Units.METRIC,
    "I": Units.IMPERIAL,
    "S": Units.STANDARD,
}


def resolve_units(flag: str | None) -> Units:
    """Map a units flag (M/I/S or a full name) to Units.

    Anything unrecognized falls back to metric.
    """
    if isinstance(flag, Units):
        return flag
    if not flag:
        return Units.METRIC
    value = flag.strip()
    if value.upper() in _UNIT_FLAGS:
        return _UNIT_FLAGS[value.upper()]
    try:
        return Units(value.lower())
    except ValueError:
        return Units.METRIC


class Coordinates(BaseModel):
    model_config = RECORD_CONFIG

    lon: float = 0.0
    lat: float = 0.0


class Condition(BaseModel):
    """Weather condition descriptor (e.g. 800 / Clear / clear sky / 01d)."""

    model_config = RECORD_CONFIG

    id: int = 0
    main: str = ""
    description: str = ""
    icon: str = ""


def first_condition(conditions: list[Condition]) -> Condition:
    if not conditions:
        raise MissingConditionDescriptor("response has no weather condition descriptor")
    return conditions[0]
