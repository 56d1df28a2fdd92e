from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional, Union

Number = Union[int, float, Decimal]


class UnitType(str, Enum):
    WEIGHT = "weight"
    VOLUME = "volume"
    COUNT = "count"


@dataclass(frozen=True)
class UnitInfo:
    label: str
    type: UnitType
    ratio: Decimal  # relative to the base unit of its type


# base units: kg (weight), liters (volume), units (count)
UNIT_MAP: Dict[str, UnitInfo] = {
    "kg": UnitInfo("Kilograms", UnitType.WEIGHT, Decimal("1")),
    "tons": UnitInfo("Tons", UnitType.WEIGHT, Decimal("1000")),
    "g": UnitInfo("Grams", UnitType.WEIGHT, Decimal("0.001")),
    "lbs": UnitInfo("Pounds", UnitType.WEIGHT, Decimal("0.453592")),

    "liters": UnitInfo("Liters", UnitType.VOLUME, Decimal("1")),
    "ml": UnitInfo("Milliliters", UnitType.VOLUME, Decimal("0.001")),
    "gal": UnitInfo("Gallons", UnitType.VOLUME, Decimal("3.78541")),

    "units": UnitInfo("Units", UnitType.COUNT, Decimal("1")),
    "bags": UnitInfo("Bags", UnitType.COUNT, Decimal("1")),
    "crates": UnitInfo("Crates", UnitType.COUNT, Decimal("1")),
    "doz": UnitInfo("Dozen", UnitType.COUNT, Decimal("12")),
}


def get_unit(unit: Optional[str]) -> Optional[UnitInfo]:
    if not unit:
        return None
    return UNIT_MAP.get(unit.strip().lower())


def convert_unit(amount: Number, from_unit: str, to_unit: str) -> Number:
    """
    Convert an amount between two units of the same type.

    Unknown units and units of different types (weight -> volume) are not
    an error: the amount is returned unchanged.
    """
    source = get_unit(from_unit)
    target = get_unit(to_unit)

    if source is None or target is None:
        return amount
    if source.type != target.type:
        return amount
    if source is target:
        return amount

    if isinstance(amount, Decimal):
        return amount * source.ratio / target.ratio
    return float(amount) * float(source.ratio) / float(target.ratio)


def get_units_by_type(unit_type: UnitType) -> List[str]:
    return [key for key, info in UNIT_MAP.items() if info.type == UnitType(unit_type)]
