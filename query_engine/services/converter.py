"""
Unit Converter Module
Extracts "<value> <unit> to|in <unit>" from a query and converts within one dimension
"""
import logging
import math
import re
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from ..config import settings
from ..models.responses import EvaluationResult, ItemType, ResultItem
from ..utils.formatting import format_exact, format_number
from ..utils.validators import within_length_bound

logger = logging.getLogger(__name__)


# Matched against the lower-cased query; first match only
CONVERSION_PATTERN = re.compile(r"([0-9]+\.?[0-9]*)\s*([a-z]+)\s+(?:to|in)\s+([a-z]+)")


def _table(entries: dict) -> Mapping[str, float]:
    return MappingProxyType(entries)


# Base unit: meter
LENGTH_UNITS = _table({
    "m": 1.0, "meter": 1.0, "meters": 1.0,
    "km": 1000.0, "kilometer": 1000.0, "kilometers": 1000.0,
    "cm": 0.01, "centimeter": 0.01, "centimeters": 0.01,
    "mm": 0.001, "millimeter": 0.001, "millimeters": 0.001,
    "mi": 1609.344, "mile": 1609.344, "miles": 1609.344,
    "ft": 0.3048, "foot": 0.3048, "feet": 0.3048,
    "in": 0.0254, "inch": 0.0254, "inches": 0.0254,
    "yd": 0.9144, "yard": 0.9144, "yards": 0.9144,
})

# Base unit: gram
WEIGHT_UNITS = _table({
    "g": 1.0, "gram": 1.0, "grams": 1.0,
    "kg": 1000.0, "kilogram": 1000.0, "kilograms": 1000.0,
    "mg": 0.001, "milligram": 0.001, "milligrams": 0.001,
    "lb": 453.592, "lbs": 453.592, "pound": 453.592, "pounds": 453.592,
    "oz": 28.3495, "ounce": 28.3495, "ounces": 28.3495,
    "t": 1_000_000.0, "ton": 1_000_000.0, "tons": 1_000_000.0,
})

# Base unit: second; a year is 365 days
TIME_UNITS = _table({
    "s": 1.0, "sec": 1.0, "second": 1.0, "seconds": 1.0,
    "ms": 0.001, "millisecond": 0.001, "milliseconds": 0.001,
    "min": 60.0, "minute": 60.0, "minutes": 60.0,
    "h": 3600.0, "hr": 3600.0, "hour": 3600.0, "hours": 3600.0,
    "d": 86400.0, "day": 86400.0, "days": 86400.0,
    "w": 604800.0, "week": 604800.0, "weeks": 604800.0,
    "y": 31536000.0, "year": 31536000.0, "years": 31536000.0,
})

# Base unit: byte; binary prefixes
DATA_UNITS = _table({
    "b": 1.0, "byte": 1.0, "bytes": 1.0,
    "kb": 1024.0, "kilobyte": 1024.0, "kilobytes": 1024.0,
    "mb": 1024.0 ** 2, "megabyte": 1024.0 ** 2, "megabytes": 1024.0 ** 2,
    "gb": 1024.0 ** 3, "gigabyte": 1024.0 ** 3, "gigabytes": 1024.0 ** 3,
    "tb": 1024.0 ** 4, "terabyte": 1024.0 ** 4, "terabytes": 1024.0 ** 4,
})

# Temperature has no multiplicative base; names map to a canonical scale
TEMPERATURE_UNITS = MappingProxyType({
    "c": "celsius", "celsius": "celsius",
    "f": "fahrenheit", "fahrenheit": "fahrenheit",
    "k": "kelvin", "kelvin": "kelvin",
})


def parse_conversion(query: str) -> Optional[Tuple[float, str, str]]:
    """
    Extract the value and unit tokens from a conversion query

    Args:
        query: Free text such as "100km in miles"

    Returns:
        (value, from_unit, to_unit), or None if nothing matches
    """
    match = CONVERSION_PATTERN.search(query.lower())
    if not match:
        return None

    value, from_unit, to_unit = match.groups()
    return float(value), from_unit, to_unit


def convert_linear(
    value: float,
    from_unit: str,
    to_unit: str,
    table: Mapping[str, float]
) -> Optional[float]:
    """Convert through the table's base unit, or None if either unit is absent"""
    if from_unit not in table or to_unit not in table:
        return None

    return value * table[from_unit] / table[to_unit]


def convert_temperature(value: float, from_unit: str, to_unit: str) -> Optional[float]:
    """
    Convert between celsius, fahrenheit and kelvin via celsius

    Args:
        value: Source temperature
        from_unit: Any temperature unit name
        to_unit: Any temperature unit name

    Returns:
        Converted temperature, or None if either name is not a temperature unit
    """
    source = TEMPERATURE_UNITS.get(from_unit)
    target = TEMPERATURE_UNITS.get(to_unit)
    if source is None or target is None:
        return None

    if source == "fahrenheit":
        celsius = (value - 32.0) * 5.0 / 9.0
    elif source == "kelvin":
        celsius = value - 273.15
    else:
        celsius = value

    if target == "fahrenheit":
        return celsius * 9.0 / 5.0 + 32.0
    if target == "kelvin":
        return celsius + 273.15
    return celsius


def convert(value: float, from_unit: str, to_unit: str) -> Optional[float]:
    """
    Convert a value between two units of the same dimension

    Dimensions are tried in order: length, weight, temperature, time, data.
    The first dimension that knows both units wins.

    Args:
        value: Source value
        from_unit: Lower-case unit name
        to_unit: Lower-case unit name

    Returns:
        Converted value, or None for unknown units or mixed dimensions
    """
    for table in (LENGTH_UNITS, WEIGHT_UNITS):
        result = convert_linear(value, from_unit, to_unit, table)
        if result is not None:
            return result

    result = convert_temperature(value, from_unit, to_unit)
    if result is not None:
        return result

    for table in (TIME_UNITS, DATA_UNITS):
        result = convert_linear(value, from_unit, to_unit, table)
        if result is not None:
            return result

    logger.debug(f"No shared dimension for {from_unit!r} -> {to_unit!r}")
    return None


def resolve(query: str) -> Optional[Tuple[float, str, str, float]]:
    """
    Parse and convert a conversion query

    Args:
        query: Free text, e.g. "1 km to m"

    Returns:
        (value, from_unit, to_unit, converted), or None
    """
    if not within_length_bound(query):
        return None

    parsed = parse_conversion(query)
    if parsed is None:
        return None

    value, from_unit, to_unit = parsed
    result = convert(value, from_unit, to_unit)
    if result is None:
        return None

    if not (math.isfinite(value) and math.isfinite(result)):
        logger.debug(f"Non-finite conversion for {query!r}")
        return None

    logger.debug(f"Converted {value} {from_unit} -> {result} {to_unit}")
    return value, from_unit, to_unit, result


def resolve_result(query: str) -> EvaluationResult:
    """Resolve a converter query into an EvaluationResult"""
    resolved = resolve(query)

    if resolved is None:
        return EvaluationResult.no_match()

    return EvaluationResult.converted(*resolved)


def converter_items(query: str) -> List[ResultItem]:
    """
    Build the converter result row for a query

    Args:
        query: Full converter query

    Returns:
        One ResultItem whose content is the formatted converted value, or an empty list
    """
    resolved = resolve(query)
    if resolved is None:
        return []

    value, from_unit, to_unit, result = resolved
    display = format_number(result, settings.converter_precision)
    source = format_exact(value)

    return [
        ResultItem(
            id=f"convert:{display}",
            name=f"{source} {from_unit} = {display} {to_unit}",
            description="Press Enter to copy result",
            item_type=ItemType.CONVERTER,
            icon="accessories-calculator",
            content=display
        )
    ]
