"""
Point Records

Pure mapping between point values and flat records of their scalar fields.
Field names and order are part of the persistence contract and must not change.
"""

from dataclasses import fields
from typing import Any, Dict, Mapping, Type, TypeVar

from ..points import Point2, Point3, StereoPoint2

T = TypeVar('T')

POINT_TYPES: Dict[str, type] = {
    'Point2': Point2,
    'Point3': Point3,
    'StereoPoint2': StereoPoint2,
}


def field_names(cls: type) -> tuple:
    """Ordered record field names of a point type."""
    return tuple(f.name for f in fields(cls))


def to_record(point: Any) -> Dict[str, float]:
    """
    Flatten a point into an ordered record.

    Args:
        point: Point2, Point3 or StereoPoint2 value

    Returns:
        Dict mapping field name to float, in field order
    """
    return {name: float(getattr(point, name)) for name in field_names(type(point))}


def from_record(cls: Type[T], record: Mapping[str, Any]) -> T:
    """
    Rebuild a point from its record.

    Args:
        cls: Point type to build
        record: Mapping with exactly the type's field names

    Returns:
        New point value
    """
    names = field_names(cls)
    if not isinstance(record, Mapping):
        raise ValueError(f"{cls.__name__} record must be a mapping, got {type(record).__name__}")

    missing = [name for name in names if name not in record]
    if missing:
        raise ValueError(f"{cls.__name__} record is missing fields: {', '.join(missing)}")

    extra = [key for key in record if key not in names]
    if extra:
        raise ValueError(f"{cls.__name__} record has unknown fields: {', '.join(map(str, extra))}")

    values = []
    for name in names:
        try:
            values.append(float(record[name]))
        except (TypeError, ValueError):
            raise ValueError(
                f"{cls.__name__} record field '{name}' is not a number: {record[name]!r}"
            ) from None

    return cls(*values)


def type_name(point: Any) -> str:
    """Type tag used for a point in archives."""
    name = type(point).__name__
    if name not in POINT_TYPES:
        raise ValueError(f"Unsupported point type: {name}")
    return name


def resolve_type(name: str) -> type:
    """Look up a point type from its archive tag."""
    try:
        return POINT_TYPES[name]
    except KeyError:
        raise ValueError(
            f"Unknown point type '{name}', expected one of {', '.join(POINT_TYPES)}"
        ) from None
