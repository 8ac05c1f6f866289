# core/rules.py
# Геометрія піци + перевірка чисел.

from __future__ import annotations

import math

from .errors import InvalidInputError


def as_finite(value: object, name: str) -> float:
    """Приводить value до float або кидає InvalidInputError."""
    if value is None:
        raise InvalidInputError(f"{name} is required")
    # bool теж int, але True дюймів -- це не розмір
    if isinstance(value, bool):
        raise InvalidInputError(f"{name} must be a number")
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name} must be a number") from e
    if not math.isfinite(number):
        raise InvalidInputError(f"{name} must be a finite number")
    return number


def circle_area(radius: float) -> float:
    """Площа кола = pi * r^2."""
    return math.pi * radius * radius


def radius_without_crust(diameter: float, crust_size: float) -> float:
    """
    Радіус частини без бортика.

    crust_size зменшує діаметр один раз (не з кожного боку):
    (diameter - crust_size) / 2.
    """
    return (diameter - crust_size) / 2.0


def crust_area_fraction(diameter: float, crust_size: float) -> float:
    """
    Частка площі під бортиком = 1 - (inner_r / r)^2.

    Через відношення радіусів, а не площ: площі на великих діаметрах
    переповнюються в inf, а inf / inf = nan.
    """
    ratio = (diameter - crust_size) / diameter
    return 1.0 - ratio * ratio


def require_area(area: float, what: str) -> float:
    """Площа має бути скінченною і > 0, інакше на неї не поділиш."""
    if not math.isfinite(area) or area <= 0:
        raise InvalidInputError(f"{what} is out of range: area {area!r} is not usable")
    return area


def require_finite(value: float, name: str) -> float:
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} is out of range")
    return value
