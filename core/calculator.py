from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from .errors import InvalidInputError
from .models import BasicPricing, CrustPricing, PizzaInput, PizzaPricingResult
from .rules import (
    as_finite,
    circle_area,
    crust_area_fraction,
    radius_without_crust,
    require_area,
    require_finite,
)

logger = logging.getLogger(__name__)


def _validation_message(e: ValidationError) -> str:
    err = e.errors()[0]
    field = ".".join(str(p) for p in err.get("loc", ()))
    msg = str(err.get("msg", "invalid input")).removeprefix("Value error, ")
    return f"{field}: {msg}" if field else msg


def validate_input(diameter: object, cost: object, crust_thickness: object = None) -> PizzaInput:
    """Перетворює сирі значення на PizzaInput або кидає InvalidInputError."""
    d = as_finite(diameter, "diameter")
    c = as_finite(cost, "cost")
    crust = None if crust_thickness is None else as_finite(crust_thickness, "crust_thickness")

    try:
        return PizzaInput(diameter=d, cost=c, crust_thickness=crust)
    except ValidationError as e:
        raise InvalidInputError(_validation_message(e)) from e


def calculate_pricing(inp: PizzaInput) -> PizzaPricingResult:
    total_area = require_area(circle_area(inp.diameter / 2.0), "diameter")
    price_per_area = require_finite(inp.cost / total_area, "price_per_area")

    if inp.crust_thickness is None:
        logger.debug("pizza d=%s cost=%s -> %.6f/sq in", inp.diameter, inp.cost, price_per_area)
        return BasicPricing(price_per_area=price_per_area)

    inner_area = require_area(
        circle_area(radius_without_crust(inp.diameter, inp.crust_thickness)), "crust_thickness"
    )
    fraction = crust_area_fraction(inp.diameter, inp.crust_thickness)

    logger.debug(
        "pizza d=%s cost=%s crust=%s -> %.6f/sq in, crust share %.4f",
        inp.diameter, inp.cost, inp.crust_thickness, price_per_area, fraction,
    )
    return CrustPricing(
        price_per_area=price_per_area,
        price_per_area_excluding_crust=require_finite(inp.cost / inner_area, "price_per_area_excluding_crust"),
        crust_area_fraction=fraction,
        crust_cost=require_finite(inp.cost * fraction, "crust_cost"),
    )


def compute(
    diameter: object,
    cost: object,
    crust_thickness: Optional[object] = None,
) -> PizzaPricingResult:
    """
    Ціна за квадратний дюйм піци.

    Якщо crust_thickness передано -- додатково рахує ціну без бортика,
    частку площі під бортиком і скільки з ціни за нього заплачено.
    Кидає InvalidInputError на неможливих вхідних даних.
    """
    return calculate_pricing(validate_input(diameter, cost, crust_thickness))
