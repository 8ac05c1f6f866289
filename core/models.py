from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PizzaInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    # дюйми
    diameter: float = Field(gt=0, allow_inf_nan=False)
    cost: float = Field(ge=0, allow_inf_nan=False)

    # None -> користувачу байдуже на бортик
    crust_thickness: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)

    @model_validator(mode="after")
    def _crust_fits(self) -> "PizzaInput":
        if self.crust_thickness is not None and self.crust_thickness >= self.diameter / 2:
            raise ValueError("crust_thickness must be less than half the diameter")
        return self


class BasicPricing(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["basic"] = "basic"
    price_per_area: float


class CrustPricing(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["with_crust"] = "with_crust"
    price_per_area: float

    price_per_area_excluding_crust: float
    crust_area_fraction: float  # 0..1, не відсотки
    crust_cost: float


PizzaPricingResult = Annotated[
    Union[BasicPricing, CrustPricing],
    Field(discriminator="kind"),
]
