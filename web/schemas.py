# web/schemas.py
# JSON-формат endpoint'а (camelCase, як чекає фронт).

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from core.models import BasicPricing, CrustPricing

REQUIRED_FIELDS_ERROR = "Pizza size and cost are required"
INTERNAL_ERROR = "Internal Server Error"


class PizzaPricingData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    price_per_square_inch: float = Field(alias="pricePerSquareInch")
    price_per_square_inch_without_crust: Optional[float] = Field(
        default=None, alias="pricePerSquareInchWithoutCrust"
    )
    percent_of_pizza_is_crust: Optional[float] = Field(default=None, alias="percentOfPizzaIsCrust")
    pay_for_crust: Optional[float] = Field(default=None, alias="payForCrust")

    @classmethod
    def from_result(cls, result: Union[BasicPricing, CrustPricing]) -> "PizzaPricingData":
        if isinstance(result, CrustPricing):
            return cls(
                price_per_square_inch=result.price_per_area,
                price_per_square_inch_without_crust=result.price_per_area_excluding_crust,
                percent_of_pizza_is_crust=result.crust_area_fraction,
                pay_for_crust=result.crust_cost,
            )
        return cls(price_per_square_inch=result.price_per_area)


class PizzaPricingResponse(BaseModel):
    message: str = "success!"
    data: PizzaPricingData

    def to_json(self) -> dict:
        # відсутні crust-поля не серіалізуються взагалі (не null)
        return self.model_dump(by_alias=True, exclude_none=True)


class ErrorResponse(BaseModel):
    error: str
