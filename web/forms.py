# web/forms.py
# Стан HTML-форми. Новий FormState на кожен запит, нічого глобального.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from core.calculator import compute
from core.errors import InvalidInputError
from core.models import BasicPricing, CrustPricing
from web.schemas import REQUIRED_FIELDS_ERROR


def money(x: float) -> str:
    return f"${x:,.2f}"


def percent(fraction: float) -> str:
    return f"{fraction * 100:.2f}%"


def _parse_number(raw: str) -> Optional[float]:
    raw = raw.strip().replace(",", ".")
    if raw == "":
        return None
    try:
        return float(raw)
    except ValueError:
        return None


@dataclass
class FormState:
    pizza_size: str = ""
    pizza_cost: str = ""
    cares_about_crust: bool = False
    crust_size: str = ""

    errors: dict[str, str] = field(default_factory=dict)
    result: Optional[Union[BasicPricing, CrustPricing]] = None

    def submit(self) -> None:
        """Перевіряє поля (як у фронтовій схемі) і рахує результат."""
        self.errors.clear()
        self.result = None

        size = _parse_number(self.pizza_size)
        cost = _parse_number(self.pizza_cost)
        crust = _parse_number(self.crust_size) if self.cares_about_crust else None

        if size is None or size < 1:
            self.errors["pizza_size"] = "Pizza size must be at least 1 inch"
        if cost is None or cost < 0:
            self.errors["pizza_cost"] = "Pizza cost must be at least $0"
        if self.cares_about_crust and (crust is None or crust < 0):
            self.errors["crust_size"] = "Crust size must be at least 0"
        if self.errors:
            return
        # як і /api/pizza: безкоштовна піца не рахується
        if not cost:
            self.errors["form"] = REQUIRED_FIELDS_ERROR
            return

        try:
            self.result = compute(size, cost, crust)
        except InvalidInputError as e:
            self.errors["form"] = str(e)

    @property
    def result_rows(self) -> list[tuple[str, str]]:
        if self.result is None:
            return []

        rows = [("Price per square inch", money(self.result.price_per_area))]
        if isinstance(self.result, CrustPricing):
            rows += [
                ("Price per square inch (excluding crust)", money(self.result.price_per_area_excluding_crust)),
                ("Percent of pizza that is crust", percent(self.result.crust_area_fraction)),
                ("Amount paid for crust", money(self.result.crust_cost)),
            ]
        return rows
