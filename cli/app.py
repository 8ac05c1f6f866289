# cli/app.py
# CLI = тимчасовий UI. Його можна замінити на Web/iOS, не чіпаючи core.

from __future__ import annotations

from core.calculator import compute
from core.errors import InvalidInputError
from core.models import CrustPricing


# ---------- ДОПОМІЖНІ ФУНКЦІЇ ВВОДУ ----------

def ask_float(prompt: str, *, min_value: float | None = None) -> float:
    """Безпечний ввід числа: не ламається, поки не введуть число."""
    while True:
        raw = input(prompt).strip().replace(",", ".")
        try:
            value = float(raw)
        except ValueError:
            print("❌ Enter a number (example: 12.5)")
            continue
        if min_value is not None and value < min_value:
            print(f"❌ Value must be >= {min_value}")
            continue
        return value


def ask_yes_no(prompt: str) -> bool:
    """Безпечний ввід так/ні: повертає True або False."""
    while True:
        raw = input(prompt + " (y/n): ").strip().lower()
        if raw in ("y", "yes"):
            return True
        if raw in ("n", "no"):
            return False
        print("❌ Enter y or n")


def money(x: float) -> str:
    """Красивий формат грошей."""
    return f"${x:,.2f}"


# ---------- ОСНОВНИЙ CLI СЦЕНАРІЙ ----------

def run_cli() -> int:
    print("\n=== Pizza Price per Square Inch (CLI) ===\n")

    diameter = ask_float("Pizza size (diameter in inches): ", min_value=1)
    cost = ask_float("Pizza cost ($): ", min_value=0)

    crust = None
    if ask_yes_no("Do you care about the crust?"):
        crust = ask_float("Crust size (thickness in inches): ", min_value=0)

    try:
        result = compute(diameter, cost, crust)
    except InvalidInputError as e:
        print(f"❌ {e}")
        return 1

    print("\n--- Results ---")
    print(f"Price per square inch:                   {money(result.price_per_area)}")

    if isinstance(result, CrustPricing):
        print(f"Price per square inch (excluding crust): {money(result.price_per_area_excluding_crust)}")
        print(f"Percent of pizza that is crust:          {result.crust_area_fraction * 100:.2f}%")
        print(f"Amount paid for crust:                   {money(result.crust_cost)}")

    print("---------------\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(run_cli())
