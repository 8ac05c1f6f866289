"""Quick runtime checks for the pizza calculator.
Run: python scripts/quickcheck.py
Exits with code 0 on success, non-zero on failure.
"""
import math

from core.calculator import compute
from core.models import BasicPricing, CrustPricing


def approx(a, b, tol=1e-6):
    return abs(a - b) <= tol


def main():
    plain = compute(12, 15.99)
    assert isinstance(plain, BasicPricing)
    assert approx(plain.price_per_area, 15.99 / (math.pi * 36))

    res = compute(12, 15.99, 2)
    assert isinstance(res, CrustPricing)
    assert approx(res.price_per_area_excluding_crust, 15.99 / (math.pi * 25))
    assert approx(res.crust_area_fraction, 11 / 36)
    assert approx(res.crust_cost, 15.99 * 11 / 36)

    print("Quickcheck OK")


if __name__ == '__main__':
    main()
