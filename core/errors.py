# core/errors.py
# Помилки core. Web/CLI самі вирішують, як їх показати.

from __future__ import annotations


class InvalidInputError(ValueError):
    """Вхідні дані не дають фізично можливої піци (або це взагалі не числа)."""
