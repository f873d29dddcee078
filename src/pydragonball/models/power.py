"""Ki power-level scaling for power bars."""

from __future__ import annotations

import re

# Ascending order; matched from the largest down.
_MULTIPLIERS: tuple[tuple[str, float], ...] = (
    ("thousand", 20),
    ("million", 35),
    ("billion", 50),
    ("trillion", 65),
    ("quadrillion", 75),
    ("quintillion", 80),
    ("sextillion", 85),
    ("septillion", 90),
    ("octillion", 95),
    ("nonillion", 98),
    ("decillion", 100),
)

# Plain numbers, as (lower bound, percentage).
_PLAIN_STEPS: tuple[tuple[float, float], ...] = (
    (1e9, 50),
    (1e8, 45),
    (1e7, 40),
    (1e6, 35),
    (1e5, 30),
    (1e4, 25),
    (1e3, 20),
    (100, 15),
    (10, 10),
)

_DEFAULT_PERCENTAGE = 15.0


def ki_power_percentage(ki: str | None) -> float:
    """Map a free-form ki string to a 0-100 power-bar percentage.

    ``"Unknown"``, ``"0"`` and empty values map to ``0``. Named magnitudes
    (``"90 Septillion"``) use a fixed table, nudged up for large leading
    numbers. Plain numbers use a logarithmic step table where ``.`` and
    ``,`` are thousands separators.
    """
    if not ki or ki == "0" or "unknown" in ki.lower():
        return 0.0

    text = ki.lower()
    for name, percentage in reversed(_MULTIPLIERS):
        if name not in text:
            continue
        match = re.search(rf"(\d+(?:[.,]\d+)?)\s*{name}", text)
        if match is None:
            return percentage
        base = float(match.group(1).replace(",", "."))
        if base >= 100:
            return min(100.0, percentage + 10)
        if base >= 10:
            return min(100.0, percentage + 5)
        return percentage

    # The API writes plain ki with dot grouping ("60.000.000"), so "." is a
    # thousands separator here, not a decimal point.
    digits = re.search(r"\d[\d.,]*", text)
    if digits is None:
        return _DEFAULT_PERCENTAGE
    value = float(re.sub(r"[.,]", "", digits.group(0)))
    for bound, percentage in _PLAIN_STEPS:
        if value >= bound:
            return percentage
    return max(5.0, (value / 10) * 5)
