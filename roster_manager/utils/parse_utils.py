# utils/parse_utils.py
from typing import Optional


def parse_int(text: str) -> Optional[int]:
    """
    ' 42' -> 42, '-3' -> -3
    '4.2', 'abc', '' -> None
    """
    text = (text or "").strip()
    try:
        return int(text)
    except ValueError:
        return None


def parse_amount(text: str) -> Optional[float]:
    """
    '5000' -> 5000.0, '1,250.50' -> 1250.5
    blank, non-numeric, nan/inf -> None
    Negative values are returned as-is; range checks belong to the model.
    """
    text = (text or "").strip().replace(",", "")
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if value != value or value in (float("inf"), float("-inf")):
        return None
    return value
