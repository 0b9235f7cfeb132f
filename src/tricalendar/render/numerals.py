from __future__ import annotations

from typing import Dict

# English digits (0-9) to Bengali (০-৯)
ENGLISH_TO_BENGALI_NUMS: Dict[str, str] = {
    "0": "০", "1": "১", "2": "২", "3": "৩", "4": "৪",
    "5": "৫", "6": "৬", "7": "৭", "8": "৮", "9": "৯",
}

_TRANS = str.maketrans(ENGLISH_TO_BENGALI_NUMS)


def to_bengali_number(num) -> str:
    """Render an integer (or any string of digits) with Bengali digits; other characters pass through."""
    return str(num).translate(_TRANS)
