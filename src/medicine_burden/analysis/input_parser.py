# ============================================================================
# src/medicine_burden/analysis/input_parser.py
# ============================================================================
"""
Free-text medicine list parsing.
"""

import re
from typing import List

# Separators: comma, plus, or the standalone word "and"
_SEPARATOR_PATTERN = re.compile(r"[,+]|\band\b", re.IGNORECASE)


def parse_medicine_input(text: str) -> List[str]:
    """
    Split user input into individual medicine names.

    "Tylenol, ibuprofen and aspirin + tylenol" → ["Tylenol", "ibuprofen", "aspirin"]

    Names are trimmed, empty pieces dropped, and repeats removed
    case-insensitively (the first spelling wins, order is kept).
    """
    seen = set()
    names = []
    for part in _SEPARATOR_PATTERN.split(text):
        name = part.strip()
        if not name:
            continue
        key = name.lower()
        if key in seen:
            continue
        seen.add(key)
        names.append(name)
    return names
