# ============================================================================
# src/medicine_burden/__init__.py
# ============================================================================
"""
Medicine Burden Visualizer - educational organ burden engine.

Not medical advice: the medicine → organ table is illustrative only.
"""

from .constants import OrganId, BurdenLevel, ORGAN_INFO
from .core import (
    KnowledgeTable,
    OrganBurden,
    BurdenAggregator,
    compute_organ_burdens,
    get_affected_organs,
    is_medicine_known,
    get_all_known_medicines,
)

__version__ = "1.0.0"

__all__ = [
    "OrganId",
    "BurdenLevel",
    "ORGAN_INFO",
    "KnowledgeTable",
    "OrganBurden",
    "BurdenAggregator",
    "compute_organ_burdens",
    "get_affected_organs",
    "is_medicine_known",
    "get_all_known_medicines",
]
