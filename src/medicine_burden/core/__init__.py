# ============================================================================
# src/medicine_burden/core/__init__.py
# ============================================================================
"""
Core components: the static knowledge table and the burden aggregator.
"""

from .knowledge_table import (
    KnowledgeTable,
    normalize_medicine_id,
    get_knowledge_table,
    get_affected_organs,
    is_medicine_known,
    get_all_known_medicines,
)
from .burden_engine import (
    OrganBurden,
    BurdenAggregator,
    calculate_burden_level,
    compute_organ_burdens,
)

__all__ = [
    "KnowledgeTable",
    "normalize_medicine_id",
    "get_knowledge_table",
    "get_affected_organs",
    "is_medicine_known",
    "get_all_known_medicines",
    "OrganBurden",
    "BurdenAggregator",
    "calculate_burden_level",
    "compute_organ_burdens",
]
