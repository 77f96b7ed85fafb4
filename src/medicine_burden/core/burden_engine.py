# ============================================================================
# src/medicine_burden/core/burden_engine.py
# ============================================================================
"""
Deterministic Burden Engine

Maps a list of canonical medicine ids to one burden record per organ.

How it works:
1. Every organ starts with a zero count and no contributors
2. Each input id is looked up in the knowledge table, in input order
3. Every affected organ gets +1 and the id (exactly as supplied) appended
4. Each organ's count is classified into a BurdenLevel

Unknown ids affect no organ. Repeated ids count once per occurrence.
The computation is pure: no shared state is written, so concurrent calls
need no coordination.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from ..constants.organs import BurdenLevel, OrganId
from .knowledge_table import KnowledgeTable, get_knowledge_table

logger = logging.getLogger(__name__)


@dataclass
class OrganBurden:
    """
    Burden on a single organ for one aggregation call.

    Attributes:
        organ_id: Organ this record describes
        level: Burden level derived from medicine_count
        medicine_count: Number of contributing medicine ids
        medicines: Contributing ids in input order, as supplied
    """
    organ_id: OrganId
    level: BurdenLevel
    medicine_count: int
    medicines: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "organ_id": self.organ_id.value,
            "level": self.level.value,
            "medicine_count": self.medicine_count,
            "medicines": list(self.medicines),
        }


def calculate_burden_level(count: int) -> BurdenLevel:
    """
    Classify a medicine count into a burden level.

    0 → none, 1 → low, 2 → medium, 3 → high, 4+ → critical.
    """
    if count < 0:
        raise ValueError(f"Medicine count cannot be negative: {count}")
    if count == 0:
        return BurdenLevel.NONE
    if count == 1:
        return BurdenLevel.LOW
    if count == 2:
        return BurdenLevel.MEDIUM
    if count == 3:
        return BurdenLevel.HIGH
    return BurdenLevel.CRITICAL


class BurdenAggregator:
    """
    Computes per-organ burdens against a knowledge table.

    The table defaults to the process-wide singleton; pass one explicitly
    to aggregate against a different mapping.
    """

    def __init__(self, knowledge_table: Optional[KnowledgeTable] = None):
        if knowledge_table is None:
            knowledge_table = get_knowledge_table()
        self.knowledge_table = knowledge_table

    def compute_organ_burdens(self, medicine_ids: Iterable[str]) -> List[OrganBurden]:
        """
        Compute one OrganBurden per organ, in OrganId declaration order.

        Args:
            medicine_ids: Canonical medicine ids, in input order

        Returns:
            List of OrganBurden covering every OrganId exactly once
        """
        contributors: Dict[OrganId, List[str]] = {organ: [] for organ in OrganId}

        for medicine_id in medicine_ids:
            organs = self.knowledge_table.affected_organs(medicine_id)
            if not organs:
                logger.debug(f"No organ mapping for '{medicine_id}', skipping")
                continue
            for organ in organs:
                contributors[organ].append(medicine_id)

        return [
            OrganBurden(
                organ_id=organ,
                level=calculate_burden_level(len(medicines)),
                medicine_count=len(medicines),
                medicines=medicines,
            )
            for organ, medicines in contributors.items()
        ]


def compute_organ_burdens(medicine_ids: Iterable[str]) -> List[OrganBurden]:
    """
    Compute organ burdens against the singleton knowledge table.

    Args:
        medicine_ids: Canonical medicine ids, in input order

    Returns:
        List of OrganBurden, one per OrganId in declaration order
    """
    return BurdenAggregator().compute_organ_burdens(medicine_ids)
