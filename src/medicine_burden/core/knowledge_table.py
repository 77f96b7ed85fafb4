# ============================================================================
# src/medicine_burden/core/knowledge_table.py
# ============================================================================
"""
Knowledge Table Lookup Utility.

Read-only view over the static medicine → organ mapping. Lookups normalize
the identifier (trim + lowercase) and never fail: an unknown identifier
simply affects no organs.
"""

import logging
from types import MappingProxyType
from typing import FrozenSet, Iterable, List, Mapping, Optional

from ..constants.medicine_organ_map import MEDICINE_ORGAN_MAP
from ..constants.organs import OrganId

logger = logging.getLogger(__name__)


def normalize_medicine_id(medicine_id: str) -> str:
    """Canonical form used for table keys and lookups."""
    return medicine_id.strip().lower()


class KnowledgeTable:
    """
    Immutable medicine → organ lookup table.

    Built once from a plain mapping. Keys are normalized on construction,
    so two source keys that differ only by case or padding are rejected.
    """

    def __init__(self, entries: Mapping[str, Iterable[OrganId]]):
        table = {}
        for raw_id, organs in entries.items():
            key = normalize_medicine_id(raw_id)
            if key in table:
                raise ValueError(f"Duplicate medicine id in knowledge table: '{key}'")
            table[key] = frozenset(OrganId(organ) for organ in organs)

        self._entries: Mapping[str, FrozenSet[OrganId]] = MappingProxyType(table)
        logger.debug(f"Knowledge table built with {len(table)} medicines")

    @property
    def entries(self) -> Mapping[str, FrozenSet[OrganId]]:
        """Read-only view of the normalized table."""
        return self._entries

    def affected_organs(self, medicine_id: str) -> FrozenSet[OrganId]:
        """Organs affected by a medicine, or an empty set if it is unknown."""
        return self._entries.get(normalize_medicine_id(medicine_id), frozenset())

    def is_known(self, medicine_id: str) -> bool:
        return normalize_medicine_id(medicine_id) in self._entries

    def all_known_ids(self) -> List[str]:
        """All medicine ids, sorted ascending."""
        return sorted(self._entries)

    def __contains__(self, medicine_id: object) -> bool:
        return isinstance(medicine_id, str) and self.is_known(medicine_id)

    def __len__(self) -> int:
        return len(self._entries)


# Singleton instance
_table_instance: Optional[KnowledgeTable] = None


def get_knowledge_table() -> KnowledgeTable:
    """Get the process-wide knowledge table built from the static mapping."""
    global _table_instance
    if _table_instance is None:
        _table_instance = KnowledgeTable(MEDICINE_ORGAN_MAP)
    return _table_instance


def get_affected_organs(medicine_id: str) -> FrozenSet[OrganId]:
    """
    Organs affected by a medicine.

    Convenience function that uses the singleton table.

    Args:
        medicine_id: Canonical medicine id (case and padding are ignored)

    Returns:
        Frozen set of OrganId, empty for unknown medicines
    """
    return get_knowledge_table().affected_organs(medicine_id)


def is_medicine_known(medicine_id: str) -> bool:
    """Check whether the singleton table has an entry for a medicine."""
    return get_knowledge_table().is_known(medicine_id)


def get_all_known_medicines() -> List[str]:
    """All medicines in the singleton table, sorted ascending."""
    return get_knowledge_table().all_known_ids()
