# ============================================================================
# src/medicine_burden/constants/organs.py
# ============================================================================
"""
Organs and Burden Levels
- Closed set of tracked organs (declaration order is the presentation order)
- Ordered burden levels
- Display metadata per organ
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class OrganId(str, Enum):
    """
    Body organs scored by the burden engine.
    Every aggregation returns exactly one record per member, in this order.
    """
    LIVER = "liver"
    KIDNEY = "kidney"
    HEART = "heart"
    STOMACH = "stomach"
    BRAIN = "brain"
    LUNGS = "lungs"
    PANCREAS = "pancreas"
    INTESTINES = "intestines"


class BurdenLevel(str, Enum):
    """
    Discrete burden severity, ordered none < low < medium < high < critical.

    Comparison operators follow severity rather than the string values.
    """
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    def __lt__(self, other):
        if not isinstance(other, BurdenLevel):
            return NotImplemented
        return self.severity < other.severity

    def __le__(self, other):
        if not isinstance(other, BurdenLevel):
            return NotImplemented
        return self.severity <= other.severity

    def __gt__(self, other):
        if not isinstance(other, BurdenLevel):
            return NotImplemented
        return self.severity > other.severity

    def __ge__(self, other):
        if not isinstance(other, BurdenLevel):
            return NotImplemented
        return self.severity >= other.severity


_SEVERITY = {level: rank for rank, level in enumerate(BurdenLevel)}


@dataclass(frozen=True)
class OrganInfo:
    """Display metadata for one organ."""
    id: OrganId
    name: str
    description: str

    def to_dict(self) -> dict:
        return {
            "id": self.id.value,
            "name": self.name,
            "description": self.description,
        }


ORGAN_INFO: Mapping[OrganId, OrganInfo] = MappingProxyType({
    OrganId.LIVER: OrganInfo(
        id=OrganId.LIVER,
        name="Liver",
        description="The liver processes and metabolizes many medications. Multiple hepatotoxic medicines may increase processing load.",
    ),
    OrganId.KIDNEY: OrganInfo(
        id=OrganId.KIDNEY,
        name="Kidneys",
        description="The kidneys filter and excrete many medications. Nephrotoxic medicines may affect kidney function.",
    ),
    OrganId.HEART: OrganInfo(
        id=OrganId.HEART,
        name="Heart",
        description="Some medications can affect heart rhythm and blood pressure. Cardioactive medicines require careful monitoring.",
    ),
    OrganId.STOMACH: OrganInfo(
        id=OrganId.STOMACH,
        name="Stomach",
        description="Many oral medications can irritate the stomach lining. GI-active medicines may cause discomfort.",
    ),
    OrganId.BRAIN: OrganInfo(
        id=OrganId.BRAIN,
        name="Brain",
        description="Neuroactive medications can affect cognitive function and mood. CNS-active medicines may cause drowsiness.",
    ),
    OrganId.LUNGS: OrganInfo(
        id=OrganId.LUNGS,
        name="Lungs",
        description="Some medications can affect breathing and lung function. Pulmonary-active medicines require monitoring.",
    ),
    OrganId.PANCREAS: OrganInfo(
        id=OrganId.PANCREAS,
        name="Pancreas",
        description="The pancreas regulates blood sugar and produces enzymes. Some medicines may affect pancreatic function.",
    ),
    OrganId.INTESTINES: OrganInfo(
        id=OrganId.INTESTINES,
        name="Intestines",
        description="The intestines absorb medications and nutrients. Some medicines may affect gut motility and absorption.",
    ),
})


def get_organ_info(organ_id: OrganId) -> OrganInfo:
    """Display metadata for an organ."""
    return ORGAN_INFO[OrganId(organ_id)]
