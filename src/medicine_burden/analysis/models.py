# ============================================================================
# src/medicine_burden/analysis/models.py
# ============================================================================
"""
Analysis result models.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.burden_engine import OrganBurden
from .status_policy import MedicineStatus


@dataclass
class ResolvedMedicine:
    """
    One user-entered name after resolution and policy classification.

    Attributes:
        original_input: Name as the user typed it
        canonical_id: Resolved knowledge table id, or "unknown"
        normalized_name: Display name returned by the resolver
        confidence: Resolver confidence in [0, 1]
        status: accepted / verify / excluded
        message: Explanation shown for verify and excluded entries
    """
    original_input: str
    canonical_id: str
    normalized_name: str
    confidence: float
    status: MedicineStatus
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original_input": self.original_input,
            "canonical_id": self.canonical_id,
            "normalized_name": self.normalized_name,
            "confidence": self.confidence,
            "status": self.status.value,
            "message": self.message,
        }


@dataclass
class AnalysisResult:
    """Resolved medicines plus the organ burdens of those kept."""
    medicines: List[ResolvedMedicine] = field(default_factory=list)
    organ_burdens: List[OrganBurden] = field(default_factory=list)

    @property
    def accepted_medicines(self) -> List[ResolvedMedicine]:
        """Medicines that count toward burden (accepted or verify)."""
        return [m for m in self.medicines if m.status.counts_toward_burden]

    @property
    def excluded_medicines(self) -> List[ResolvedMedicine]:
        return [m for m in self.medicines if m.status is MedicineStatus.EXCLUDED]

    @property
    def accepted_count(self) -> int:
        return len(self.accepted_medicines)

    @property
    def excluded_count(self) -> int:
        return len(self.excluded_medicines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "medicines": [m.to_dict() for m in self.medicines],
            "organ_burdens": [b.to_dict() for b in self.organ_burdens],
            "accepted_count": self.accepted_count,
            "excluded_count": self.excluded_count,
        }
