# ============================================================================
# src/medicine_burden/analysis/status_policy.py
# ============================================================================
"""
Confidence policy for AI-resolved medicine names.

A resolved name is:
- excluded  when the id is "unknown" or confidence < verify threshold
- accepted  when confidence >= accept threshold
- verify    otherwise (kept, but the user should double-check it)
"""

from enum import Enum
from typing import Optional

from ..config.thresholds_config import threshold_settings
from ..resolver.base import UNKNOWN_ID


class MedicineStatus(str, Enum):
    ACCEPTED = "accepted"
    VERIFY = "verify"
    EXCLUDED = "excluded"

    @property
    def counts_toward_burden(self) -> bool:
        return self is not MedicineStatus.EXCLUDED


def classify_status(
    confidence: float,
    canonical_id: str,
    accept_threshold: Optional[float] = None,
    verify_threshold: Optional[float] = None,
) -> MedicineStatus:
    """Classify a resolution by its confidence and canonical id."""
    if accept_threshold is None:
        accept_threshold = threshold_settings.ACCEPT_CONFIDENCE_THRESHOLD
    if verify_threshold is None:
        verify_threshold = threshold_settings.VERIFY_CONFIDENCE_THRESHOLD

    if canonical_id == UNKNOWN_ID or confidence < verify_threshold:
        return MedicineStatus.EXCLUDED
    if confidence >= accept_threshold:
        return MedicineStatus.ACCEPTED
    return MedicineStatus.VERIFY


def status_message(
    confidence: float,
    canonical_id: str,
    accept_threshold: Optional[float] = None,
    verify_threshold: Optional[float] = None,
) -> Optional[str]:
    """User-facing explanation for a non-accepted resolution, else None."""
    if accept_threshold is None:
        accept_threshold = threshold_settings.ACCEPT_CONFIDENCE_THRESHOLD
    if verify_threshold is None:
        verify_threshold = threshold_settings.VERIFY_CONFIDENCE_THRESHOLD

    if canonical_id == UNKNOWN_ID:
        return "Could not identify this medicine"
    if confidence < verify_threshold:
        return "Confidence too low to include"
    if confidence < accept_threshold:
        return "Please verify this interpretation is correct"
    return None
