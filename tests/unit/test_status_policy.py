# ============================================================================
# FILE: tests/unit/test_status_policy.py
# ============================================================================
"""
Unit tests for the confidence policy
"""

import pytest

from medicine_burden.analysis import MedicineStatus, classify_status, status_message


@pytest.mark.parametrize("confidence,canonical_id,expected", [
    (0.98, "paracetamol", MedicineStatus.ACCEPTED),
    (0.70, "paracetamol", MedicineStatus.ACCEPTED),
    (0.69, "paracetamol", MedicineStatus.VERIFY),
    (0.40, "paracetamol", MedicineStatus.VERIFY),
    (0.39, "paracetamol", MedicineStatus.EXCLUDED),
    (0.99, "unknown", MedicineStatus.EXCLUDED),
])
def test_classify_status(confidence, canonical_id, expected):
    assert classify_status(confidence, canonical_id) is expected


@pytest.mark.parametrize("confidence,canonical_id,expected", [
    (0.95, "aspirin", None),
    (0.50, "aspirin", "Please verify this interpretation is correct"),
    (0.10, "aspirin", "Confidence too low to include"),
    (0.95, "unknown", "Could not identify this medicine"),
])
def test_status_message(confidence, canonical_id, expected):
    assert status_message(confidence, canonical_id) == expected


def test_custom_thresholds():
    assert classify_status(0.6, "aspirin", accept_threshold=0.5, verify_threshold=0.2) is MedicineStatus.ACCEPTED
    assert classify_status(0.3, "aspirin", accept_threshold=0.5, verify_threshold=0.2) is MedicineStatus.VERIFY
    assert status_message(0.1, "aspirin", accept_threshold=0.5, verify_threshold=0.2) == "Confidence too low to include"


def test_counts_toward_burden():
    assert MedicineStatus.ACCEPTED.counts_toward_burden
    assert MedicineStatus.VERIFY.counts_toward_burden
    assert not MedicineStatus.EXCLUDED.counts_toward_burden
