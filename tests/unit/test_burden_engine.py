# ============================================================================
# FILE: tests/unit/test_burden_engine.py
# ============================================================================
"""
Unit tests for the burden aggregator
"""

import pytest

from medicine_burden.constants import BurdenLevel, OrganId
from medicine_burden.core import (
    BurdenAggregator,
    KnowledgeTable,
    OrganBurden,
    calculate_burden_level,
    compute_organ_burdens,
    get_affected_organs,
)


def _by_organ(burdens):
    return {b.organ_id: b for b in burdens}


def _assert_untouched(burden):
    assert burden.level is BurdenLevel.NONE
    assert burden.medicine_count == 0
    assert burden.medicines == []


@pytest.mark.parametrize("count,level", [
    (0, BurdenLevel.NONE),
    (1, BurdenLevel.LOW),
    (2, BurdenLevel.MEDIUM),
    (3, BurdenLevel.HIGH),
    (4, BurdenLevel.CRITICAL),
    (100, BurdenLevel.CRITICAL),
])
def test_calculate_burden_level(count, level):
    assert calculate_burden_level(count) is level


def test_burden_level_is_monotonic():
    levels = [calculate_burden_level(n) for n in range(10)]
    assert levels == sorted(levels)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        calculate_burden_level(-1)


def test_every_organ_present_once():
    """One record per organ in declaration order, whatever the input"""
    for ids in ([], ["paracetamol"], ["x", "y"], ["colchicine"] * 6):
        burdens = compute_organ_burdens(ids)
        assert [b.organ_id for b in burdens] == list(OrganId)


def test_empty_input_all_none():
    for burden in compute_organ_burdens([]):
        _assert_untouched(burden)


def test_single_paracetamol():
    burdens = _by_organ(compute_organ_burdens(["paracetamol"]))

    liver = burdens.pop(OrganId.LIVER)
    assert liver.level is BurdenLevel.LOW
    assert liver.medicine_count == 1
    assert liver.medicines == ["paracetamol"]

    for burden in burdens.values():
        _assert_untouched(burden)


def test_ibuprofen_and_aspirin():
    burdens = _by_organ(compute_organ_burdens(["ibuprofen", "aspirin"]))

    for organ in (OrganId.KIDNEY, OrganId.STOMACH):
        burden = burdens.pop(organ)
        assert burden.level is BurdenLevel.MEDIUM
        assert burden.medicine_count == 2
        assert burden.medicines == ["ibuprofen", "aspirin"]

    for burden in burdens.values():
        _assert_untouched(burden)


def test_antipsychotics_and_diclofenac():
    burdens = _by_organ(compute_organ_burdens(["quetiapine", "olanzapine", "diclofenac"]))

    liver = burdens.pop(OrganId.LIVER)
    assert liver.level is BurdenLevel.HIGH
    assert liver.medicines == ["quetiapine", "olanzapine", "diclofenac"]

    brain = burdens.pop(OrganId.BRAIN)
    assert brain.level is BurdenLevel.MEDIUM
    assert brain.medicines == ["quetiapine", "olanzapine"]

    assert burdens.pop(OrganId.HEART).medicines == ["quetiapine"]
    assert burdens.pop(OrganId.PANCREAS).medicines == ["olanzapine"]
    for organ in (OrganId.KIDNEY, OrganId.STOMACH):
        burden = burdens.pop(organ)
        assert burden.level is BurdenLevel.LOW
        assert burden.medicines == ["diclofenac"]

    for burden in burdens.values():
        _assert_untouched(burden)


def test_unknown_id_contributes_nothing():
    assert compute_organ_burdens(["not-a-real-drug"]) == compute_organ_burdens([])


def test_unknown_ids_mixed_with_known():
    burdens = _by_organ(compute_organ_burdens(["unknown", "paracetamol", "xyzabc123"]))
    assert burdens[OrganId.LIVER].medicines == ["paracetamol"]


def test_original_spelling_is_recorded():
    """Contributors keep the id exactly as supplied"""
    burdens = _by_organ(compute_organ_burdens([" Paracetamol ", "ACETAMINOPHEN"]))
    liver = burdens[OrganId.LIVER]
    assert liver.medicines == [" Paracetamol ", "ACETAMINOPHEN"]
    assert liver.level is BurdenLevel.MEDIUM


def test_duplicates_count_independently():
    burdens = _by_organ(compute_organ_burdens(["ibuprofen"] * 4))
    kidney = burdens[OrganId.KIDNEY]
    assert kidney.medicine_count == 4
    assert kidney.medicines == ["ibuprofen"] * 4
    assert kidney.level is BurdenLevel.CRITICAL


def test_count_matches_lookup():
    """Each organ's count equals the ids whose organ set contains it"""
    ids = ["metformin", "lisinopril", "atorvastatin", "metformin", "nope", "insulin"]
    for burden in compute_organ_burdens(ids):
        expected = sum(1 for i in ids if burden.organ_id in get_affected_organs(i))
        assert burden.medicine_count == expected
        assert burden.medicine_count == len(burden.medicines)
        assert burden.level is calculate_burden_level(burden.medicine_count)


def test_accepts_any_iterable():
    burdens = _by_organ(compute_organ_burdens(m for m in ("aspirin",)))
    assert burdens[OrganId.STOMACH].medicine_count == 1


def test_idempotent():
    ids = ["prednisone", "omeprazole", "diclofenac"]
    assert compute_organ_burdens(ids) == compute_organ_burdens(ids)


def test_results_are_independent():
    """Mutating one result does not leak into the next"""
    first = compute_organ_burdens(["paracetamol"])
    first[0].medicines.append("tampered")
    second = compute_organ_burdens(["paracetamol"])
    assert second[0].medicines == ["paracetamol"]


def test_injected_table(small_table):
    aggregator = BurdenAggregator(small_table)
    burdens = _by_organ(aggregator.compute_organ_burdens(["alpha", "Beta", "paracetamol"]))

    assert burdens[OrganId.LIVER].medicines == ["alpha"]
    assert burdens[OrganId.HEART].medicines == ["alpha"]
    assert burdens[OrganId.KIDNEY].medicines == ["Beta"]


def test_injected_empty_table_is_used():
    aggregator = BurdenAggregator(KnowledgeTable({}))
    for burden in aggregator.compute_organ_burdens(["paracetamol"]):
        _assert_untouched(burden)


def test_organ_burden_to_dict():
    burden = OrganBurden(
        organ_id=OrganId.HEART,
        level=BurdenLevel.LOW,
        medicine_count=1,
        medicines=["amlodipine"],
    )
    assert burden.to_dict() == {
        "organ_id": "heart",
        "level": "low",
        "medicine_count": 1,
        "medicines": ["amlodipine"],
    }
