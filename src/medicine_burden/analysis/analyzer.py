# ============================================================================
# src/medicine_burden/analysis/analyzer.py
# ============================================================================
"""
Medicine Analyzer

End-to-end flow from free text to organ burdens:
1. Parse the input into distinct names
2. Resolve each name with the AI resolver, one at a time
3. Classify each resolution (accepted / verify / excluded)
4. Aggregate burdens over the ids that were not excluded

Names are resolved sequentially to stay under provider rate limits.
A failure on one name excludes that name only.
"""

import logging
from typing import Optional

from ..core.burden_engine import BurdenAggregator
from ..resolver.base import BaseResolverClient, UNKNOWN_ID
from ..utils.exceptions import InvalidInputError, ResolutionError
from .input_parser import parse_medicine_input
from .models import AnalysisResult, ResolvedMedicine
from .status_policy import MedicineStatus, classify_status, status_message

logger = logging.getLogger(__name__)


class MedicineAnalyzer:
    """Runs name resolution and burden aggregation for one user input."""

    def __init__(
        self,
        resolver: BaseResolverClient,
        aggregator: Optional[BurdenAggregator] = None,
    ):
        self.resolver = resolver
        self.aggregator = aggregator or BurdenAggregator()

    async def resolve_name(self, name: str) -> ResolvedMedicine:
        """Resolve and classify a single name. Never raises for provider errors."""
        try:
            resolved = await self.resolver.resolve(name)
        except ResolutionError as e:
            logger.warning(f"Error resolving '{name}': {e}")
            return _excluded(name, str(e) or "Failed to resolve medicine name")
        except Exception:
            logger.exception(f"Error processing medicine '{name}'")
            return _excluded(name, "An error occurred while processing")

        return ResolvedMedicine(
            original_input=name,
            canonical_id=resolved.canonical_id,
            normalized_name=resolved.normalized_name,
            confidence=resolved.confidence,
            status=classify_status(resolved.confidence, resolved.canonical_id),
            message=status_message(resolved.confidence, resolved.canonical_id),
        )

    async def analyze(self, text: str) -> AnalysisResult:
        """
        Analyze a free-text list of medicines.

        Raises:
            InvalidInputError: if the text contains no medicine names
        """
        names = parse_medicine_input(text)
        if not names:
            raise InvalidInputError("Please enter at least one medicine name")

        logger.info(f"Analyzing {len(names)} medicine name(s)")

        medicines = []
        for name in names:
            medicines.append(await self.resolve_name(name))

        result = AnalysisResult(medicines=medicines)
        result.organ_burdens = self.aggregator.compute_organ_burdens(
            m.canonical_id for m in result.accepted_medicines
        )

        logger.info(
            f"Analysis complete: {result.accepted_count} kept, "
            f"{result.excluded_count} excluded"
        )
        return result


def _excluded(name: str, message: str) -> ResolvedMedicine:
    return ResolvedMedicine(
        original_input=name,
        canonical_id=UNKNOWN_ID,
        normalized_name=name,
        confidence=0.0,
        status=MedicineStatus.EXCLUDED,
        message=message,
    )
