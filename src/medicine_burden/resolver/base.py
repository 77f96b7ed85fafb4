# ============================================================================
# src/medicine_burden/resolver/base.py
# ============================================================================
"""
Base Name Resolver Interface

Defines the abstract interface for turning a free-text medicine name into
a confidence-scored canonical id guess. Backends only need to return the
raw model text; parsing and sanitizing the JSON answer is shared here.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Any, Optional
import logging
import json

from json_repair import repair_json

from ..utils.exceptions import ResolutionError

UNKNOWN_ID = "unknown"

# Confidence used when the model gives none
UNKNOWN_FALLBACK_CONFIDENCE = 0.3
KNOWN_FALLBACK_CONFIDENCE = 0.5


@dataclass
class AIResolvedMedicine:
    """
    Resolver answer for one medicine name.

    Attributes:
        canonical_id: Knowledge table id, or "unknown"
        normalized_name: Display name for the medicine
        confidence: Model confidence in [0, 1]
    """
    canonical_id: str
    normalized_name: str
    confidence: float

    @property
    def is_unknown(self) -> bool:
        return self.canonical_id == UNKNOWN_ID

    def to_dict(self) -> Dict[str, Any]:
        return {
            "canonical_id": self.canonical_id,
            "normalized_name": self.normalized_name,
            "confidence": self.confidence,
        }


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class BaseResolverClient(ABC):
    """
    Abstract base class for medicine name resolvers.

    Subclasses implement:
    - complete(): return the model's raw text answer for one name
    - model_name: identifier of the model used
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.logger = logging.getLogger(self.__class__.__name__)

        self._resolution_count = 0
        self._failure_count = 0
        self._total_resolution_time = 0.0

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Return the model identifier."""
        pass

    @abstractmethod
    async def complete(self, medicine_name: str) -> str:
        """
        Ask the model to identify a medicine.

        Returns:
            Raw text content of the model's reply

        Raises:
            ResolutionError: on any transport or provider failure
        """
        pass

    async def resolve(self, medicine_name: str) -> AIResolvedMedicine:
        """
        Resolve a free-text medicine name to a canonical id guess.

        Provider failures propagate as ResolutionError subclasses. A reply
        that cannot be parsed is not a failure: it resolves to "unknown".
        """
        start_time = datetime.now()
        try:
            content = await self.complete(medicine_name)
        except ResolutionError:
            self._failure_count += 1
            raise

        resolved = self.parse_resolution(content, medicine_name)

        elapsed = (datetime.now() - start_time).total_seconds()
        self._resolution_count += 1
        self._total_resolution_time += elapsed
        self.logger.info(
            f"Resolved '{medicine_name}' -> '{resolved.canonical_id}' "
            f"(confidence={resolved.confidence:.2f}, {elapsed:.2f}s)"
        )
        return resolved

    def parse_resolution(self, content: str, medicine_name: str) -> AIResolvedMedicine:
        """
        Turn model text into a sanitized AIResolvedMedicine.

        - No JSON object → unknown, input name, 0.3
        - Non-string canonical_id → "unknown"
        - Non-string normalized_name → the input name
        - Missing/non-numeric confidence → 0.3 if unknown, else 0.5
        - Confidence clamped to [0, 1]
        """
        parsed = self.extract_json(content)
        if parsed is None:
            return AIResolvedMedicine(
                canonical_id=UNKNOWN_ID,
                normalized_name=medicine_name,
                confidence=UNKNOWN_FALLBACK_CONFIDENCE,
            )

        canonical_id = parsed.get("canonical_id")
        if not isinstance(canonical_id, str):
            canonical_id = UNKNOWN_ID

        normalized_name = parsed.get("normalized_name")
        if not isinstance(normalized_name, str):
            normalized_name = medicine_name

        confidence = parsed.get("confidence")
        if _is_number(confidence):
            confidence = float(confidence)
        elif canonical_id == UNKNOWN_ID:
            confidence = UNKNOWN_FALLBACK_CONFIDENCE
        else:
            confidence = KNOWN_FALLBACK_CONFIDENCE

        confidence = max(0.0, min(confidence, 1.0))

        return AIResolvedMedicine(
            canonical_id=canonical_id,
            normalized_name=normalized_name,
            confidence=confidence,
        )

    def extract_json(self, response_text: str) -> Optional[Dict]:
        """
        Extract a JSON object from generated text.

        Models often wrap the object in prose or code fences. Tries a direct
        parse, then json_repair, then the first balanced {...} block.
        """
        if not response_text or not response_text.strip():
            self.logger.warning("Empty response text, no JSON to extract")
            return None

        # Try 1: Direct parse of entire response
        try:
            parsed = json.loads(response_text.strip())
            if isinstance(parsed, dict):
                return parsed
        except json.JSONDecodeError:
            pass

        # Try 2: json_repair on entire response
        try:
            repaired = repair_json(response_text, return_objects=True)
            if isinstance(repaired, dict) and repaired:
                self.logger.debug("json_repair fixed entire response")
                return repaired
        except Exception as e:
            self.logger.debug(f"json_repair failed on response: {e}")

        # Try 3: Extract first JSON block by brace matching
        start_idx = response_text.find('{')
        if start_idx == -1:
            self.logger.warning("No JSON found in response")
            return None

        depth = 0
        end_idx = len(response_text) - 1
        for i, char in enumerate(response_text[start_idx:], start=start_idx):
            if char == '{':
                depth += 1
            elif char == '}':
                depth -= 1
                if depth == 0:
                    end_idx = i
                    break

        json_str = response_text[start_idx:end_idx + 1]
        try:
            parsed = json.loads(json_str)
            if isinstance(parsed, dict):
                return parsed
        except json.JSONDecodeError:
            pass

        self.logger.warning(f"Could not parse JSON from response: {response_text[:200]}...")
        return None

    def get_statistics(self) -> Dict[str, Any]:
        """Get resolution statistics."""
        avg_time = (
            self._total_resolution_time / self._resolution_count
            if self._resolution_count > 0
            else 0.0
        )

        return {
            "model": self.model_name,
            "resolution_count": self._resolution_count,
            "failure_count": self._failure_count,
            "total_resolution_time": self._total_resolution_time,
            "average_resolution_time": avg_time,
        }

    async def close(self):
        """Release backend resources. No-op by default."""
        pass
