# ============================================================================
# src/medicine_burden/config/thresholds_config.py
# ============================================================================
"""
Confidence Thresholds
- Acceptance of an AI-resolved medicine name
- Exclusion of low-confidence guesses
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

class ThresholdSettings(BaseSettings):
    ACCEPT_CONFIDENCE_THRESHOLD: float = Field(
        default=0.70,
        ge=0.0, le=1.0,
        description="At or above this confidence a resolved name is accepted as-is"
    )
    VERIFY_CONFIDENCE_THRESHOLD: float = Field(
        default=0.40,
        ge=0.0, le=1.0,
        description="Below this confidence a resolved name is excluded. Between the two thresholds it is kept but flagged for the user to verify."
    )

    @model_validator(mode="after")
    def check_threshold_order(self):
        if self.ACCEPT_CONFIDENCE_THRESHOLD <= self.VERIFY_CONFIDENCE_THRESHOLD:
            raise ValueError(
                "ACCEPT_CONFIDENCE_THRESHOLD must be greater than VERIFY_CONFIDENCE_THRESHOLD"
            )
        return self

threshold_settings = ThresholdSettings()
