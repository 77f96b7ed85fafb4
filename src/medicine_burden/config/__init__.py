# ============================================================================
# src/medicine_burden/config/__init__.py
# ============================================================================
"""
Convenient imports for all settings
"""

from .base_config import base_settings
from .resolver_config import resolver_settings
from .thresholds_config import threshold_settings
from .logging_config import logging_settings
