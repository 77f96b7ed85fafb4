# ============================================================================
# src/medicine_burden/constants/__init__.py
# ============================================================================
"""
Convenient imports for all constants
"""

from .organs import OrganId, BurdenLevel, OrganInfo, ORGAN_INFO, get_organ_info
from .medicine_organ_map import MEDICINE_ORGAN_MAP
