# ============================================================================
# src/medicine_burden/resolver/__init__.py
# ============================================================================
"""
Resolver module - AI-assisted medicine name resolution
"""

from .base import AIResolvedMedicine, BaseResolverClient, UNKNOWN_ID
from .openrouter_client import OpenRouterResolverClient
from .prompts import SYSTEM_PROMPT, build_messages

__all__ = [
    "AIResolvedMedicine",
    "BaseResolverClient",
    "UNKNOWN_ID",
    "OpenRouterResolverClient",
    "SYSTEM_PROMPT",
    "build_messages",
]
