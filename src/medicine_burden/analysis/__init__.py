# ============================================================================
# src/medicine_burden/analysis/__init__.py
# ============================================================================
"""
Analysis pipeline: free text → resolved names → organ burdens.
"""

from .input_parser import parse_medicine_input
from .status_policy import MedicineStatus, classify_status, status_message
from .models import ResolvedMedicine, AnalysisResult
from .analyzer import MedicineAnalyzer

__all__ = [
    "parse_medicine_input",
    "MedicineStatus",
    "classify_status",
    "status_message",
    "ResolvedMedicine",
    "AnalysisResult",
    "MedicineAnalyzer",
]
