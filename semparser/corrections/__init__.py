from .base import Correction, CorrectionNotInitializedError
from .damerau_levenshtein import MAX_EDIT_DISTANCE, NO_MATCH, DamerauLevenshteinCorrection
from .registry import CORRECTIONS, build_correction, build_correction_from_settings
from .similarities import DamerauLevenshteinDistance, DistanceCalculator, calculate_distance
from .stemming import StemmingCorrection

__all__ = [
    "CORRECTIONS",
    "Correction",
    "CorrectionNotInitializedError",
    "DamerauLevenshteinCorrection",
    "DamerauLevenshteinDistance",
    "DistanceCalculator",
    "MAX_EDIT_DISTANCE",
    "NO_MATCH",
    "StemmingCorrection",
    "build_correction",
    "build_correction_from_settings",
    "calculate_distance",
]
