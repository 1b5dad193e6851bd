from typing import Any

from semparser.common.config import Settings
from semparser.corrections.base import Correction
from semparser.corrections.damerau_levenshtein import DamerauLevenshteinCorrection
from semparser.corrections.stemming import StemmingCorrection

CORRECTIONS: dict[str, type[Correction]] = {
    DamerauLevenshteinCorrection.name: DamerauLevenshteinCorrection,
    StemmingCorrection.name: StemmingCorrection,
}


def build_correction(name: str, **options: Any) -> Correction:
    try:
        correction_cls = CORRECTIONS[name]
    except KeyError:
        known = ", ".join(sorted(CORRECTIONS))
        raise ValueError(f"unknown correction strategy {name!r}; expected one of: {known}") from None
    return correction_cls(**options)


def build_correction_from_settings(config: Settings) -> Correction:
    if config.correction_strategy == StemmingCorrection.name:
        return build_correction(
            config.correction_strategy,
            lookup_if_known=config.lookup_if_known,
            accuracy=config.stemming_accuracy,
        )
    if config.correction_strategy == DamerauLevenshteinCorrection.name:
        return build_correction(
            config.correction_strategy,
            max_distance=config.max_distance,
            lookup_if_known=config.lookup_if_known,
        )
    return build_correction(config.correction_strategy)
