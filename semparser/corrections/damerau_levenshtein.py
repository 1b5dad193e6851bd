import logging
from dataclasses import dataclass
from typing import Sequence

from semparser.corrections.base import Correction
from semparser.corrections.similarities import DamerauLevenshteinDistance, DistanceCalculator
from semparser.dictionaries import Dictionary
from semparser.parser.model import FoundWord, Word

logger = logging.getLogger(__name__)

MAX_EDIT_DISTANCE = 2
NO_MATCH = -1


@dataclass(frozen=True)
class WordDistance:
    distance: int
    word: Word


class DamerauLevenshteinCorrection(Correction):
    name = "damerau_levenshtein"

    def __init__(
        self,
        max_distance: int = MAX_EDIT_DISTANCE,
        lookup_if_known: bool = False,
        *,
        distance_calculator: DistanceCalculator | None = None,
    ) -> None:
        if isinstance(max_distance, bool) or not isinstance(max_distance, int):
            raise ValueError(f"max_distance must be an integer, got {max_distance!r}")
        if max_distance < 0:
            raise ValueError(f"max_distance must be non-negative, got {max_distance}")

        super().__init__(lookup_if_known=lookup_if_known)
        self._max_distance = max_distance
        self.distance_calculator = distance_calculator or DamerauLevenshteinDistance()

    @property
    def max_distance(self) -> int:
        return self._max_distance

    def calculate_distance(self, lookup: str, word: str) -> int:
        # Edit distance is at least the length difference, so those words skip the table.
        if len(word) < len(lookup) - self._max_distance or len(word) > len(lookup) + self._max_distance:
            return NO_MATCH

        distance = self.distance_calculator.calculate(word, lookup)
        if distance > self._max_distance:
            return NO_MATCH
        return distance

    def correct_word(
        self,
        word: str,
        temporary_dictionaries: Sequence[Dictionary] | None = None,
    ) -> list[FoundWord]:
        dictionaries = self._merged_dictionaries(temporary_dictionaries)
        lookup = word.lower()

        found: list[WordDistance] = []
        for dictionary in dictionaries:
            for entry in dictionary.get_words():
                distance = self.calculate_distance(lookup, entry.value.lower())
                if distance > NO_MATCH:
                    found.append(WordDistance(distance, entry))

        # list.sort is stable: equal distances keep dictionary order.
        found.sort(key=lambda item: item.distance)

        logger.debug(
            "corrected %r against %s dictionaries: %s candidates",
            lookup,
            len(dictionaries),
            len(found),
        )

        return [
            FoundWord(word=item.word, is_exact=True, accuracy=1.0 - item.distance)
            for item in found
        ]
