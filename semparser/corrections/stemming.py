import logging
from typing import Protocol, Sequence

from nltk.stem import PorterStemmer

from semparser.corrections.base import Correction
from semparser.dictionaries import Dictionary
from semparser.parser.model import FoundWord

logger = logging.getLogger(__name__)

STEMMING_ACCURACY = 0.9


class Stemmer(Protocol):
    def stem(self, word: str) -> str:
        ...


class StemmingCorrection(Correction):
    """Matches dictionary words that share the input's Porter stem."""

    name = "stemming"

    def __init__(
        self,
        lookup_if_known: bool = False,
        accuracy: float = STEMMING_ACCURACY,
        *,
        stemmer: Stemmer | None = None,
    ) -> None:
        if not 0.0 <= accuracy <= 1.0:
            raise ValueError(f"accuracy must be between 0.0 and 1.0, got {accuracy}")

        super().__init__(lookup_if_known=lookup_if_known)
        self.accuracy = float(accuracy)
        self.stemmer = stemmer or PorterStemmer()

    def correct_word(
        self,
        word: str,
        temporary_dictionaries: Sequence[Dictionary] | None = None,
    ) -> list[FoundWord]:
        dictionaries = self._merged_dictionaries(temporary_dictionaries)
        lookup = word.lower().strip()
        if not lookup:
            return []

        stem = self.stemmer.stem(lookup)
        found = [
            FoundWord(word=entry, is_exact=False, accuracy=self.accuracy)
            for dictionary in dictionaries
            for entry in dictionary.get_words()
            if self.stemmer.stem(entry.value.lower()) == stem
        ]

        logger.debug("stem %r of %r matched %s words", stem, lookup, len(found))
        return found
