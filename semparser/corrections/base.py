import logging
from abc import ABC, abstractmethod
from typing import Iterable, Sequence

from semparser.dictionaries import Dictionary
from semparser.parser.model import FoundWord

logger = logging.getLogger(__name__)


class CorrectionNotInitializedError(RuntimeError):
    pass


class Correction(ABC):
    """Finds near matches for a single token in a set of dictionaries.

    A correction starts unbound. ``init`` binds the permanent dictionaries
    and may be called again to replace them; it must not run concurrently
    with ``correct_word`` on the same instance. ``correct_word`` searches
    the temporary dictionaries of the call first, then the permanent ones.
    """

    name = "base"

    def __init__(self, *, lookup_if_known: bool = False) -> None:
        self._lookup_if_known = bool(lookup_if_known)
        self._dictionaries: tuple[Dictionary, ...] | None = None

    def init(self, dictionaries: Iterable[Dictionary]) -> None:
        self._dictionaries = tuple(dictionaries)
        logger.info("%s correction bound to %s dictionaries", self.name, len(self._dictionaries))

    @property
    def is_initialized(self) -> bool:
        return self._dictionaries is not None

    def lookup_if_known(self) -> bool:
        return self._lookup_if_known

    def _merged_dictionaries(
        self, temporary_dictionaries: Sequence[Dictionary] | None
    ) -> list[Dictionary]:
        if self._dictionaries is None:
            raise CorrectionNotInitializedError(
                f"{type(self).__name__}.init() must be called before correct_word()"
            )
        return [*(temporary_dictionaries or ()), *self._dictionaries]

    @abstractmethod
    def correct_word(
        self,
        word: str,
        temporary_dictionaries: Sequence[Dictionary] | None = None,
    ) -> list[FoundWord]:
        ...
