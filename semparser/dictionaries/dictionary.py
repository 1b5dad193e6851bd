import logging
from pathlib import Path
from typing import Iterable, Iterator, Protocol, runtime_checkable

from semparser.parser.model import FoundWord, Word

logger = logging.getLogger(__name__)


@runtime_checkable
class Dictionary(Protocol):
    def get_words(self) -> Iterable[Word]:
        ...


class WordDictionary:
    """In-memory dictionary keeping words in insertion order."""

    def __init__(self, words: Iterable[Word] = (), *, language_code: str = "en") -> None:
        self.language_code = language_code
        self._words: list[Word] = []
        self._by_value: dict[str, list[Word]] = {}
        for word in words:
            self._append(word)

    def _append(self, word: Word) -> None:
        self._words.append(word)
        self._by_value.setdefault(word.value.lower(), []).append(word)

    def add_word(
        self,
        value: str,
        expressions: Iterable[str] = (),
        identifier: str | None = None,
        frequency: int = 0,
        is_part_of_phrase: bool = False,
    ) -> Word:
        word = Word(
            value=value,
            expressions=frozenset(expressions),
            identifier=identifier or value,
            frequency=frequency,
            is_part_of_phrase=is_part_of_phrase,
        )
        self._append(word)
        return word

    def get_words(self) -> tuple[Word, ...]:
        return tuple(self._words)

    def lookup_term(self, value: str) -> list[FoundWord]:
        return [
            FoundWord(word=word, is_exact=True, accuracy=1.0)
            for word in self._by_value.get((value or "").lower(), [])
        ]

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[Word]:
        return iter(tuple(self._words))

    def __contains__(self, value: object) -> bool:
        return isinstance(value, str) and value.lower() in self._by_value


def _parse_word_line(line: str) -> tuple[str, int] | None:
    parts = line.split()
    if not parts or parts[0].startswith("#"):
        return None

    if len(parts) == 1:
        return parts[0], 0

    count_token = parts[1].replace(",", "")
    if not count_token.isdigit():
        return None

    return parts[0], int(count_token)


def load_word_list(path: str | Path, *, language_code: str = "en") -> WordDictionary:
    dictionary = WordDictionary(language_code=language_code)
    skipped = 0

    with Path(path).open(encoding="utf-8", errors="ignore") as handle:
        for raw_line in handle:
            parsed = _parse_word_line(raw_line.strip())
            if parsed is None:
                if raw_line.strip():
                    skipped += 1
                continue
            value, frequency = parsed
            dictionary.add_word(value, frequency=frequency)

    logger.info("loaded %s words from %s (skipped %s lines)", len(dictionary), path, skipped)
    return dictionary
