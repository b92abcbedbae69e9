"""WordInfo value type stored in the word index tree."""

from functools import total_ordering
from typing import Dict, Iterator, List, Tuple


@total_ordering
class WordInfo:
    """Every recorded location of a single word.

    Equality, hashing and ordering look only at ``word``; the locations are
    payload. That is what lets a bare ``WordInfo("cat")`` act as a search
    probe for the entry already in the tree.

    The word is stored as given. Case folding is the caller's job.
    """

    __slots__ = ("word", "_locations")

    def __init__(self, word: str):
        self.word = word
        self._locations: Dict[str, List[int]] = {}

    def add_occurrence(self, file_name: str, line_number: int) -> None:
        """Append ``line_number`` to the list kept for ``file_name``.

        Duplicates are kept: a word seen twice on one line records the line
        twice.
        """
        self._locations.setdefault(file_name, []).append(line_number)

    @property
    def locations(self) -> Dict[str, List[int]]:
        """File name to line numbers, iterated in lexicographic file order."""
        return {name: self._locations[name] for name in self.files()}

    def files(self) -> List[str]:
        return sorted(self._locations)

    def lines_in(self, file_name: str) -> List[int]:
        return list(self._locations.get(file_name, ()))

    def iter_locations(self) -> Iterator[Tuple[str, List[int]]]:
        for name in self.files():
            yield name, self._locations[name]

    def occurrence_count(self) -> int:
        """Total number of recorded occurrences across all files."""
        return sum(len(lines) for lines in self._locations.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordInfo):
            return NotImplemented
        return self.word == other.word

    def __lt__(self, other: "WordInfo") -> bool:
        if not isinstance(other, WordInfo):
            return NotImplemented
        return self.word < other.word

    def __hash__(self) -> int:
        return hash(self.word)

    def __str__(self) -> str:
        return self.word

    def __repr__(self) -> str:
        return f"WordInfo({self.word!r}, files={len(self._locations)})"
