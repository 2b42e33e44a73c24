# httpc_test/domain/headers.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

HeaderPair = Tuple[str, str]


@dataclass(frozen=True)
class Headers:
    """
    Ordered multimap of response headers.
    Names compare case-insensitively; values of a repeated name keep their order.
    """
    pairs: Tuple[HeaderPair, ...] = ()

    @classmethod
    def from_pairs(cls, pairs: Iterable[HeaderPair]) -> "Headers":
        return cls(pairs=tuple((str(n), str(v)) for n, v in pairs))

    def get(self, name: str) -> Optional[str]:
        key = name.lower()
        for n, v in self.pairs:
            if n.lower() == key:
                return v
        return None

    def get_all(self, name: str) -> List[str]:
        key = name.lower()
        return [v for n, v in self.pairs if n.lower() == key]

    def names(self) -> List[str]:
        seen: List[str] = []
        lowered = set()
        for n, _ in self.pairs:
            if n.lower() not in lowered:
                lowered.add(n.lower())
                seen.append(n)
        return seen

    def as_dict(self) -> dict:
        """First value per name; for logging."""
        return {n: self.get(n) for n in self.names()}

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __iter__(self) -> Iterator[HeaderPair]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)
