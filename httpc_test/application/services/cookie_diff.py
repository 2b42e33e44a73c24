# httpc_test/application/services/cookie_diff.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from httpc_test.domain.cookie import Cookie

CookieKey = Tuple[str, str, str]


def _cookie_index(items: Sequence[Cookie]) -> Dict[CookieKey, Cookie]:
    """
    Key by (name, domain, path).
    """
    idx: Dict[CookieKey, Cookie] = {}
    for c in items or ():
        idx[(c.name, c.domain or "", c.path or "")] = c
    return idx


@dataclass(frozen=True)
class CookieDiff:
    added: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    changed: List[str] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not (self.added or self.removed or self.changed)


def diff_cookies(before: Optional[Sequence[Cookie]], after: Optional[Sequence[Cookie]]) -> CookieDiff:
    b = _cookie_index(before or ())
    a = _cookie_index(after or ())

    b_keys = set(b.keys())
    a_keys = set(a.keys())

    # names only, values never leave this function
    changed = {k[0] for k in a_keys & b_keys if a[k].value != b[k].value}

    return CookieDiff(
        added=sorted({k[0] for k in a_keys - b_keys}),
        removed=sorted({k[0] for k in b_keys - a_keys}),
        changed=sorted(changed),
    )
