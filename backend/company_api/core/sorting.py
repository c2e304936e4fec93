"""Sort Parsing — turns an orderBy query value into validated sort fields.

Invariants:
    - Output only contains names from the allowed set, in canonical spelling
    - Clause order is preserved; a repeated field keeps its first occurrence
    - Unknown names are dropped, never an error

Design Decisions:
    - Lenient on sort, strict on shaping (core/data_shaper.py): a bad sort key
      still returns a usable page
"""

import logging
from dataclasses import dataclass
from typing import Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SortField:
    name: str
    descending: bool = False


def parse_order_by(
    order_by: str | None, allowed: Iterable[str],
) -> list[SortField]:
    """Parse "name desc, age" into SortFields, matching names case-insensitively."""
    if not order_by or not order_by.strip():
        return []
    canonical = {name.lower(): name for name in allowed}
    seen: set[str] = set()
    sort_fields: list[SortField] = []
    for clause in order_by.split(","):
        parts = clause.split()
        if not parts:
            continue
        name = canonical.get(parts[0].lower())
        if name is None:
            logger.debug(f"Ignoring unknown sort field '{parts[0]}'")
            continue
        if name in seen:
            continue
        seen.add(name)
        descending = len(parts) > 1 and parts[1].lower() == "desc"
        sort_fields.append(SortField(name, descending))
    return sort_fields
