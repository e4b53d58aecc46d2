from __future__ import annotations

from bisect import bisect_left
from typing import TYPE_CHECKING
from typing import Sequence

from optscan.parser.errors import OptionConflictError


if TYPE_CHECKING:
    from optscan.parser.api import OptionSpec


class LookupIndex:
    """
    Two sorted projections of an option table.

    Instance attributes:
      table : [OptionSpec]
        the caller's option table, never copied or modified
      short_order : (int)
        positions into 'table' of every spec with a short key,
        ordered by that key's code point
      long_order : (int)
        positions into 'table' of every spec with a long key,
        ordered lexicographically by that key

    Lookups are exact matches found by binary search.
    """

    def __init__(
        self,
        table: Sequence[OptionSpec],
        short_order: Sequence[int],
        long_order: Sequence[int],
    ) -> None:
        self.table = table
        self.short_order = tuple(short_order)
        self.long_order = tuple(long_order)
        self._short_keys = [table[i].short for i in self.short_order]
        self._long_keys = [table[i].long for i in self.long_order]

    @classmethod
    def build(cls, table: Sequence[OptionSpec]) -> LookupIndex:
        shrt = [i for i, spec in enumerate(table) if spec.has_short()]
        lng = [i for i, spec in enumerate(table) if spec.has_long()]
        shrt.sort(key=lambda i: table[i].short)
        lng.sort(key=lambda i: table[i].long)

        index = cls(table, shrt, lng)
        index._check_conflict()
        return index

    def __len__(self) -> int:
        return len(set(self.short_order) | set(self.long_order))

    def _check_conflict(self) -> None:
        conflict_opts = []
        reported = set()
        for prefix, keys, order in (
            ("-", self._short_keys, self.short_order),
            ("--", self._long_keys, self.long_order),
        ):
            # duplicates are adjacent once sorted
            for i in range(1, len(keys)):
                key = f"{prefix}{keys[i]}"
                if keys[i] == keys[i - 1] and key not in reported:
                    reported.add(key)
                    conflict_opts.append((key, self.table[order[i]]))

        if conflict_opts:
            raise OptionConflictError(
                "conflicting option string(s): {}".format(
                    ", ".join([co[0] for co in conflict_opts])
                ),
                conflict_opts[0][1],
            )

    @staticmethod
    def _search(keys: list[str], order: tuple[int, ...], key: str) -> int | None:
        i = bisect_left(keys, key)
        if i < len(keys) and keys[i] == key:
            return order[i]
        return None

    def position_short(self, char: str) -> int | None:
        return self._search(self._short_keys, self.short_order, char)

    def position_long(self, name: str) -> int | None:
        return self._search(self._long_keys, self.long_order, name)

    def find_short(self, char: str) -> OptionSpec | None:
        pos = self.position_short(char)
        return None if pos is None else self.table[pos]

    def find_long(self, name: str) -> OptionSpec | None:
        pos = self.position_long(name)
        return None if pos is None else self.table[pos]
