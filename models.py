from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from errors import MalformedField

Pos = Tuple[int, int]
Arc = Tuple[Pos, Pos]

MAX_LABEL = 15

@dataclass(frozen=True)
class Field:
    width: int
    height: int
    cells: Tuple[Tuple[int, ...], ...]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Field":
        if not rows or not rows[0]:
            raise MalformedField("Field must have at least one row and one column.")
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise MalformedField("All rows must have equal length.")
        return cls(width, len(rows), tuple(tuple(int(v) for v in r) for r in rows))

    def __getitem__(self, pos: Pos) -> int:
        r, c = pos
        return self.cells[r][c]

    def rows(self) -> List[List[int]]:
        return [list(r) for r in self.cells]

@dataclass(frozen=True)
class Solution:
    width: int
    height: int
    paths: Dict[int, List[Pos]]

    def to_grid(self) -> List[List[int]]:
        out = [[0] * self.width for _ in range(self.height)]
        for label, path in self.paths.items():
            for r, c in path:
                out[r][c] = label
        return out

    def arcs(self) -> List[Arc]:
        return [(p[i], p[i + 1]) for p in self.paths.values() for i in range(len(p) - 1)]
