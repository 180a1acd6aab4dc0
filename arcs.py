# arcs.py
from typing import List

from models import Arc, Pos

# right, down, left, up
_DR = (0, 1, 0, -1)
_DC = (1, 0, -1, 0)

def neighbors(p: Pos, width: int, height: int) -> List[Pos]:
    """In-bounds 4-neighbours of p in a fixed order (no wraparound)."""
    r, c = p
    out: List[Pos] = []
    for d in range(4):
        nr, nc = r + _DR[d], c + _DC[d]
        if 0 <= nr < height and 0 <= nc < width and (nr, nc) not in out:
            out.append((nr, nc))
    return out

def gen_arcs(width: int, height: int) -> List[Arc]:
    """
    Every directed arc of the grid graph. Variable ids are handed out in this
    order, so the enumeration must stay deterministic.
    """
    res: List[Arc] = []
    for r in range(height):
        for c in range(width):
            u = (r, c)
            for v in neighbors(u, width, height):
                res.append((u, v))
    return res
