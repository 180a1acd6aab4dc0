# reconstruct.py
# Turn a satisfying model back into Source -> Target paths.

import logging
from typing import Dict, Iterable, List, Set

from encoder import Encoding
from errors import DetachedLoop, ReconstructionFailure
from models import Arc, Field, Pos, Solution

logger = logging.getLogger(__name__)

def true_arcs(encoding: Encoding, model: Iterable[int]) -> Set[Arc]:
    return {encoding.var_arc[l] for l in model if l > 0 and l in encoding.var_arc}

def find_loops(arcs: Iterable[Arc]) -> List[List[Arc]]:
    """Group arcs into closed cycles; arcs that do not close a cycle are left out."""
    succ: Dict[Pos, List[Pos]] = {}
    for u, v in arcs:
        succ.setdefault(u, []).append(v)

    loops: List[List[Arc]] = []
    done: Set[Pos] = set()
    for start in sorted(succ):
        if start in done:
            continue
        loop: List[Arc] = []
        cur = start
        visited: Set[Pos] = set()
        while cur not in visited and len(succ.get(cur, [])) == 1:
            visited.add(cur)
            nxt = succ[cur][0]
            loop.append((cur, nxt))
            cur = nxt
        if cur == start and loop:
            loops.append(loop)
            done |= visited
    return loops

def reconstruct(field: Field, encoding: Encoding, model: Iterable[int]) -> Solution:
    """
    Follow the unique true outgoing arc from every source until its target.
    Raises ReconstructionFailure when a chain breaks or wanders, DetachedLoop
    when true arcs are left over that close cycles away from every endpoint.
    """
    arcs = true_arcs(encoding, model)
    succ: Dict[Pos, List[Pos]] = {}
    for u, v in arcs:
        succ.setdefault(u, []).append(v)

    target_of = {field[t]: t for t in encoding.targets}
    used: Set[Arc] = set()
    paths: Dict[int, List[Pos]] = {}

    for s in encoding.sources:
        label = field[s]
        target = target_of[label]
        path = [s]
        seen = {s}
        cur = s
        while cur != target:
            nxt = succ.get(cur, [])
            if len(nxt) != 1:
                raise ReconstructionFailure(
                    f"Path {label} has {len(nxt)} outgoing arcs at {cur}, expected 1"
                )
            v = nxt[0]
            if v in seen:
                raise ReconstructionFailure(f"Path {label} revisits {v}")
            if field[v] and v != target:
                raise ReconstructionFailure(f"Path {label} runs into endpoint {v} of label {field[v]}")
            used.add((cur, v))
            path.append(v)
            seen.add(v)
            cur = v
        paths[label] = path

    leftover = arcs - used
    if leftover:
        loops = find_loops(leftover)
        if sum(len(l) for l in loops) != len(leftover):
            stray = sorted(leftover - {a for l in loops for a in l})
            raise ReconstructionFailure(f"Arcs outside every path: {stray}")
        logger.debug("Model has %d detached loop(s)", len(loops))
        raise DetachedLoop(loops)

    return Solution(field.width, field.height, paths)
