# encoder.py
# Numberlink -> CNF, arc-based encoding.
#
# Variables:
#   1..|arcs|      x_(u,v): flow runs from u to v (one per directed arc, in arc order)
#   |arcs|+1..     L(p,k):  cell p belongs to the path of label k

import logging
from dataclasses import dataclass, field as dc_field
from typing import Dict, List, Tuple

from pysat.card import CardEnc, EncType
from pysat.formula import CNF

from arcs import neighbors
from cardinality import at_most_one, exactly_one
from field import labels_of
from models import Arc, Field, Pos

logger = logging.getLogger(__name__)

# cardinality encodings for the label one-hot constraint; the arc degree
# constraints always use the brute-force clauses from cardinality.py
_ENC_MAP = {
    "pairwise": EncType.pairwise,
    "seq": EncType.seqcounter,
    "cardnet": EncType.cardnetwrk,
}

@dataclass
class Encoding:
    cnf: CNF
    arc_var: Dict[Arc, int]
    label_var: Dict[Tuple[Pos, int], int]
    labels: List[int]
    sources: List[Pos]
    targets: List[Pos]
    top: int
    var_arc: Dict[int, Arc] = dc_field(default_factory=dict)

    def __post_init__(self):
        if not self.var_arc:
            self.var_arc = {x: a for a, x in self.arc_var.items()}

    def out_vars(self, u: Pos, width: int, height: int) -> List[int]:
        return [self.arc_var[(u, v)] for v in neighbors(u, width, height)]

    def in_vars(self, u: Pos, width: int, height: int) -> List[int]:
        return [self.arc_var[(v, u)] for v in neighbors(u, width, height)]

def _exactly_one_label(cnf: CNF, lits: List[int], enc, top: int) -> int:
    """ sum(lits) == 1 (ALO + AMO via chosen encoding); returns the new top id """
    cnf.append(lits[:])  # ALO
    if enc == EncType.pairwise:
        for i in range(len(lits)):
            for j in range(i + 1, len(lits)):
                cnf.append([-lits[i], -lits[j]])
        return top
    amo = CardEnc.atmost(lits=lits, bound=1, top_id=top, encoding=enc)
    cnf.extend(amo.clauses)
    return max(top, amo.nv)

def encode(
    field: Field,
    arcs: List[Arc],
    sources: List[Pos],
    targets: List[Pos],
    bodies: List[Pos],
    *,
    fill: bool = False,
    encoding: str = "pairwise",
) -> Encoding:
    """
    Build the clause set for a validated field.
    fill=True additionally requires every body cell to carry a path.
    """
    if encoding not in _ENC_MAP:
        raise ValueError(f"Unknown cardinality encoding {encoding!r}; expected one of {sorted(_ENC_MAP)}")
    enc = _ENC_MAP[encoding]
    W, H = field.width, field.height

    cnf = CNF()
    arc_var: Dict[Arc, int] = {}
    for i, a in enumerate(arcs):
        arc_var[a] = i + 1

    labels = labels_of(field)
    label_var: Dict[Tuple[Pos, int], int] = {}
    top = len(arcs)
    for r in range(H):
        for c in range(W):
            for k in labels:
                top += 1
                label_var[((r, c), k)] = top

    # 1) cell labels: endpoints are fixed, body cells pick exactly one label
    for p in sources + targets:
        for k in labels:
            lit = label_var[(p, k)]
            cnf.append([lit] if field[p] == k else [-lit])
    for p in bodies:
        top = _exactly_one_label(cnf, [label_var[(p, k)] for k in labels], enc, top)

    # 2) label consistency along every arc
    for (u, v), x in arc_var.items():
        num_u, num_v = field[u], field[v]
        if num_u and num_v:
            if num_u != num_v:
                cnf.append([-x])
            continue
        for k in labels:
            lu, lv = label_var[(u, k)], label_var[(v, k)]
            cnf.append([-x, -lu, lv])
            cnf.append([-x, lu, -lv])

    # 3) no flow both ways along an edge
    for (u, v), x in arc_var.items():
        if u < v:
            cnf.extend(at_most_one([x, arc_var[(v, u)]]))

    enc_state = Encoding(cnf, arc_var, label_var, labels, list(sources), list(targets), top)

    # 4) sources: exactly one way out, nothing comes in
    for u in sources:
        cnf.extend(exactly_one(enc_state.out_vars(u, W, H)))
        for y in enc_state.in_vars(u, W, H):
            cnf.append([-y])

    # 5) targets: nothing goes out, exactly one way in
    for u in targets:
        for y in enc_state.out_vars(u, W, H):
            cnf.append([-y])
        cnf.extend(exactly_one(enc_state.in_vars(u, W, H)))

    # 6) body cells: at most one in, at most one out, in <=> out
    card = exactly_one if fill else at_most_one
    for u in bodies:
        outs = enc_state.out_vars(u, W, H)
        ins = enc_state.in_vars(u, W, H)
        cnf.extend(card(outs))
        cnf.extend(card(ins))
        for a in ins:
            cnf.append([-a] + outs)
        for b in outs:
            cnf.append([-b] + ins)

    logger.debug(
        "Encoded %dx%d field: %d arcs, %d labels, %d vars, %d clauses",
        W, H, len(arcs), len(labels), top, len(cnf.clauses),
    )
    return enc_state

__all__ = ["Encoding", "encode"]
