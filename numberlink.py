import logging
from typing import List, Optional, Union

from arcs import gen_arcs
from config import CFG
from encoder import Encoding, encode
from engines import get_engine
from errors import DetachedLoop, ReconstructionFailure
from field import parse_url, validate_field
from models import Field, Solution
from reconstruct import reconstruct

logger = logging.getLogger(__name__)

# ---------- solver ----------
def _solve_once(field: Field, enc: Encoding, s, forbid_loops: bool, max_rounds: int) -> Optional[Solution]:
    """
    One solution from the open session s, or None when unsatisfiable.
    Detached loops are either blocked and re-solved (forbid_loops) or
    propagated as DetachedLoop.
    """
    for rnd in range(max_rounds + 1):
        model = s.solve()
        if model is None:
            return None
        try:
            return reconstruct(field, enc, model)
        except DetachedLoop as e:
            if not forbid_loops:
                raise
            logger.debug("Round %d: blocking %d detached loop(s)", rnd + 1, len(e.loops))
            for loop in e.loops:
                s.add_clause([-enc.arc_var[a] for a in loop])
    raise ReconstructionFailure(f"Still finding detached loops after {max_rounds} rounds")

def solve_numberlink(
    field: Field,
    *,
    engine=None,
    fill: Optional[bool] = None,
    forbid_loops: Optional[bool] = None,
    encoding: Optional[str] = None,
    all_solutions: bool = False,
    max_solutions: Optional[int] = None,
) -> Union[Optional[Solution], List[Solution]]:
    """
    Solve a Numberlink field.
    Returns a Solution, or None when the puzzle has no solution. With
    all_solutions=True returns the list of solutions (empty when none).
    Unset keyword arguments fall back to config.CFG.
    """
    fill = CFG.FILL_ALL if fill is None else fill
    forbid_loops = CFG.FORBID_LOOPS if forbid_loops is None else forbid_loops
    encoding = encoding or CFG.CARD_ENCODING
    if engine is None or isinstance(engine, str):
        engine = get_engine(engine or CFG.ENGINE)

    sources, targets, bodies = validate_field(field)
    arcs = gen_arcs(field.width, field.height)
    enc = encode(field, arcs, sources, targets, bodies, fill=fill, encoding=encoding)
    if CFG.DIMACS_OUT:
        write_dimacs(enc, CFG.DIMACS_OUT)

    # blocking clauses go to the solver only, never back into the encoding
    with engine.session(enc.cnf.clauses) as s:
        if not all_solutions:
            return _solve_once(field, enc, s, forbid_loops, CFG.MAX_LOOP_ROUNDS)

        solutions: List[Solution] = []
        while True:
            sol = _solve_once(field, enc, s, forbid_loops, CFG.MAX_LOOP_ROUNDS)
            if sol is None:
                break
            solutions.append(sol)

            # block only the arcs of this solution
            s.add_clause([-enc.arc_var[a] for a in sol.arcs()])

            if max_solutions is not None and len(solutions) >= max_solutions:
                break

    logger.debug("Found %d solution(s) with %r", len(solutions), engine)
    return solutions

def solve_url(url: str, **kw) -> Union[Optional[Solution], List[Solution]]:
    return solve_numberlink(parse_url(url), **kw)

def write_dimacs(enc: Encoding, path: str) -> str:
    enc.cnf.to_file(path, comments=[f"c numberlink: {len(enc.arc_var)} arc vars, labels {enc.labels}"])
    return path

# ---------- printing ----------
def _symbol(v: int) -> str:
    # hex labels as in the descriptor: 1..9, a..f
    if v == 0:
        return "."
    return format(v, "x")

def format_grid(grid: List[List[int]]) -> str:
    return "\n".join(" ".join(_symbol(v) for v in row) for row in grid)

def print_grid(grid: List[List[int]]) -> None:
    print(format_grid(grid))
    print()

# ---------- demo ----------
if __name__ == "__main__":
    logging.basicConfig(level=CFG.LOG_LEVEL)

    URL = "http://pzv.jp/p.html?numlin/12/12/1p3h9g3j4i2j5t5l87g6l6j2g7jbgbjal8g1czg9uahcp4"

    field = parse_url(URL)
    print_grid(field.rows())

    sol = solve_numberlink(field)
    if sol is None:
        print("UNSAT (no solution)")
    else:
        print_grid(sol.to_grid())
        for label, path in sorted(sol.paths.items()):
            print(f"{_symbol(label)}: {path}")
