"""
SAT engine backends.

An engine opens a session on a list of DIMACS clauses. A session keeps one
solver alive: solve() returns a model (list of signed ints, positive = true)
or None when the formula is unsatisfiable, and add_clause() narrows the
formula for the next solve() without rebuilding the solver.
"""

import logging
from typing import Dict, List, Optional, Sequence

from pysat.solvers import Solver, SolverNames
from z3 import Bool, Not, Or, Solver as Z3Solver, is_true, sat

logger = logging.getLogger(__name__)

Clauses = Sequence[Sequence[int]]


class _Session:
    """Tracks empty clauses, which make the formula unsatisfiable outright."""

    def __init__(self):
        self._empty = False

    def add_clause(self, clause: Sequence[int]) -> None:
        if len(clause) == 0:
            self._empty = True
        else:
            self._add(list(clause))

    def solve(self) -> Optional[List[int]]:
        if self._empty:
            return None
        return self._solve()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self) -> None:
        pass


class PySatSession(_Session):
    def __init__(self, name: str, clauses: Clauses):
        super().__init__()
        self._s = Solver(name=name)
        for cl in clauses:
            self.add_clause(cl)

    def _add(self, clause: List[int]) -> None:
        self._s.add_clause(clause)

    def _solve(self) -> Optional[List[int]]:
        if not self._s.solve():
            return None
        return self._s.get_model()

    def close(self) -> None:
        self._s.delete()


class Z3Session(_Session):
    def __init__(self, clauses: Clauses):
        super().__init__()
        self._s = Z3Solver()
        self._X: Dict[int, object] = {}
        for cl in clauses:
            self.add_clause(cl)

    def _var(self, i: int):
        if i not in self._X:
            self._X[i] = Bool(f"x_{i}")
        return self._X[i]

    def _add(self, clause: List[int]) -> None:
        self._s.add(Or([self._var(l) if l > 0 else Not(self._var(-l)) for l in clause]))

    def _solve(self) -> Optional[List[int]]:
        if self._s.check() != sat:
            return None
        m = self._s.model()
        return [i if is_true(m.eval(self._X[i], model_completion=True)) else -i for i in sorted(self._X)]


class PySatEngine:
    def __init__(self, name: str = "g3"):
        self.name = name

    def session(self, clauses: Clauses) -> PySatSession:
        return PySatSession(self.name, clauses)

    def solve(self, clauses: Clauses) -> Optional[List[int]]:
        with self.session(clauses) as s:
            return s.solve()

    def __repr__(self) -> str:
        return f"PySatEngine({self.name!r})"


class Z3Engine:
    name = "z3"

    def session(self, clauses: Clauses) -> Z3Session:
        return Z3Session(clauses)

    def solve(self, clauses: Clauses) -> Optional[List[int]]:
        with self.session(clauses) as s:
            return s.solve()

    def __repr__(self) -> str:
        return "Z3Engine()"


def _pysat_names() -> List[str]:
    names: List[str] = []
    for attr in dir(SolverNames):
        value = getattr(SolverNames, attr)
        if not attr.startswith("_") and isinstance(value, tuple):
            names.extend(value)
    return names


def get_engine(name: str):
    """Map an engine name ("z3" or any PySAT solver name) to an engine."""
    if name == "z3":
        return Z3Engine()
    if name not in _pysat_names():
        raise ValueError(f"Unknown SAT engine {name!r}")
    logger.debug("Using PySAT solver %s", name)
    return PySatEngine(name)


__all__ = ["PySatEngine", "PySatSession", "Z3Engine", "Z3Session", "get_engine"]
