"""
Brute-force cardinality clauses for the small variable sets of a grid cell.

Every one of the 2^n assignments that breaks the predicate gets a blocking
clause, i.e. the clause that is false for exactly that assignment. Grid cells
have at most four neighbours, so n stays tiny; larger sets should go through
pysat.card.CardEnc instead.
"""

from typing import Callable, List

MAX_VARS = 4

def blocking_clauses(lits: List[int], allowed: Callable[[int], bool]) -> List[List[int]]:
    """
    lits: DIMACS literals x_0..x_{n-1}
    allowed(k): whether an assignment with k true literals is permitted
    """
    n = len(lits)
    if n > MAX_VARS:
        raise ValueError(f"Brute-force cardinality supports at most {MAX_VARS} literals (got {n}).")

    clauses: List[List[int]] = []
    for bits in range(1 << n):
        if allowed(bin(bits).count("1")):
            continue
        # bit i set <=> x_i true in the forbidden assignment
        clauses.append([-lits[i] if (bits >> i) & 1 else lits[i] for i in range(n)])
    return clauses

def exactly_one(lits: List[int]) -> List[List[int]]:
    return blocking_clauses(lits, lambda k: k == 1)

def at_most_one(lits: List[int]) -> List[List[int]]:
    return blocking_clauses(lits, lambda k: k <= 1)

__all__ = ["MAX_VARS", "blocking_clauses", "exactly_one", "at_most_one"]
