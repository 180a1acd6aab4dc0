# config.py
import os

# ======= SAT engine =======
# Any PySAT solver name ("g3", "g4", "cd153", "m22", ...) or "z3".
ENGINE = os.getenv("NL_ENGINE", "g3")

# ======= Encoding knobs =======
# Cardinality encoding for the per-cell label one-hot constraint.
CARD_ENCODING = os.getenv("NL_CARD_ENCODING", "pairwise")

# Require every blank cell to carry a path (the "fill all cells" variant).
FILL_ALL = int(os.getenv("NL_FILL_ALL", "0")) != 0

# ======= Loop handling =======
# Block detached loops and re-solve instead of failing reconstruction.
FORBID_LOOPS = int(os.getenv("NL_FORBID_LOOPS", "1")) != 0
MAX_LOOP_ROUNDS = int(os.getenv("NL_MAX_LOOP_ROUNDS", "1000"))

# ======= Output =======
DIMACS_OUT = os.getenv("NL_DIMACS_OUT", "")
LOG_LEVEL = os.getenv("NL_LOG_LEVEL", "WARNING")

class CFG:
    ENGINE = ENGINE

    CARD_ENCODING = CARD_ENCODING
    FILL_ALL      = FILL_ALL

    FORBID_LOOPS    = FORBID_LOOPS
    MAX_LOOP_ROUNDS = MAX_LOOP_ROUNDS

    DIMACS_OUT = DIMACS_OUT
    LOG_LEVEL  = LOG_LEVEL

__all__ = ["CFG"]
