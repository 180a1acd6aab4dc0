"""Exception types raised while decoding, validating and solving puzzles."""

from typing import List, Tuple

_Arc = Tuple[Tuple[int, int], Tuple[int, int]]


class NumberlinkError(Exception):
    """Base class for every puzzle failure except plain unsatisfiability."""


class MalformedURL(NumberlinkError, ValueError):
    """The descriptor has too few segments, bad dimensions or a bad code."""


class MalformedField(NumberlinkError, ValueError):
    """The grid does not describe a set of endpoint pairs."""


class ReconstructionFailure(NumberlinkError):
    """A satisfying model could not be turned into Source -> Target paths."""


class DetachedLoop(ReconstructionFailure):
    """The model closes one or more cycles that touch no endpoint."""

    def __init__(self, loops: List[List[_Arc]]):
        self.loops = loops
        cells = sorted({u for loop in loops for (u, _) in loop})
        super().__init__(f"{len(loops)} detached loop(s) through {cells}")


__all__ = [
    "NumberlinkError",
    "MalformedURL",
    "MalformedField",
    "ReconstructionFailure",
    "DetachedLoop",
]
