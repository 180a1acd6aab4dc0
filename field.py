# field.py
# Decode puzz.link style "numlin" descriptors and classify the cells of a field.

import logging
import re
from typing import List, Optional, Tuple

from errors import MalformedField, MalformedURL
from models import MAX_LABEL, Field, Pos

logger = logging.getLogger(__name__)

_CODE_RE = re.compile(r"[0-9a-zA-Z]*")
_HEX = "0123456789abcdefABCDEF"
_DIM_RE = re.compile(r"[0-9]+")

# ---------- descriptor decoding ----------
def is_valid_code(code: str) -> bool:
    return _CODE_RE.fullmatch(code) is not None

def decode_field(width: int, height: int, code: str) -> Field:
    """
    Decode a field code into a width x height grid.
      - '0'..'9', 'a'..'f' : label of the cell under the cursor (0 = blank)
      - 'g'..'z'           : run of ord(ch) - ord('f') blank cells
    The cursor walks row-major; decoding stops once the grid is full or the
    code runs out.
    """
    if width <= 0 or height <= 0:
        raise MalformedURL(f"Dimensions must be positive (got {width}x{height}).")
    if not is_valid_code(code):
        raise MalformedURL(f"Field code has characters outside [0-9a-zA-Z]: {code!r}")

    total = width * height
    out = [[0] * width for _ in range(height)]
    cursor = 0

    for index, ch in enumerate(code):
        if cursor >= total:
            break
        if ch in _HEX:
            r, c = divmod(cursor, width)
            out[r][c] = int(ch, 16)
            cursor += 1
            continue

        run = ord(ch) - ord("f")
        if run <= 0:
            logger.warning("Invalid run length %r at offset %d; rest of the field is blank", ch, index)
            break
        cursor += run

    return Field.from_rows(out)

def parse_url(url: str) -> Field:
    """Decode the last three '/'-separated segments: width, height, field code."""
    params = url.split("/")
    if len(params) < 3:
        raise MalformedURL(f"Expected width/height/code at the end of {url!r}")

    w_tok, h_tok, code = params[-3], params[-2], params[-1]
    if not (_DIM_RE.fullmatch(w_tok) and _DIM_RE.fullmatch(h_tok)):
        raise MalformedURL(f"Dimensions must be decimal (got {w_tok!r}, {h_tok!r}).")
    if not is_valid_code(code):
        raise MalformedURL(f"Field code has characters outside [0-9a-zA-Z]: {code!r}")

    return decode_field(int(w_tok), int(h_tok), code)

# ---------- validation ----------
def parse_field(field: Field) -> Optional[Tuple[List[Pos], List[Pos], List[Pos]]]:
    """
    Row-major scan: first occurrence of a label is a source, second a target,
    blank cells are body. Returns None when a label shows up a third time.
    """
    seen = {}
    sources: List[Pos] = []
    targets: List[Pos] = []
    bodies: List[Pos] = []

    for r, row in enumerate(field.cells):
        for c, label in enumerate(row):
            if label == 0:
                bodies.append((r, c))
                continue
            count = seen.get(label, 0)
            if count == 0:
                sources.append((r, c))
            elif count == 1:
                targets.append((r, c))
            else:
                return None
            seen[label] = count + 1

    return sources, targets, bodies

def validate_field(field: Field) -> Tuple[List[Pos], List[Pos], List[Pos]]:
    for r, row in enumerate(field.cells):
        for c, label in enumerate(row):
            if not (0 <= label <= MAX_LABEL):
                raise MalformedField(f"Cell ({r},{c}) label {label} out of range 0..{MAX_LABEL}")

    parsed = parse_field(field)
    if parsed is None:
        raise MalformedField("A label appears more than twice.")

    sources, targets, bodies = parsed
    if not sources:
        raise MalformedField("Field has no endpoint pairs.")
    if len(sources) != len(targets):
        unmatched = sorted({field[p] for p in sources} - {field[p] for p in targets})
        raise MalformedField(f"Labels without a partner: {unmatched}")
    if len(sources) + len(targets) + len(bodies) != field.width * field.height:
        raise MalformedField("Sources, targets and body cells do not cover the grid.")

    return sources, targets, bodies

def labels_of(field: Field) -> List[int]:
    return sorted({v for row in field.cells for v in row if v})
