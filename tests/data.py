"""Shared puzzle fixtures."""

DEMO_URL = "http://pzv.jp/p.html?numlin/12/12/1p3h9g3j4i2j5t5l87g6l6j2g7jbgbjal8g1czg9uahcp4"

DEMO_ROWS = [
    [0x1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0x3],
    [0, 0, 0x9, 0, 0x3, 0, 0, 0, 0, 0x4, 0, 0],
    [0, 0x2, 0, 0, 0, 0, 0x5, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0x5, 0, 0],
    [0, 0, 0, 0, 0x8, 0x7, 0, 0x6, 0, 0, 0, 0],
    [0, 0, 0x6, 0, 0, 0, 0, 0x2, 0, 0x7, 0, 0],
    [0, 0, 0xb, 0, 0xb, 0, 0, 0, 0, 0xa, 0, 0],
    [0, 0, 0, 0, 0x8, 0, 0x1, 0xc, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0x9, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0xa, 0, 0],
    [0xc, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0x4],
]

# 1 and 2 on alternating corners: the paths would have to cross
CROSSING_CORNERS = [
    [1, 0, 2],
    [0, 0, 0],
    [2, 0, 1],
]

# same-side corners: solvable
SIDE_CORNERS = [
    [1, 0, 1],
    [0, 0, 0],
    [2, 0, 2],
]

# the blank 2x2 block is walled off by endpoints whose partners sit outside it
SEALED_BLOCK = [
    [0, 0, 1, 1],
    [0, 0, 2, 2],
]
