# pathgrid/viz.py
from __future__ import annotations
import os
from typing import Dict, Tuple

from PIL import Image, ImageDraw

from .snapshot import Snapshot
from .types import Role, Tag

RGB = Tuple[int, int, int]

ROLE_COLORS: Dict[Role, RGB] = {
    Role.WALL: (0, 0, 0),
    Role.START: (100, 220, 120),
    Role.END: (255, 170, 80),
}
TAG_COLORS: Dict[Tag, RGB] = {
    Tag.UNVISITED: (240, 240, 240),
    Tag.VISITED: (160, 220, 230),
    Tag.FRONTIER: (60, 200, 220),
    Tag.PATH: (250, 210, 60),
}


def cell_color(snap: Snapshot, r: int, c: int) -> RGB:
    role = snap.roles[r][c]
    if role in ROLE_COLORS:
        return ROLE_COLORS[role]
    return TAG_COLORS[snap.tags[r][c]]


def draw_snapshot_png(snap: Snapshot, out_png: str, cell: int = 10) -> None:
    img = Image.new("RGB", (snap.cols * cell, snap.rows * cell), (255, 255, 255))
    drw = ImageDraw.Draw(img)

    for r in range(snap.rows):
        for c in range(snap.cols):
            x0, y0 = c * cell, r * cell
            drw.rectangle((x0, y0, x0 + cell - 1, y0 + cell - 1), fill=cell_color(snap, r, c))

    d = os.path.dirname(out_png)
    if d:
        os.makedirs(d, exist_ok=True)
    img.save(out_png)
