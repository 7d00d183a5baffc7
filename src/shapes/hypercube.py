"""
hypercube シェイプ（外側/内側の二重キューブ）

- 外側キューブ: 頂点 ±outer、内側キューブ: 頂点 ±inner（既定 1.0 / 0.5）。
- 辺 12 本: 手前の面の輪（0-1-2-3）、奥の面の輪（4-5-6-7）、前後を結ぶ 4 本。
- 面 6 枚: 前(0) 背(1) 左(2) 右(3) 底(4) 上(5)。段階テーブルはこの並びを前提にする。
- `segments=True` では外側の辺を端点座標の表（スピナーの辺順）で与える。
  この順序が辺分類（細/太）の index になる。

頂点 index:

        3 ─────── 2          y
       /|        /|          │
      7 ─────── 6 |          └── x
      | 0 ──────|─ 1        /
      |/        |/         z
      4 ─────── 5
"""

from __future__ import annotations

from common.types import EdgeIndex, FaceIndex
from engine.core.solid import Segment3, WireSolid
from engine.core.vector import Vector3

from .registry import shape

CUBE_CORNERS: tuple[tuple[int, int, int], ...] = (
    (-1, -1, -1),
    (1, -1, -1),
    (1, 1, -1),
    (-1, 1, -1),
    (-1, -1, 1),
    (1, -1, 1),
    (1, 1, 1),
    (-1, 1, 1),
)

CUBE_EDGES: tuple[EdgeIndex, ...] = (
    (0, 1),
    (1, 2),
    (2, 3),
    (3, 0),
    (4, 5),
    (5, 6),
    (6, 7),
    (7, 4),
    (0, 4),
    (1, 5),
    (2, 6),
    (3, 7),
)

CUBE_FACES: tuple[FaceIndex, ...] = (
    (0, 1, 2, 3),  # front
    (4, 5, 6, 7),  # back
    (0, 4, 7, 3),  # left
    (1, 5, 6, 2),  # right
    (0, 1, 5, 4),  # bottom
    (3, 2, 6, 7),  # top
)

# スピナー用: 縦の 4 本 → 底面の輪 → 上面の輪（index 8 以降は常に太線）
SPINNER_EDGE_CORNERS: tuple[tuple[tuple[int, int, int], tuple[int, int, int]], ...] = (
    ((1, -1, 1), (1, 1, 1)),
    ((1, -1, -1), (1, 1, -1)),
    ((-1, -1, -1), (-1, 1, -1)),
    ((-1, -1, 1), (-1, 1, 1)),
    ((1, -1, 1), (1, -1, -1)),
    ((1, -1, -1), (-1, -1, -1)),
    ((-1, -1, -1), (-1, -1, 1)),
    ((-1, -1, 1), (1, -1, 1)),
    ((1, 1, 1), (1, 1, -1)),
    ((1, 1, -1), (-1, 1, -1)),
    ((-1, 1, -1), (-1, 1, 1)),
    ((-1, 1, 1), (1, 1, 1)),
)


def cube_vertices(half: float) -> tuple[Vector3, ...]:
    """一辺 `2·half` の原点中心キューブの頂点 8 個。"""
    h = float(half)
    return tuple(Vector3(x * h, y * h, z * h) for x, y, z in CUBE_CORNERS)


def spinner_segments(half: float = 1.0) -> tuple[Segment3, ...]:
    h = float(half)
    return tuple(
        (Vector3(a[0] * h, a[1] * h, a[2] * h), Vector3(b[0] * h, b[1] * h, b[2] * h))
        for a, b in SPINNER_EDGE_CORNERS
    )


@shape
def hypercube(*, outer: float = 1.0, inner: float = 0.5, segments: bool = False) -> WireSolid:
    """二重キューブの静的な幾何記述を返す。

    Parameters
    ----------
    outer : float, default 1.0
        外側キューブの半辺長。
    inner : float, default 0.5
        内側キューブの半辺長。
    segments : bool, default False
        True なら外側の辺をスピナーの端点表で与える（辺 index の並びが変わる）。
    """
    if outer <= 0.0 or inner <= 0.0:
        raise ValueError(f"outer/inner は正の値が必要: outer={outer}, inner={inner}")
    return WireSolid(
        outer_vertices=cube_vertices(outer),
        inner_vertices=cube_vertices(inner),
        outer_edges=CUBE_EDGES,
        inner_edges=CUBE_EDGES,
        outer_faces=CUBE_FACES,
        inner_faces=CUBE_FACES,
        outer_edge_segments=spinner_segments(outer) if segments else None,
    )


__all__ = [
    "hypercube",
    "cube_vertices",
    "spinner_segments",
    "CUBE_CORNERS",
    "CUBE_EDGES",
    "CUBE_FACES",
    "SPINNER_EDGE_CORNERS",
]
