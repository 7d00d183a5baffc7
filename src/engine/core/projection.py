"""
どこで: `engine.core.projection`
何を: 3D 点を 2D 描画座標へ写す固定の等角風（isometric-like）平行投影。
なぜ: 透視除算を行わない斜投影で、ワイヤーフレームの見た目を全可視化で揃えるため。

投影式（s = scale）:
    screen_x = (x·s − z·s) · 0.866
    screen_y = (x·s + z·s) · 0.5 − y·s

- 線形・平行移動項なし: `project(a + b) == project(a) + project(b)`。
- 画面 Y は下向き正（SVG 座標系）。`(1, 1, 1)` と `(-1, -1, -1)` は原点に重なる。
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from .vector import Vector3

ISO_X = 0.866
ISO_Y = 0.5


class Point2D(NamedTuple):
    """2D 描画座標。"""

    x: float
    y: float

    def translated(self, dx: float, dy: float) -> "Point2D":
        return Point2D(self.x + dx, self.y + dy)


def project(v: Vector3, scale: float) -> Point2D:
    """単一点の投影（純関数）。"""
    x = v.x * scale
    y = v.y * scale
    z = v.z * scale
    return Point2D((x - z) * ISO_X, (x + z) * ISO_Y - y)


def project_points(points: np.ndarray, scale: float) -> np.ndarray:
    """`(N, 3)` 点群を `(N, 2)` float64 配列へ投影する。"""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 3) * scale
    out = np.empty((pts.shape[0], 2), dtype=np.float64)
    out[:, 0] = (pts[:, 0] - pts[:, 2]) * ISO_X
    out[:, 1] = (pts[:, 0] + pts[:, 2]) * ISO_Y - pts[:, 1]
    return out


__all__ = ["Point2D", "project", "project_points", "ISO_X", "ISO_Y"]
