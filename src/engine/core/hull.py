"""
どこで: `engine.core.hull`
何を: 2D 点群の凸包（Andrew の monotone chain）。
なぜ: 外側/内側キューブの投影点から単一のシルエット多角形を作るため（ブラックホール合成）。
"""

from __future__ import annotations

from typing import Sequence

from .projection import Point2D


def _cross(o: Point2D, a: Point2D, b: Point2D) -> float:
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def convex_hull(points: Sequence[Point2D]) -> list[Point2D]:
    """凸包の頂点を反時計回り（数学座標）で返す。

    - 重複点・共線点は取り除く。
    - 入力が 2 点以下なら重複を除いた点をそのまま返す。
    """
    pts = sorted(set(Point2D(float(p[0]), float(p[1])) for p in points))
    if len(pts) <= 2:
        return pts

    lower: list[Point2D] = []
    for p in pts:
        while len(lower) >= 2 and _cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper: list[Point2D] = []
    for p in reversed(pts):
        while len(upper) >= 2 and _cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    # 端点は両方に含まれるので片方を落として連結
    return lower[:-1] + upper[:-1]


__all__ = ["convex_hull"]
