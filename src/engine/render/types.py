"""
どこで: `engine.render` 型定義。
何を: 描画面へ渡すプリミティブ（線分/閉多角形）と線種スタイルの表。
なぜ: 1 フレーム内で太さ/塗りが異なる要素をホスト非依存の値として受け渡すため。
"""

from __future__ import annotations

from dataclasses import dataclass

from common.types import RGB
from engine.core.projection import Point2D


@dataclass(frozen=True)
class StrokeStyle:
    """線/輪郭の描画スタイル。`width=0` は輪郭なし。"""

    name: str
    width: float
    color: RGB | None = None  # None なら塗りのみ


@dataclass(frozen=True)
class LinePrimitive:
    layer: str
    start: Point2D
    end: Point2D
    style: StrokeStyle


@dataclass(frozen=True)
class PolygonPrimitive:
    layer: str
    points: tuple[Point2D, ...]
    fill: RGB
    style: StrokeStyle


Primitive = LinePrimitive | PolygonPrimitive


@dataclass(frozen=True)
class StrokeTable:
    """カテゴリ別の線幅 [px]（viewBox 400 基準）。"""

    thick_edge: float = 10.5
    thin_edge: float = 3.5
    connection: float = 1.75
    inner_face: float = 2.625
    inner_edge: float = 5.25


# 描画レイヤー（奥から手前の順）
LAYERS: tuple[str, ...] = (
    "silhouette",
    "silhouette-faces",
    "inner-cube-faces",
    "inner-cube-edges",
    "outer-cube-edges",
    "connection-lines",
)


__all__ = [
    "StrokeStyle",
    "StrokeTable",
    "LinePrimitive",
    "PolygonPrimitive",
    "Primitive",
    "LAYERS",
]
