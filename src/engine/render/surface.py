"""
どこで: `engine.render.surface`
何を: 抽象描画面 `DrawingSurface` と、`FrameOutput` をレイヤー順に流し込む `emit_frame`。
なぜ: コアはラスタライズも SVG 要素管理も行わない。ホストは Protocol を実装するだけで済むようにするため。

出力順（奥 → 手前）:
    凸包シルエット（あれば） → 外側の面（シルエット塗り） → 内側の面 → 内側の辺
    → 外側の辺（細/太） → 接続線
"""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

from common.types import RGB
from engine.animation.edges import EdgeWeight
from engine.animation.frame import FrameOutput
from engine.core.projection import Point2D

from .types import LinePrimitive, PolygonPrimitive, Primitive, StrokeStyle, StrokeTable

logger = logging.getLogger(__name__)


class DrawingSurface(Protocol):
    """ホスト側の描画面。"""

    def begin_frame(self, instance_id: str) -> None: ...

    def line(self, layer: str, start: Point2D, end: Point2D, style: StrokeStyle) -> None: ...

    def polygon(
        self, layer: str, points: Sequence[Point2D], fill: RGB, style: StrokeStyle
    ) -> None: ...

    def end_frame(self) -> None: ...


class RecordingSurface:
    """受け取ったプリミティブをインスタンス ID ごとに記録するだけの描画面。

    - `frames[instance_id]` は直近フレームのプリミティブ列（begin_frame で置き換え）。
    - テストや、別プロセス/別言語のレンダラへ渡す前段として使う。
    """

    def __init__(self) -> None:
        self.frames: dict[str, list[Primitive]] = {}
        self.frame_count = 0
        self._current: list[Primitive] | None = None

    def begin_frame(self, instance_id: str) -> None:
        self._current = []
        self.frames[instance_id] = self._current

    def line(self, layer: str, start: Point2D, end: Point2D, style: StrokeStyle) -> None:
        self._require().append(LinePrimitive(layer, start, end, style))

    def polygon(
        self, layer: str, points: Sequence[Point2D], fill: RGB, style: StrokeStyle
    ) -> None:
        self._require().append(PolygonPrimitive(layer, tuple(points), fill, style))

    def end_frame(self) -> None:
        self._current = None
        self.frame_count += 1

    def _require(self) -> list[Primitive]:
        if self._current is None:
            raise RuntimeError("begin_frame() の前に描画されました")
        return self._current

    def primitives(self, instance_id: str, layer: str | None = None) -> list[Primitive]:
        items = self.frames.get(instance_id, [])
        if layer is None:
            return list(items)
        return [p for p in items if p.layer == layer]


def emit_frame(
    output: FrameOutput,
    surface: DrawingSurface,
    *,
    stroke: RGB,
    instance_id: str = "default",
    widths: StrokeTable | None = None,
) -> int:
    """`output` を描画面へ送り、送ったプリミティブ数を返す。"""
    w = widths or StrokeTable()
    thick = StrokeStyle("thick-edge", w.thick_edge, stroke)
    thin = StrokeStyle("thin-edge", w.thin_edge, stroke)
    inner_thick = StrokeStyle("inner-edge", w.inner_edge, stroke)
    inner_thin = StrokeStyle("inner-thin-edge", w.thin_edge, stroke)
    connection = StrokeStyle("connection-line", w.connection, stroke)
    inner_face = StrokeStyle("inner-cube-face", w.inner_face, stroke)
    fill_only = StrokeStyle("silhouette-face", 0.0, None)

    count = 0
    surface.begin_frame(instance_id)
    if output.hull:
        surface.polygon("silhouette", output.hull, output.background, fill_only)
        count += 1
    for face in output.silhouette_faces:
        surface.polygon("silhouette-faces", face.points, face.fill, fill_only)
        count += 1
    for face in output.inner_faces:
        surface.polygon("inner-cube-faces", face.points, face.fill, inner_face)
        count += 1
    for edge in output.inner_edges:
        style = inner_thin if edge.weight is EdgeWeight.THIN else inner_thick
        surface.line("inner-cube-edges", edge.start, edge.end, style)
        count += 1
    for edge in output.outer_edges:
        style = thin if edge.weight is EdgeWeight.THIN else thick
        surface.line("outer-cube-edges", edge.start, edge.end, style)
        count += 1
    for line in output.connections:
        surface.line("connection-lines", line.start, line.end, connection)
        count += 1
    surface.end_frame()
    logger.debug("emit frame: id=%s primitives=%d", instance_id, count)
    return count


__all__ = ["DrawingSurface", "RecordingSurface", "emit_frame"]
