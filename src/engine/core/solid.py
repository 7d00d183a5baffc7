"""
どこで: `engine.core.solid`
何を: 二重キューブ（外側/内側）の静的な幾何記述 `WireSolid`。
なぜ: 頂点・辺・面を設定データとして一箇所にまとめ、フレーム計算へ値として渡すため。

- 実行時に変更されない（frozen、タプルのみ）。
- `outer_edge_segments` は外側の辺を頂点 index ではなく端点座標で与える場合に使う
  （スピナーの太さ可変描画は辺 index ごとの順序がこの表で決まる）。
  省略時は `outer_edges` と `outer_vertices` から導出する。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from common.types import EdgeIndex, FaceIndex

from .vector import Vector3

Segment3 = tuple[Vector3, Vector3]


def _vectors(values: Iterable[Vector3 | Sequence[float]]) -> tuple[Vector3, ...]:
    return tuple(v if isinstance(v, Vector3) else Vector3.from_iterable(v) for v in values)


@dataclass(frozen=True)
class WireSolid:
    outer_vertices: tuple[Vector3, ...]
    inner_vertices: tuple[Vector3, ...]
    outer_edges: tuple[EdgeIndex, ...]
    inner_edges: tuple[EdgeIndex, ...]
    outer_faces: tuple[FaceIndex, ...]
    inner_faces: tuple[FaceIndex, ...]
    outer_edge_segments: tuple[Segment3, ...] | None = None

    def __post_init__(self) -> None:
        # list/ndarray などを受けてもタプルへ正規化（値として保持）
        object.__setattr__(self, "outer_vertices", _vectors(self.outer_vertices))
        object.__setattr__(self, "inner_vertices", _vectors(self.inner_vertices))
        object.__setattr__(
            self, "outer_edges", tuple((int(a), int(b)) for a, b in self.outer_edges)
        )
        object.__setattr__(
            self, "inner_edges", tuple((int(a), int(b)) for a, b in self.inner_edges)
        )
        object.__setattr__(
            self, "outer_faces", tuple(tuple(int(i) for i in f) for f in self.outer_faces)
        )
        object.__setattr__(
            self, "inner_faces", tuple(tuple(int(i) for i in f) for f in self.inner_faces)
        )
        if self.outer_edge_segments is not None:
            # 長さ 2 以外の組は FrameConfig の検証で弾く
            segs = tuple(_vectors(seg) for seg in self.outer_edge_segments)
            object.__setattr__(self, "outer_edge_segments", segs)

    def outer_segments(self) -> tuple[Segment3, ...]:
        """外側の辺を端点座標の組で返す。"""
        if self.outer_edge_segments is not None:
            return self.outer_edge_segments
        verts = self.outer_vertices
        return tuple((verts[a], verts[b]) for a, b in self.outer_edges)


__all__ = ["WireSolid", "Segment3"]
