"""
どこで: `engine.animation.frame`
何を: タイムスタンプと設定から 1 フレーム分の描画プリミティブ列を組み立てる `compute_frame`。
なぜ: 時計→回転→投影→段階進捗/辺分類/色補間の流れを、グローバル状態なしの純関数に集約するため。

データの流れ:
    timestamp ─▶ AnimationClock ─▶ AnimationState(eased)
                                     │
              RotationRig ◀──────────┤
       (outer, inner Matrix4)        │
                 │                   ├─▶ StageScheduler ─▶ ColorRamp ─▶ 内側の面の塗り
        WireSolid × 投影 ─▶ 2D 点     └─▶ EdgeClassifier ─▶ 外側の辺の太さ

- `FrameConfig` は生成時にすべて検証し、不正な設定は `FrameConfigError` で即座に失敗する。
- `compute_frame` は状態を持たず、同じ入力には常に同じ `FrameOutput` を返す。
  複数インスタンスが同じ設定を共有しても干渉しない。
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

import numpy as np

from common import settings
from common.types import RGB, Vec2
from engine.core.hull import convex_hull
from engine.core.matrix import Matrix4
from engine.core.projection import Point2D, project, project_points
from engine.core.solid import WireSolid

from .clock import AnimationClock, AnimationState, state_at
from .color import ColorRamp, Theme
from .edges import EdgeClassifier, EdgeWeight, rotation_degrees
from .rig import LoopRig, RotationRig
from .stages import StageScheduler, clamp01

logger = logging.getLogger(__name__)


class FrameConfigError(ValueError):
    """フレーム設定の不整合（呼び出し側/設定のバグ）。"""


@dataclass(frozen=True)
class Line2D:
    index: int
    start: Point2D
    end: Point2D


@dataclass(frozen=True)
class EdgeLine(Line2D):
    weight: EdgeWeight = EdgeWeight.THICK


@dataclass(frozen=True)
class FacePolygon:
    index: int
    points: tuple[Point2D, ...]
    fill: RGB


@dataclass(frozen=True)
class FrameConfig:
    solid: WireSolid
    theme: Theme
    scale: float = 100.0
    offset: Vec2 = (0.0, 0.0)
    clock: AnimationClock = field(default_factory=AnimationClock)
    rig: RotationRig = field(default_factory=LoopRig)
    stages: StageScheduler | None = None
    ramp: ColorRamp | None = None
    outer_classifier: EdgeClassifier = field(default_factory=EdgeClassifier)
    inner_classifier: EdgeClassifier = field(default_factory=EdgeClassifier.all_thick)
    hull_silhouette: bool = False
    fill_faces: bool = True
    connect_vertices: bool = True
    frozen_progress: float | None = None

    def __post_init__(self) -> None:
        _validate(self)
        logger.debug(
            "FrameConfig ok: outer=%d inner=%d outer_edges=%d faces=%d scale=%s",
            len(self.solid.outer_vertices),
            len(self.solid.inner_vertices),
            len(self.solid.outer_segments()),
            len(self.solid.inner_faces),
            self.scale,
        )


def _check_edges(name: str, edges: tuple[tuple[int, int], ...], n_vertices: int) -> None:
    if not edges:
        raise FrameConfigError(f"{name} が空です")
    for i, (a, b) in enumerate(edges):
        if not (0 <= a < n_vertices and 0 <= b < n_vertices):
            raise FrameConfigError(
                f"{name}[{i}]=({a}, {b}) が頂点数 {n_vertices} の範囲外です"
            )


def _check_faces(name: str, faces: tuple[tuple[int, ...], ...], n_vertices: int) -> None:
    if not faces:
        raise FrameConfigError(f"{name} が空です")
    for i, face in enumerate(faces):
        if len(face) < 3:
            raise FrameConfigError(f"{name}[{i}] は 3 頂点以上が必要です: got {len(face)}")
        if any(not (0 <= v < n_vertices) for v in face):
            raise FrameConfigError(f"{name}[{i}]={face} が頂点数 {n_vertices} の範囲外です")


def _validate(cfg: FrameConfig) -> None:
    solid = cfg.solid
    if not solid.outer_vertices:
        raise FrameConfigError("outer_vertices が空です")
    if not solid.inner_vertices:
        raise FrameConfigError("inner_vertices が空です")
    n_outer = len(solid.outer_vertices)
    n_inner = len(solid.inner_vertices)

    if solid.outer_edge_segments is not None:
        if not solid.outer_edge_segments:
            raise FrameConfigError("outer_edge_segments が空です")
        for i, seg in enumerate(solid.outer_edge_segments):
            if len(seg) != 2:
                raise FrameConfigError(f"outer_edge_segments[{i}] は端点 2 つが必要です")
    else:
        _check_edges("outer_edges", solid.outer_edges, n_outer)
    _check_edges("inner_edges", solid.inner_edges, n_inner)
    _check_faces("outer_faces", solid.outer_faces, n_outer)
    _check_faces("inner_faces", solid.inner_faces, n_inner)

    if cfg.connect_vertices and n_inner != n_outer:
        raise FrameConfigError(
            f"接続線には内外の頂点数一致が必要です: outer={n_outer}, inner={n_inner}"
        )
    if not math.isfinite(cfg.scale) or cfg.scale <= 0.0:
        raise FrameConfigError(f"scale は正の有限値が必要です: got {cfg.scale!r}")
    if len(cfg.offset) != 2 or not all(math.isfinite(float(c)) for c in cfg.offset):
        raise FrameConfigError(f"offset は有限な (dx, dy) が必要です: got {cfg.offset!r}")

    if cfg.stages is not None:
        expected = frozenset(range(len(solid.inner_faces)))
        keys = cfg.stages.table.keys
        if keys != expected:
            missing = sorted(expected - keys)
            extra = sorted(keys - expected)
            raise FrameConfigError(
                f"段階テーブルのキーが面 index と一致しません: missing={missing}, extra={extra}"
            )
    if cfg.frozen_progress is not None and not math.isfinite(cfg.frozen_progress):
        raise FrameConfigError(f"frozen_progress は有限値が必要です: got {cfg.frozen_progress!r}")


@dataclass(frozen=True)
class FrameOutput:
    state: AnimationState
    rotation_degrees: float
    outer_points: tuple[Point2D, ...]
    inner_points: tuple[Point2D, ...]
    silhouette_faces: tuple[FacePolygon, ...]
    inner_faces: tuple[FacePolygon, ...]
    inner_edges: tuple[EdgeLine, ...]
    outer_edges: tuple[EdgeLine, ...]
    connections: tuple[Line2D, ...]
    stage_progress: dict[int, float]
    background: RGB
    hull: tuple[Point2D, ...] | None = None


def _project_vertices(
    vertices: tuple, matrix: Matrix4, scale: float, offset: Vec2
) -> tuple[Point2D, ...]:
    arr = np.array([v.as_tuple() for v in vertices], dtype=np.float64)
    pts = project_points(matrix.apply_to_points(arr), scale)
    dx, dy = float(offset[0]), float(offset[1])
    return tuple(Point2D(float(x) + dx, float(y) + dy) for x, y in pts)


def _stage_progress(cfg: FrameConfig, color_progress: float) -> dict[int, float]:
    if cfg.stages is not None:
        return cfg.stages.progress_map(color_progress)
    # 段階テーブルなし: 全面が同時に遷移
    p = clamp01(color_progress)
    return {i: p for i in range(len(cfg.solid.inner_faces))}


def compute_frame_from_state(state: AnimationState, config: FrameConfig) -> FrameOutput:
    """与えられた `AnimationState` から 1 フレームを組み立てる（純関数）。"""
    solid = config.solid
    eased = state.eased_progress
    outer_m, inner_m = config.rig.matrices(eased)

    outer_pts = _project_vertices(solid.outer_vertices, outer_m, config.scale, config.offset)
    inner_pts = _project_vertices(solid.inner_vertices, inner_m, config.scale, config.offset)
    dx, dy = float(config.offset[0]), float(config.offset[1])

    silhouette: tuple[FacePolygon, ...] = ()
    if config.fill_faces:
        silhouette = tuple(
            FacePolygon(i, tuple(outer_pts[v] for v in face), config.theme.fill)
            for i, face in enumerate(solid.outer_faces)
        )

    stage = _stage_progress(config, eased)
    inner_faces = []
    for i, face in enumerate(solid.inner_faces if config.fill_faces else ()):
        fill = config.ramp.at(stage[i]) if config.ramp is not None else config.theme.fill
        inner_faces.append(FacePolygon(i, tuple(inner_pts[v] for v in face), fill))

    degrees = rotation_degrees(eased)
    inner_edges = tuple(
        EdgeLine(i, inner_pts[a], inner_pts[b], config.inner_classifier.classify(i, degrees))
        for i, (a, b) in enumerate(solid.inner_edges)
    )

    outer_edges = []
    for i, (start, end) in enumerate(solid.outer_segments()):
        p0 = project(start.apply_matrix4(outer_m), config.scale).translated(dx, dy)
        p1 = project(end.apply_matrix4(outer_m), config.scale).translated(dx, dy)
        outer_edges.append(EdgeLine(i, p0, p1, config.outer_classifier.classify(i, degrees)))

    connections: tuple[Line2D, ...] = ()
    if config.connect_vertices:
        connections = tuple(
            Line2D(i, inner_pts[i], outer_pts[i]) for i in range(len(inner_pts))
        )

    hull = tuple(convex_hull(outer_pts + inner_pts)) if config.hull_silhouette else None

    if settings.get().FRAME_DEBUG:
        logger.debug(
            "frame: progress=%.4f eased=%.4f degrees=%.2f stages=%s",
            state.progress,
            eased,
            degrees,
            {k: round(v, 3) for k, v in stage.items()},
        )

    return FrameOutput(
        state=state,
        rotation_degrees=degrees,
        outer_points=outer_pts,
        inner_points=inner_pts,
        silhouette_faces=silhouette,
        inner_faces=tuple(inner_faces),
        inner_edges=inner_edges,
        outer_edges=tuple(outer_edges),
        connections=connections,
        stage_progress=stage,
        background=config.theme.fill,
        hull=hull,
    )


def compute_frame(timestamp_ms: float, config: FrameConfig) -> FrameOutput:
    """タイムスタンプ [ms] から 1 フレームを計算する（純関数）。

    `config.frozen_progress` が指定されていれば時刻を無視してその進捗で静止する。
    """
    if config.frozen_progress is not None:
        state = state_at(config.frozen_progress)
    else:
        state = config.clock.state(timestamp_ms)
    return compute_frame_from_state(state, config)


__all__ = [
    "FrameConfig",
    "FrameConfigError",
    "FrameOutput",
    "FacePolygon",
    "EdgeLine",
    "Line2D",
    "compute_frame",
    "compute_frame_from_state",
]
