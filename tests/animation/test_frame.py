from __future__ import annotations

import logging
from dataclasses import replace

import numpy as np
import pytest

from api.presets import build_preset
from common import settings
from engine.animation import (
    DARK,
    LIGHT,
    EdgeWeight,
    FrameConfig,
    FrameConfigError,
    StageScheduler,
    StageTable,
    compute_frame,
)
from engine.core.projection import ISO_X
from engine.core.vector import Vector3
from shapes.hypercube import hypercube


def _thin(edges) -> set[int]:
    return {e.index for e in edges if e.weight is EdgeWeight.THIN}


@pytest.mark.smoke
def test_spinner_frame_shape(spinner_config: FrameConfig) -> None:
    out = compute_frame(0.0, spinner_config)
    assert len(out.outer_points) == 8 and len(out.inner_points) == 8
    assert len(out.silhouette_faces) == 6
    assert len(out.inner_faces) == 6
    assert len(out.inner_edges) == 12
    assert len(out.outer_edges) == 12
    assert len(out.connections) == 8
    assert out.hull is None
    assert out.background == DARK.fill


def test_spinner_at_rest_projects_unrotated_outer_cube(spinner_config: FrameConfig) -> None:
    out = compute_frame(0.0, spinner_config)
    assert out.outer_points[1] == pytest.approx((200.0 * ISO_X, 100.0))
    assert out.outer_points[6] == pytest.approx((0.0, 0.0))
    first = out.outer_edges[0]
    assert first.start == pytest.approx((0.0, 200.0))
    assert first.end == pytest.approx((0.0, 0.0))
    assert out.connections[1].end == out.outer_points[1]
    assert out.connections[1].start == out.inner_points[1]


def test_spinner_edge_weights_follow_rotation(spinner_config: FrameConfig) -> None:
    assert _thin(compute_frame(0.0, spinner_config).outer_edges) == {2, 5, 6}
    assert _thin(compute_frame(1000.0, spinner_config).outer_edges) == {3, 6, 7}
    assert _thin(compute_frame(2000.0, spinner_config).outer_edges) == {0, 4, 7}
    # 内側の辺は常に太線
    assert _thin(compute_frame(2000.0, spinner_config).inner_edges) == set()


def test_spinner_face_colors_ramp_from_fill_to_accent(spinner_config: FrameConfig) -> None:
    start = compute_frame(0.0, spinner_config)
    assert {f.fill for f in start.inner_faces} == {DARK.fill}
    peak = compute_frame(2000.0, spinner_config)
    assert {f.fill for f in peak.inner_faces} == {DARK.accent}
    assert {f.fill for f in peak.silhouette_faces} == {DARK.fill}


def test_spinner_faces_reveal_in_stage_order(spinner_config: FrameConfig) -> None:
    # eased = 0.5 → 底面が最も進み、上面はまだ始まらない
    out = compute_frame(1000.0, spinner_config)
    stage = out.stage_progress
    assert stage[4] > stage[0] == stage[2] == stage[3] > stage[1] >= stage[5] == 0.0
    assert out.inner_faces[5].fill == DARK.fill


def test_compute_frame_is_deterministic_and_periodic(spinner_config: FrameConfig) -> None:
    assert compute_frame(1234.5, spinner_config) == compute_frame(1234.5, spinner_config)
    a = compute_frame(700.0, spinner_config)
    b = compute_frame(4700.0, spinner_config)
    np.testing.assert_allclose(np.array(a.inner_points), np.array(b.inner_points), atol=1e-9)


def test_light_theme_swaps_colors() -> None:
    cfg = build_preset("spinner", LIGHT, config={})
    out = compute_frame(0.0, cfg)
    assert {f.fill for f in out.inner_faces} == {LIGHT.fill}


def test_without_stages_all_faces_share_progress() -> None:
    cfg = FrameConfig(solid=hypercube(), theme=DARK, ramp=DARK.face_ramp())
    out = compute_frame(1000.0, cfg)
    assert len(set(out.stage_progress.values())) == 1
    assert out.stage_progress[0] == pytest.approx(0.5)


def test_frozen_progress_ignores_time() -> None:
    cfg = FrameConfig(solid=hypercube(), theme=DARK, frozen_progress=0.25)
    assert compute_frame(0.0, cfg) == compute_frame(9999.0, cfg)
    assert compute_frame(0.0, cfg).state.eased_progress == 0.25


def test_offset_translates_every_point() -> None:
    base = compute_frame(300.0, FrameConfig(solid=hypercube(), theme=DARK))
    moved = compute_frame(300.0, FrameConfig(solid=hypercube(), theme=DARK, offset=(5.0, -7.0)))
    delta = np.array(moved.outer_points) - np.array(base.outer_points)
    np.testing.assert_allclose(delta, np.tile([5.0, -7.0], (8, 1)), atol=1e-9)


@pytest.mark.parametrize(
    "solid_changes",
    [
        {"outer_vertices": ()},
        {"inner_edges": ((0, 8),)},
        {"inner_faces": ((0, 1),)},
        {"outer_faces": ((0, 1, 42),)},
        {"inner_vertices": tuple(Vector3(0.0, 0.0, float(i)) for i in range(4)),
         "inner_edges": ((0, 1),),
         "inner_faces": ((0, 1, 2),)},
        {"outer_edge_segments": ((Vector3(), Vector3(), Vector3()),)},
    ],
)
def test_invalid_geometry_rejected(solid_changes: dict) -> None:
    solid = replace(hypercube(), **solid_changes)
    with pytest.raises(FrameConfigError):
        FrameConfig(solid=solid, theme=DARK)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"scale": 0.0},
        {"scale": float("nan")},
        {"offset": (float("inf"), 0.0)},
        {"offset": (1.0, 2.0, 3.0)},
        {"frozen_progress": float("nan")},
        {"stages": StageScheduler(table=StageTable({0: 0.0}))},
    ],
)
def test_invalid_config_rejected(kwargs: dict) -> None:
    with pytest.raises(FrameConfigError):
        FrameConfig(solid=hypercube(), theme=DARK, **kwargs)


def test_frame_config_error_is_value_error() -> None:
    assert issubclass(FrameConfigError, ValueError)


def test_unconnected_solids_may_differ_in_vertex_count() -> None:
    solid = replace(
        hypercube(),
        inner_vertices=tuple(Vector3(float(i), 0.0, 0.0) for i in range(3)),
        inner_edges=((0, 1), (1, 2)),
        inner_faces=((0, 1, 2),),
    )
    out = compute_frame(0.0, FrameConfig(solid=solid, theme=DARK, connect_vertices=False))
    assert out.connections == ()
    assert len(out.inner_points) == 3


def test_frame_debug_logging(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
    reload_settings: None,
    spinner_config: FrameConfig,
) -> None:
    monkeypatch.setenv("HCM_FRAME_DEBUG", "1")
    settings.reload_from_env()
    caplog.set_level(logging.DEBUG, logger="engine.animation.frame")
    compute_frame(500.0, spinner_config)
    assert "frame: progress=" in caplog.text
