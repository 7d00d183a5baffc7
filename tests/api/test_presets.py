from __future__ import annotations

import pytest

import api
from api.presets import build_preset, list_presets, preset
from common import settings
from engine.animation import DARK, LIGHT, EdgeWeight, FrameConfig, compute_frame
from engine.core.projection import ISO_X


@pytest.mark.smoke
def test_builtin_presets_registered() -> None:
    assert {"spinner", "hover_cube", "black_hole_cube", "warning_cube"} <= set(list_presets())


@pytest.mark.integration
@pytest.mark.parametrize("name", ["spinner", "hover_cube", "black_hole_cube", "warning_cube"])
@pytest.mark.parametrize("theme", ["dark", "light"])
def test_every_preset_builds_and_computes(name: str, theme: str) -> None:
    cfg = build_preset(name, theme, config={})
    out = compute_frame(1234.0, cfg)
    assert len(out.outer_points) == 8
    assert out.background == (DARK if theme == "dark" else LIGHT).fill


def test_name_normalization() -> None:
    assert build_preset("black-hole-cube", config={}) == build_preset("BlackHoleCube", config={})


def test_unknown_preset_and_theme() -> None:
    with pytest.raises(KeyError):
        build_preset("nope", config={})
    with pytest.raises(KeyError):
        build_preset("spinner", "sepia", config={})


def test_overrides_beat_yaml_which_beats_defaults() -> None:
    cfg = {"presets": {"spinner": {"scale": 50, "loop_duration_ms": 1000}}}
    from_yaml = build_preset("spinner", config=cfg)
    assert from_yaml.scale == 50.0
    assert from_yaml.clock.loop_duration_ms == 1000.0
    assert build_preset("spinner", config=cfg, scale=64).scale == 64.0
    assert build_preset("spinner", config={}).scale == 100.0


def test_spinner_duration_falls_back_to_settings(
    monkeypatch: pytest.MonkeyPatch, reload_settings: None
) -> None:
    monkeypatch.setenv("HCM_LOOP_DURATION_MS", "2000")
    settings.reload_from_env()
    cfg = build_preset("spinner", config={})
    assert cfg.clock.loop_duration_ms == 2000.0
    assert compute_frame(1000.0, cfg).state.eased_progress == pytest.approx(1.0)


def test_non_finite_override_rejected() -> None:
    with pytest.raises(ValueError):
        build_preset("spinner", config={}, scale=float("inf"))


def test_black_hole_cube_is_static_hull_without_faces() -> None:
    cfg = build_preset("black_hole_cube", config={})
    a = compute_frame(0.0, cfg)
    b = compute_frame(3210.0, cfg)
    assert a == b
    assert a.silhouette_faces == () and a.inner_faces == ()
    assert a.hull is not None and len(a.hull) >= 4
    assert set(a.hull) <= set(a.outer_points + a.inner_points)
    assert all(e.weight is EdgeWeight.THICK for e in a.outer_edges + a.inner_edges)
    cx = sum(p.x for p in a.outer_points) / 8
    cy = sum(p.y for p in a.outer_points) / 8
    assert (cx, cy) == pytest.approx((0.0, 200.0), abs=1e-9)


def test_warning_cube_static_with_fixed_thin_edges() -> None:
    cfg = build_preset("warning_cube", config={})
    out = compute_frame(0.0, cfg)
    assert out == compute_frame(777.0, cfg)
    assert {e.index for e in out.outer_edges if e.weight is EdgeWeight.THIN} == {2, 5, 6}
    assert {e.index for e in out.inner_edges if e.weight is EdgeWeight.THIN} == {0, 3, 8}
    assert {f.fill for f in out.inner_faces} == {DARK.fill}
    assert out.outer_points[1] == pytest.approx((90.0 * ISO_X, 45.0))


def test_hover_cube_has_no_color_ramp() -> None:
    cfg = build_preset("hover_cube", config={})
    assert cfg.ramp is None and cfg.stages is None


def test_custom_preset_registration() -> None:
    @preset("tiny_spinner")
    def _tiny(theme, options) -> FrameConfig:  # noqa: ANN001 - テスト用
        base = build_preset("spinner", theme, config={})
        return FrameConfig(solid=base.solid, theme=theme, scale=float(options.get("scale", 10)))

    try:
        assert build_preset("tiny-spinner", config={}).scale == 10.0
        assert "tiny_spinner" in list_presets()
    finally:
        api.presets._preset_registry.unregister("tiny_spinner")
    assert "tiny_spinner" not in list_presets()


def test_public_api_surface() -> None:
    for name in api.__all__:
        assert hasattr(api, name), name
    assert api.__version__


def test_spinner_configs_do_not_share_stage_table() -> None:
    cfg = {"presets": {"spinner": {"loop_duration_ms": 2000}}}
    a = build_preset("spinner", config=cfg)
    b = build_preset("spinner", config=cfg)
    assert a.stages is not None and b.stages is not None
    with pytest.raises(TypeError):
        a.stages.table.offsets[4] = 0.9  # type: ignore[index]
    assert compute_frame(1000.0, b).stage_progress[4] == pytest.approx(1.0)
