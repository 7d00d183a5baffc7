"""
どこで: `api.presets`
何を: 名前付き可視化プリセット（スピナー/ホバー/ブラックホール合成/警告）の登録と `FrameConfig` 生成。
なぜ: 各可視化の調整値（倍率・段階表・辺分類表・色）を「設定」として一箇所に集め、
      ホストはプリセット名とテーマ名を渡すだけで済むようにするため。

設定の優先順（高 → 低）:
    `build_preset(..., **overrides)` → YAML `presets.<name>` → 環境変数（settings）→ コード既定値
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, Mapping

from common import settings
from common.base_registry import BaseRegistry
from engine.animation.clock import AnimationClock
from engine.animation.color import Theme
from engine.animation.edges import EdgeClassifier
from engine.animation.frame import FrameConfig
from engine.animation.hover import HoverProgress
from engine.animation.rig import LoopRig, StaticRig
from engine.animation.stages import StageScheduler
from engine.render.surface import DrawingSurface
from engine.render.types import StrokeTable
from engine.runtime.loop import AnimationLoop
from shapes.registry import get_shape
from util.utils import load_config

from .themes import get_theme

logger = logging.getLogger(__name__)

PresetFn = Callable[[Theme, Mapping[str, Any]], FrameConfig]

_preset_registry = BaseRegistry("preset")


def preset(name: str | None = None) -> Callable[[PresetFn], PresetFn]:
    """プリセット関数を登録するデコレータ（`@preset()` / `@preset("name")`）。"""
    return _preset_registry.register(name)


def list_presets() -> list[str]:
    return sorted(_preset_registry.list_all())


def _offset(options: Mapping[str, Any], default: tuple[float, float]) -> tuple[float, float]:
    raw = options.get("offset", default)
    dx, dy = raw
    return (float(dx), float(dy))


@preset()
def spinner(theme: Theme, options: Mapping[str, Any]) -> FrameConfig:
    """ローディングスピナー: 4 秒ループ・面ごとの段階的な色遷移・奥の辺を細線に。"""
    duration = float(options.get("loop_duration_ms", settings.get().LOOP_DURATION_MS))
    return FrameConfig(
        solid=get_shape("hypercube")(segments=True),
        theme=theme,
        scale=float(options.get("scale", 100.0)),
        clock=AnimationClock(duration),
        rig=LoopRig(),
        stages=StageScheduler(),
        ramp=theme.face_ramp(),
        outer_classifier=EdgeClassifier(),
    )


@preset()
def hover_cube(theme: Theme, options: Mapping[str, Any]) -> FrameConfig:
    """ホバー型: 進捗は `HoverProgress` から与える（色遷移なし）。"""
    return FrameConfig(
        solid=get_shape("hypercube")(segments=True),
        theme=theme,
        scale=float(options.get("scale", 100.0)),
        rig=LoopRig(),
        outer_classifier=EdgeClassifier(),
    )


@preset()
def black_hole_cube(theme: Theme, options: Mapping[str, Any]) -> FrameConfig:
    """ブラックホール合成: 固定 Euler 回転・凸包シルエット・下方へ平行移動。"""
    return FrameConfig(
        solid=get_shape("hypercube")(),
        theme=theme,
        scale=float(options.get("scale", 16.0)),
        offset=_offset(options, (0.0, 200.0)),
        rig=StaticRig(outer_euler=(0.3, 0.5, 0.2), inner_euler=(0.2, 0.4, 0.1)),
        outer_classifier=EdgeClassifier.all_thick(),
        hull_silhouette=True,
        fill_faces=False,
        frozen_progress=0.0,
    )


@preset()
def warning_cube(theme: Theme, options: Mapping[str, Any]) -> FrameConfig:
    """警告ハイパーキューブ: 進捗 0 で静止（外側は正面視、内側は視線軸まわりに 45°）。

    外側/内側とも、奥の頂点 (-1, -1, -1) に接する 3 辺を細線にする。
    """
    inner = float(options.get("inner", 0.525))
    return FrameConfig(
        solid=get_shape("hypercube")(inner=inner, segments=True),
        theme=theme,
        scale=float(options.get("scale", 45.0)),
        rig=LoopRig(),
        outer_classifier=EdgeClassifier.uniform((2, 5, 6)),
        inner_classifier=EdgeClassifier.uniform((0, 3, 8)),
        frozen_progress=0.0,
    )


def build_preset(
    name: str,
    theme: str | Theme = "dark",
    *,
    config: Mapping[str, Any] | None = None,
    **overrides: Any,
) -> FrameConfig:
    """プリセット名とテーマから `FrameConfig` を生成する。

    Parameters
    ----------
    name : str
        登録済みプリセット名（"spinner" / "hover_cube" / "black_hole_cube" / "warning_cube"）。
    theme : str | Theme, default "dark"
        テーマ名または `Theme`。
    config : Mapping | None
        読み込み済みの設定辞書。None なら `util.utils.load_config()` を使う。
    **overrides
        YAML の `presets.<name>` より優先する値（例: `scale=64`）。

    Raises
    ------
    KeyError
        未登録のプリセット名/テーマ名。
    FrameConfigError
        生成された設定が不整合な場合。
    """
    fn: PresetFn = _preset_registry.get(name)
    cfg = load_config() if config is None else config
    options: dict[str, Any] = {}
    section = cfg.get("presets")
    if isinstance(section, Mapping):
        data = section.get(_preset_registry.normalize_key(name))
        if isinstance(data, Mapping):
            options.update(data)
    options.update(overrides)
    for key in ("scale", "loop_duration_ms"):
        if key in options and not math.isfinite(float(options[key])):
            raise ValueError(f"preset '{name}': {key} は有限値が必要: {options[key]!r}")
    resolved = get_theme(theme, cfg)
    logger.debug("build preset '%s' with options=%s", name, options)
    return fn(resolved, options)


def create_loop(
    name: str,
    surface: DrawingSurface,
    theme: str | Theme = "dark",
    *,
    instance_id: str = "default",
    config: Mapping[str, Any] | None = None,
    widths: StrokeTable | None = None,
    **overrides: Any,
) -> AnimationLoop:
    """プリセットから `AnimationLoop` を組み立てる（開始はしない）。

    `hover_cube` はホバー進捗 `HoverProgress` で駆動し、それ以外は時計で駆動する。
    """
    frame_config = build_preset(name, theme, config=config, **overrides)
    hover = HoverProgress() if _preset_registry.normalize_key(name) == "hover_cube" else None
    return AnimationLoop(
        frame_config, surface, instance_id=instance_id, hover=hover, widths=widths
    )


__all__ = ["preset", "build_preset", "list_presets", "create_loop"]
