"""
どこで: `api` 入口（高レベル公開 API）。
何を: プリセット生成・フレーム計算・描画面・ループ駆動を単一名前空間から再輸出。
なぜ: ホストが `api` だけを import すれば可視化の組み込みが完結するようにするため。

Usage:
    from api import RecordingSurface, build_preset, compute_frame, create_loop

    cfg = build_preset("spinner", theme="dark")
    out = compute_frame(1234.0, cfg)

    surface = RecordingSurface()
    loop = create_loop("spinner", surface, instance_id="header")
    loop.start()
    loop.on_animation_frame(16.7)
"""

from common.logging import setup_default_logging
from engine.animation import (
    AnimationClock,
    EdgeClassifier,
    FrameConfig,
    FrameConfigError,
    FrameOutput,
    HoverProgress,
    Theme,
    compute_frame,
    compute_frame_from_state,
)
from engine.core.frame_clock import FrameClock
from engine.render import DrawingSurface, RecordingSurface, StrokeTable, emit_frame
from engine.runtime import AnimationLoop
from shapes.registry import shape as shape  # 公開唯一経路（api.shape）

from .presets import build_preset, create_loop, list_presets, preset
from .themes import get_theme, load_themes

__all__ = [
    # 主要API
    "build_preset",
    "create_loop",
    "list_presets",
    "compute_frame",
    "compute_frame_from_state",
    "get_theme",
    "load_themes",
    # 拡張用デコレータ
    "preset",
    "shape",
    # クラス（高度な使用）
    "AnimationClock",
    "AnimationLoop",
    "EdgeClassifier",
    "FrameClock",
    "FrameConfig",
    "FrameConfigError",
    "FrameOutput",
    "HoverProgress",
    "Theme",
    "DrawingSurface",
    "RecordingSurface",
    "StrokeTable",
    "emit_frame",
    # ログ
    "setup_default_logging",
]

# バージョン情報
__version__ = "0.1.0"
