"""
どこで: `engine.animation` サブパッケージ。
何を: 時計/イージング・回転リグ・段階進捗・辺分類・色補間と、それらを束ねる `compute_frame`。
なぜ: 時間入力から描画プリミティブまでを純関数の連鎖として提供するため。
"""

from .clock import AnimationClock, AnimationState, ease_in_out_quad, state_at
from .color import DARK, LIGHT, ColorRamp, Theme, interpolate_rgb
from .edges import AngleBucket, EdgeClassifier, EdgeWeight, fold_degrees, rotation_degrees
from .frame import (
    EdgeLine,
    FacePolygon,
    FrameConfig,
    FrameConfigError,
    FrameOutput,
    Line2D,
    compute_frame,
    compute_frame_from_state,
)
from .hover import HoverProgress
from .rig import LoopRig, RotationRig, StaticRig
from .stages import DEFAULT_FACE_STAGES, StageScheduler, StageTable

__all__ = [
    "AnimationClock",
    "AnimationState",
    "ease_in_out_quad",
    "state_at",
    "ColorRamp",
    "Theme",
    "DARK",
    "LIGHT",
    "interpolate_rgb",
    "AngleBucket",
    "EdgeClassifier",
    "EdgeWeight",
    "fold_degrees",
    "rotation_degrees",
    "FrameConfig",
    "FrameConfigError",
    "FrameOutput",
    "FacePolygon",
    "EdgeLine",
    "Line2D",
    "compute_frame",
    "compute_frame_from_state",
    "HoverProgress",
    "LoopRig",
    "StaticRig",
    "RotationRig",
    "StageScheduler",
    "StageTable",
    "DEFAULT_FACE_STAGES",
]
