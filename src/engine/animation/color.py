"""
どこで: `engine.animation.color`
何を: 要素進捗に応じてベース色とアクセント色を線形補間する `ColorRamp`。
なぜ: 面ごとの段階的な色遷移（例: 黒→ブランド青）をテーマから独立に計算するため。

式:
    blend   = clamp(progress, 0, 1) ** exponent     （既定 exponent=1.5）
    channel = round(base·(1 − blend) + accent·blend) を 0..255 へ制限
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from common.types import RGB
from util.color import clamp_u8, to_u8_rgb

from .stages import clamp01


def interpolate_rgb(progress: float, base: RGB, accent: RGB, exponent: float = 1.5) -> RGB:
    """`progress` に応じた補間色（純関数）。"""
    blend = clamp01(float(progress)) ** exponent
    r = clamp_u8(base[0] * (1 - blend) + accent[0] * blend)
    g = clamp_u8(base[1] * (1 - blend) + accent[1] * blend)
    b = clamp_u8(base[2] * (1 - blend) + accent[2] * blend)
    return (r, g, b)


@dataclass(frozen=True)
class ColorRamp:
    base: RGB
    accent: RGB
    exponent: float = 1.5

    def __post_init__(self) -> None:
        object.__setattr__(self, "base", to_u8_rgb(self.base))
        object.__setattr__(self, "accent", to_u8_rgb(self.accent))
        if not math.isfinite(self.exponent) or self.exponent <= 0.0:
            raise ValueError(f"exponent は正の値が必要: got {self.exponent!r}")

    def at(self, progress: float) -> RGB:
        return interpolate_rgb(progress, self.base, self.accent, self.exponent)


@dataclass(frozen=True)
class Theme:
    """線色・塗り色・アクセント色の 3 色パレット（ホストがテーマに応じて選ぶ）。"""

    stroke: RGB
    fill: RGB
    accent: RGB

    def __post_init__(self) -> None:
        for name in ("stroke", "fill", "accent"):
            object.__setattr__(self, name, to_u8_rgb(getattr(self, name)))

    def face_ramp(self, exponent: float = 1.5) -> ColorRamp:
        """塗り色 → アクセント色の補間（スピナーの内側の面）。"""
        return ColorRamp(self.fill, self.accent, exponent)


# accent はブランド青 #0005e9
DARK = Theme(stroke=(255, 255, 255), fill=(0, 0, 0), accent=(0, 5, 233))
LIGHT = Theme(stroke=(0, 0, 0), fill=(255, 255, 255), accent=(0, 5, 233))


__all__ = ["ColorRamp", "Theme", "DARK", "LIGHT", "interpolate_rgb"]
