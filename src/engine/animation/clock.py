"""
どこで: `engine.animation.clock`
何を: 壁時計タイムスタンプ [ms] を繰り返し・イージング済みの進捗へ変換する `AnimationClock`。
なぜ: 描画ループから独立した純関数として時間→進捗を定義し、任意時刻でテスト可能にするため。

段階:
1. raw    = (t mod L) / L                         ∈ [0, 1)
2. smooth = (sin(raw·2π − π/2) + 1) / 2           ∈ [0, 1]（raw=0 と raw→1 で一致）
3. eased  = ease_in_out_quad(smooth)              ∈ [0, 1]

- `t` は単調増加を想定するが、逆順/負の時刻でも同じ値を返す（状態を持たない）。
- 中断モデルは無い。停止はホストがループを止めることで表現する。
"""

from __future__ import annotations

import math
from dataclasses import dataclass


def ease_in_out_quad(p: float) -> float:
    """対称な 2 次イーズインアウト（`p<0.5` で `2p²`、以降 `1 − 2(1−p)²`）。"""
    if p < 0.5:
        return 2.0 * p * p
    q = 1.0 - p
    return 1.0 - 2.0 * q * q


def _smooth(raw: float) -> float:
    return (math.sin(raw * math.pi * 2.0 - math.pi / 2.0) + 1.0) / 2.0


@dataclass(frozen=True)
class AnimationState:
    """1 フレーム分の派生状態（毎フレーム再計算、永続化しない）。"""

    progress: float
    smooth_progress: float
    eased_progress: float


@dataclass(frozen=True)
class AnimationClock:
    """ループ周期 `loop_duration_ms` の決定的アニメーション時計。"""

    loop_duration_ms: float = 4000.0

    def __post_init__(self) -> None:
        d = float(self.loop_duration_ms)
        if not math.isfinite(d) or d <= 0.0:
            raise ValueError(f"loop_duration_ms は正の有限値が必要: got {self.loop_duration_ms!r}")

    def raw_progress(self, timestamp_ms: float) -> float:
        """ループ内の線形進捗 `[0, 1)`。"""
        d = float(self.loop_duration_ms)
        r = (float(timestamp_ms) % d) / d
        # 負の微小値の剰余が d に丸められるケースのガード
        return 0.0 if r >= 1.0 else r

    def smooth_progress(self, timestamp_ms: float) -> float:
        """正弦で整形した往復進捗（ループ境界で連続）。"""
        return _smooth(self.raw_progress(timestamp_ms))

    def eased_progress(self, timestamp_ms: float) -> float:
        return ease_in_out_quad(self.smooth_progress(timestamp_ms))

    def state(self, timestamp_ms: float) -> AnimationState:
        raw = self.raw_progress(timestamp_ms)
        smooth = _smooth(raw)
        return AnimationState(
            progress=raw,
            smooth_progress=smooth,
            eased_progress=ease_in_out_quad(smooth),
        )


def state_at(eased_progress: float) -> AnimationState:
    """イージング済み進捗を固定した状態（静止可視化用）。"""
    e = float(eased_progress)
    return AnimationState(progress=e, smooth_progress=e, eased_progress=e)


__all__ = ["AnimationClock", "AnimationState", "ease_in_out_quad", "state_at"]
