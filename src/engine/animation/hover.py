"""
どこで: `engine.animation.hover`
何を: ホバー状態で駆動される進捗 `HoverProgress`（目標値へ指数的に近づく Tickable）。
なぜ: 時刻ループではなく入力イベントで回転する可視化（ホバー型ハイパーキューブ）を同じ
      フレーム計算 `compute_frame_from_state` に流し込むため。

挙動:
- 生成直後は「初期アニメーション」: 進捗 1（ホバー姿勢）から 0 へ低速（0.005/tick）で戻る。
- `set_hovered()` の最初の呼び出し、または目標との差が 0.05 未満になった時点で初期段階を終え、
  以後は通常速度（0.02/tick）で目標へ近づく。
- イージングはループ時計と異なり、正弦整形を挟まず進捗へ直接 ease_in_out_quad を適用する。
"""

from __future__ import annotations

import logging

from .clock import AnimationState, ease_in_out_quad

logger = logging.getLogger(__name__)


def lerp(start: float, end: float, factor: float) -> float:
    return start + (end - start) * factor


class HoverProgress:
    """ホバー駆動の進捗。`tick(dt)` ごとに 1 段階進む（dt は使わない）。"""

    def __init__(
        self,
        *,
        speed: float = 0.02,
        initial_speed: float = 0.005,
        settle_threshold: float = 0.05,
        play_intro: bool = True,
    ) -> None:
        if not (0.0 < speed <= 1.0) or not (0.0 < initial_speed <= 1.0):
            raise ValueError("speed/initial_speed は (0, 1] の範囲が必要")
        self._speed = float(speed)
        self._initial_speed = float(initial_speed)
        self._settle = float(settle_threshold)
        self._intro = bool(play_intro)
        self._progress = 1.0 if play_intro else 0.0
        self._target = 0.0

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def target(self) -> float:
        return self._target

    @property
    def in_intro(self) -> bool:
        return self._intro

    def set_hovered(self, hovered: bool) -> None:
        """ポインタの出入り。初期アニメーションはここで打ち切られる。"""
        self._intro = False
        self._target = 1.0 if hovered else 0.0

    def tick(self, dt: float) -> None:
        speed = self._initial_speed if self._intro else self._speed
        self._progress = lerp(self._progress, self._target, speed)
        if self._intro and abs(self._progress - self._target) < self._settle:
            self._intro = False
            logger.debug("hover intro settled at progress=%.4f", self._progress)

    def state(self) -> AnimationState:
        p = self._progress
        return AnimationState(progress=p, smooth_progress=p, eased_progress=ease_in_out_quad(p))


__all__ = ["HoverProgress", "lerp"]
