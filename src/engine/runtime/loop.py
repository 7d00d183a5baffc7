"""
どこで: `engine.runtime.loop`
何を: 1 つの可視化インスタンスを駆動する `AnimationLoop`（開始/停止ハンドルと経過時間の累積）。
なぜ: 「次フレーム要求 → 計算 → 描画 → 繰り返し」のうちコア側の責務だけを Tickable として切り出し、
      ホストの描画ループ（FrameClock/requestAnimationFrame 相当）から呼べるようにするため。

契約:
- フレーム間で持ち越す状態は「実行中フラグ」と「経過時間 [ms]」（ホバー駆動時はその進捗）のみ。
- `cancel()` 後の `tick()` / `on_animation_frame()` は何も計算せず即座に戻る。
- インスタンス同士は状態を共有しない。`instance_id` は出力先の振り分けにだけ使う。
"""

from __future__ import annotations

import logging

from engine.animation.frame import (
    FrameConfig,
    FrameOutput,
    compute_frame,
    compute_frame_from_state,
)
from engine.animation.hover import HoverProgress
from engine.render.surface import DrawingSurface, emit_frame
from engine.render.types import StrokeTable

logger = logging.getLogger(__name__)


class AnimationLoop:
    """可視化 1 インスタンス分のフレーム駆動。"""

    def __init__(
        self,
        config: FrameConfig,
        surface: DrawingSurface,
        *,
        instance_id: str = "default",
        hover: HoverProgress | None = None,
        widths: StrokeTable | None = None,
    ) -> None:
        self._config = config
        self._surface = surface
        self._instance_id = instance_id
        self._hover = hover
        self._widths = widths
        self._running = False
        self._elapsed_ms = 0.0
        self._last: FrameOutput | None = None

    # ---- ハンドル -------------------------------------------------------
    @property
    def instance_id(self) -> str:
        return self._instance_id

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def elapsed_ms(self) -> float:
        return self._elapsed_ms

    @property
    def last_output(self) -> FrameOutput | None:
        return self._last

    @property
    def hover(self) -> HoverProgress | None:
        return self._hover

    def start(self, at_ms: float = 0.0) -> None:
        """描画を開始（マウント相当）。経過時間を `at_ms` に合わせる。"""
        self._elapsed_ms = float(at_ms)
        self._running = True
        logger.debug("loop start: id=%s at=%.1fms", self._instance_id, self._elapsed_ms)

    def cancel(self) -> None:
        """以降のフレームを止める（アンマウント相当）。多重呼び出しは no-op。"""
        if self._running:
            logger.debug("loop cancel: id=%s at=%.1fms", self._instance_id, self._elapsed_ms)
        self._running = False

    # ---- フレーム ------------------------------------------------------
    def tick(self, dt: float) -> None:
        """`dt` 秒進めて 1 フレーム描画する（FrameClock から呼ばれる）。"""
        if not self._running:
            return
        self._elapsed_ms += float(dt) * 1000.0
        if self._hover is not None:
            self._hover.tick(dt)
        self._render()

    def on_animation_frame(self, timestamp_ms: float) -> FrameOutput | None:
        """ホストのタイムスタンプで 1 フレーム描画する（requestAnimationFrame 相当）。"""
        if not self._running:
            return None
        self._elapsed_ms = float(timestamp_ms)
        if self._hover is not None:
            self._hover.tick(0.0)
        return self._render()

    def _render(self) -> FrameOutput:
        if self._hover is not None:
            out = compute_frame_from_state(self._hover.state(), self._config)
        else:
            out = compute_frame(self._elapsed_ms, self._config)
        emit_frame(
            out,
            self._surface,
            stroke=self._config.theme.stroke,
            instance_id=self._instance_id,
            widths=self._widths,
        )
        self._last = out
        return out


__all__ = ["AnimationLoop"]
