"""
どこで: `engine.core` の簡易フレームドライバ。
何を: `Tickable` の列を固定順序で呼び出す FrameClock（dt 測定とループ管理）。
なぜ: ホストの「次フレーム要求」コールバックから呼ぶだけで、複数アニメーションの更新順を統一するため。
"""

from __future__ import annotations

import time
from typing import Callable, Sequence

from .tickable import Tickable


class FrameClock:
    """登録された Tickable を固定順序で実行するだけの極小クラス。

    `now` は秒単位の単調時計（既定 `time.perf_counter`）。テストでは差し替え可能。
    """

    def __init__(
        self,
        tickables: Sequence[Tickable],
        *,
        now: Callable[[], float] = time.perf_counter,
    ):
        self._tickables = tuple(tickables)
        self._now = now
        self._last_time = now()

    @property
    def tickables(self) -> tuple[Tickable, ...]:
        return self._tickables

    # ホストの requestAnimationFrame 相当から呼ばせる
    def tick(self, dt: float | None = None) -> None:
        if dt is None:  # 呼び出し側が dt を渡さない場合は自前で測る
            now = self._now()
            dt = now - self._last_time
            self._last_time = now

        for t in self._tickables:
            t.tick(dt)
