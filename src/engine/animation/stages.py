"""
どこで: `engine.animation.stages`
何を: 全体進捗を要素（面/辺）ごとの遅延付き進捗へ写す `StageScheduler` と、その遅延表 `StageTable`。
なぜ: 面ごとの色遷移タイミングを分岐ではなくデータで表し、新しいジオメトリを設定だけで扱うため。

式（要素 i）:
    stage_i = clamp((p − base_delay − offset_i) / stage_duration, 0, 1)

既定の内側キューブ面テーブル（面 index は `shapes.hypercube.CUBE_FACES` の並び）:
    底面(4)=0 → 側面 前(0)/左(2)/右(3)=0.15 → 背面(1)=0.3 → 上面(5)=0.45
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class StageTable:
    """要素 index → 追加オフセット（進捗単位）の対応表。"""

    offsets: Mapping[int, float]

    def __post_init__(self) -> None:
        if not self.offsets:
            raise ValueError("StageTable は少なくとも 1 要素が必要")
        normalized: dict[int, float] = {}
        for key, val in self.offsets.items():
            if not isinstance(key, int) or key < 0:
                raise ValueError(f"StageTable のキーは非負整数が必要: got {key!r}")
            off = float(val)
            if not math.isfinite(off):
                raise ValueError(f"StageTable のオフセットは有限値が必要: {key} -> {val!r}")
            normalized[key] = off
        object.__setattr__(self, "offsets", MappingProxyType(dict(sorted(normalized.items()))))

    @property
    def keys(self) -> frozenset[int]:
        return frozenset(self.offsets)

    def offset(self, index: int) -> float:
        """未登録 index は `KeyError`。"""
        return self.offsets[index]


# 底面 → 側面 → 背面 → 上面 の順で色が乗る
DEFAULT_FACE_STAGES = StageTable(
    {
        4: 0.0,  # bottom
        0: 0.15,  # front
        2: 0.15,  # left
        3: 0.15,  # right
        1: 0.3,  # back
        5: 0.45,  # top
    }
)


def clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else x


@dataclass(frozen=True)
class StageScheduler:
    base_delay: float = 0.1
    stage_duration: float = 0.3
    table: StageTable = field(default_factory=lambda: DEFAULT_FACE_STAGES)

    def __post_init__(self) -> None:
        if not math.isfinite(self.stage_duration) or self.stage_duration <= 0.0:
            raise ValueError(f"stage_duration は正の値が必要: got {self.stage_duration!r}")
        if not math.isfinite(self.base_delay):
            raise ValueError(f"base_delay は有限値が必要: got {self.base_delay!r}")

    def stage_progress(self, progress: float, index: int) -> float:
        """要素 `index` の進捗 `[0, 1]`。"""
        offset = self.table.offset(index)
        return clamp01((progress - self.base_delay - offset) / self.stage_duration)

    def progress_map(self, progress: float) -> dict[int, float]:
        """テーブル上の全要素について進捗を返す。"""
        return {i: self.stage_progress(progress, i) for i in self.table.offsets}


__all__ = ["StageTable", "StageScheduler", "DEFAULT_FACE_STAGES", "clamp01"]
