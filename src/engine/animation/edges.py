"""
どこで: `engine.animation.edges`
何を: 回転角 [deg] と辺 index から描画カテゴリ（細/太）を引く `EdgeClassifier`。
なぜ: 奥側の辺を細く描く規則を角度バケットの表として持ち、ジオメトリごとに差し替えるため。

規則:
- 角度は 360 で剰余を取り、`(180, 360)` は `360 − d` で `[0, 180]` へ折り返す。
- バケットは半開区間 `[lo, hi)` を昇順に並べたもの。既定は
  `[0, 45) → {2, 5, 6}`, `[45, 135) → {3, 6, 7}`, `[135, ∞) → {0, 4, 7}`。
  境界ちょうど（45, 135）は上側のバケットに属する。
- index が `classifiable_count` 以上の辺は常に既定カテゴリ（THICK）。
- 連続的なブレンドはしない。カテゴリは境界で瞬時に切り替わる。
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence


class EdgeWeight(str, Enum):
    THIN = "thin"
    THICK = "thick"


@dataclass(frozen=True)
class AngleBucket:
    """`upper_deg` 未満（直前バケットの上限以上）で細く描く辺の集合。"""

    upper_deg: float
    thin: frozenset[int]

    @classmethod
    def of(cls, upper_deg: float, thin: Iterable[int]) -> "AngleBucket":
        return cls(float(upper_deg), frozenset(int(i) for i in thin))


DEFAULT_BUCKETS: tuple[AngleBucket, ...] = (
    AngleBucket.of(45.0, (2, 5, 6)),
    AngleBucket.of(135.0, (3, 7, 6)),
    AngleBucket.of(math.inf, (0, 4, 7)),
)


def fold_degrees(degrees: float) -> float:
    """角度を 360 で剰余し、`[0, 180]` へ鏡映で折り返す。"""
    d = float(degrees) % 360.0
    return 360.0 - d if d > 180.0 else d


def rotation_degrees(eased_progress: float) -> float:
    """外側キューブの回転量 [deg]（eased·180）。"""
    return eased_progress * 180.0


@dataclass(frozen=True)
class EdgeClassifier:
    buckets: Sequence[AngleBucket] = field(default_factory=lambda: DEFAULT_BUCKETS)
    classifiable_count: int = 8
    default: EdgeWeight = EdgeWeight.THICK

    def __post_init__(self) -> None:
        buckets = tuple(self.buckets)
        if not buckets:
            raise ValueError("EdgeClassifier には少なくとも 1 つのバケットが必要")
        uppers = [b.upper_deg for b in buckets]
        if any(math.isnan(u) for u in uppers) or any(a >= b for a, b in zip(uppers, uppers[1:])):
            raise ValueError(f"バケット上限は狭義単調増加が必要: {uppers}")
        if uppers[-1] != math.inf:
            raise ValueError("最後のバケットの上限は inf が必要（全角度を覆うため）")
        if self.classifiable_count < 0:
            raise ValueError("classifiable_count は非負が必要")
        object.__setattr__(self, "buckets", buckets)

    def bucket_for(self, degrees: float) -> AngleBucket:
        d = fold_degrees(degrees)
        for bucket in self.buckets:
            if d < bucket.upper_deg:
                return bucket
        return self.buckets[-1]  # NaN はどのバケットにも入らない

    def classify(self, edge_index: int, degrees: float) -> EdgeWeight:
        if edge_index >= self.classifiable_count:
            return self.default
        if edge_index in self.bucket_for(degrees).thin:
            return EdgeWeight.THIN
        return self.default

    @classmethod
    def uniform(cls, thin: Iterable[int], classifiable_count: int = 12) -> "EdgeClassifier":
        """角度に依存しない固定の細線集合。"""
        return cls(buckets=(AngleBucket.of(math.inf, thin),), classifiable_count=classifiable_count)

    @classmethod
    def all_thick(cls) -> "EdgeClassifier":
        return cls.uniform((), classifiable_count=0)


__all__ = [
    "EdgeWeight",
    "AngleBucket",
    "EdgeClassifier",
    "DEFAULT_BUCKETS",
    "fold_degrees",
    "rotation_degrees",
]
