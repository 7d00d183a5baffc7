"""
どこで: `engine.core.vector`
何を: 3 成分ベクトルの値型 `Vector3` と Euler 角の値型 `Euler` を提供。
なぜ: 頂点/回転軸を「値」として扱い、可変バッファ共有によるエイリアシングを排除するため。

要点:
- すべて不変（frozen dataclass）。演算は新しいインスタンスを返す純関数。
- `apply_matrix4` は同次座標 `[x, y, z, 1]` に列優先 4x4 行列を掛け、w 成分は捨てる
  （アフィン行列＝最終行 `[0,0,0,1]` を前提）。
- NaN/Inf はそのまま伝播する（ガードしない）。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Protocol

import numpy as np


class _MatrixLike(Protocol):
    """`elements: (16,)` を持つ列優先 4x4 行列（`Matrix4`）。"""

    elements: np.ndarray


@dataclass(frozen=True)
class Vector3:
    """3D ベクトル（float64 値型）。"""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    # ── ファクトリ ───────────────────
    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vector3":
        """長さ 3 の列から生成する。長さ不一致は `ValueError`。"""
        seq = [float(v) for v in values]
        if len(seq) != 3:
            raise ValueError(f"Vector3 には 3 成分が必要です: got {len(seq)}")
        return cls(seq[0], seq[1], seq[2])

    # ── 基本演算（すべて純粋） ────────
    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, k: float) -> "Vector3":
        return Vector3(self.x * k, self.y * k, self.z * k)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> "Vector3":
        """単位ベクトルを返す。

        長さ 0 のときは 0 除算せず、ゼロベクトルをそのまま返す。
        """
        length = self.length()
        if length > 0:
            return Vector3(self.x / length, self.y / length, self.z / length)
        return self

    def apply_matrix4(self, m: _MatrixLike) -> "Vector3":
        """`v' = M·[v, 1]` を返す（列優先の要素 index で評価）。"""
        e = m.elements
        x, y, z = self.x, self.y, self.z
        return Vector3(
            float(e[0] * x + e[4] * y + e[8] * z + e[12]),
            float(e[1] * x + e[5] * y + e[9] * z + e[13]),
            float(e[2] * x + e[6] * y + e[10] * z + e[14]),
        )

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def as_array(self) -> np.ndarray:
        """`(3,)` float64 配列（新規コピー）。"""
        return np.array([self.x, self.y, self.z], dtype=np.float64)


@dataclass(frozen=True)
class Euler:
    """XYZ の Euler 角 [rad]。`Matrix4.rotation_from_euler` の入力。"""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


__all__ = ["Vector3", "Euler"]
