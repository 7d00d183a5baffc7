"""
どこで: `engine.core.matrix`
何を: 4x4 同次変換行列 `Matrix4`（回転の生成・合成・点群への適用）。
なぜ: 回転行列を不変値として毎フレーム組み立て直し、複数インスタンス間で状態を共有しないため。

データモデル（不変条件）:
- `elements: float64 ndarray (16,)`、読み取り専用。要素は列優先（column-major）で並ぶ。
  平行移動成分は `e[12], e[13], e[14]`。
- すべての生成関数は最終行 `[0, 0, 0, 1]` を満たす行列を返す。
- 部分更新は存在しない。生成/合成は常に新しいインスタンスを返す。

合成の規約:
- `multiply_matrices(a, b)` は要素列に対して `r[i*4+j] = Σk a[i*4+k]·b[k*4+j]` を評価する。
  つまり `elements.reshape(4, 4)`（行優先読み）同士の積 `A @ B`。
- 列優先で解釈すると `r = b·a` に相当するため、`v.apply_matrix4(a.multiply(b))` は
  「a を適用してから b を適用」と一致する。見た目の互換のためこの順序は固定。

直感図（要素 index と行列の対応）:

    #   | e0  e4  e8  e12 |     x' = e0·x + e4·y + e8·z  + e12
    #   | e1  e5  e9  e13 |     y' = e1·x + e5·y + e9·z  + e13
    #   | e2  e6  e10 e14 |     z' = e2·x + e6·y + e10·z + e14
    #   | e3  e7  e11 e15 |     （e3, e7, e11 = 0, e15 = 1）
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

import numpy as np

from .vector import Euler, Vector3

_IDENTITY = (1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0)


def _freeze(values: Iterable[float] | np.ndarray) -> np.ndarray:
    arr = np.array(values, dtype=np.float64).reshape(16)
    arr.setflags(write=False)
    return arr


class Matrix4:
    """不変な 4x4 同次変換行列。"""

    __slots__ = ("elements",)

    elements: np.ndarray

    def __init__(self, elements: Sequence[float] | np.ndarray | None = None) -> None:
        if elements is None:
            elements = _IDENTITY
        arr = np.asarray(elements, dtype=np.float64)
        if arr.size != 16:
            raise ValueError(f"Matrix4 には 16 要素が必要です: got {arr.size}")
        self.elements = _freeze(arr)

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        vals = ", ".join(f"{v:.4g}" for v in self.elements)
        return f"Matrix4([{vals}])"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Matrix4) and bool(np.array_equal(self.elements, other.elements))

    # ── 生成 ───────────────────────────
    @classmethod
    def identity(cls) -> "Matrix4":
        return cls(_IDENTITY)

    @classmethod
    def rotation_y(cls, theta: float) -> "Matrix4":
        """Y 軸まわりの回転 [rad]。"""
        c = math.cos(theta)
        s = math.sin(theta)
        return cls((c, 0, s, 0, 0, 1, 0, 0, -s, 0, c, 0, 0, 0, 0, 1))

    @classmethod
    def rotation_axis(cls, axis: Vector3, angle: float) -> "Matrix4":
        """任意軸まわりの回転（Rodrigues の回転公式）。

        `axis` は正規化済みであることを前提とする（ここでは正規化しない）。
        """
        c = math.cos(angle)
        s = math.sin(angle)
        t = 1 - c
        x, y, z = axis.x, axis.y, axis.z
        tx, ty = t * x, t * y
        return cls(
            (
                tx * x + c,
                tx * y - s * z,
                tx * z + s * y,
                0,
                tx * y + s * z,
                ty * y + c,
                ty * z - s * x,
                0,
                tx * z - s * y,
                ty * z + s * x,
                t * z * z + c,
                0,
                0,
                0,
                0,
                1,
            )
        )

    @classmethod
    def rotation_from_euler(
        cls, x: float | Euler, y: float = 0.0, z: float = 0.0
    ) -> "Matrix4":
        """Euler 角（XYZ）から回転行列を生成する。

        `Euler` インスタンス、または `(x, y, z)` の 3 スカラを受け付ける。
        """
        if isinstance(x, Euler):
            x, y, z = x.x, x.y, x.z
        cx, sx = math.cos(x), math.sin(x)
        cy, sy = math.cos(y), math.sin(y)
        cz, sz = math.cos(z), math.sin(z)
        return cls(
            (
                cy * cz,
                cx * sz + sx * sy * cz,
                sx * sz - cx * sy * cz,
                0,
                -cy * sz,
                cx * cz - sx * sy * sz,
                sx * cz + cx * sy * sz,
                0,
                sy,
                -sx * cy,
                cx * cy,
                0,
                0,
                0,
                0,
                1,
            )
        )

    @classmethod
    def multiply_matrices(cls, a: "Matrix4", b: "Matrix4") -> "Matrix4":
        """`a·b`（モジュール docstring の合成規約を参照）。"""
        prod = a.elements.reshape(4, 4) @ b.elements.reshape(4, 4)
        return cls(prod.reshape(16))

    @classmethod
    def from_matrix(cls, m: "Matrix4") -> "Matrix4":
        """行列のコピー（`setFromRotationMatrix` 相当）。"""
        return cls(m.elements.copy())

    # ── 合成（純粋） ──────────────────
    def multiply(self, m: "Matrix4") -> "Matrix4":
        """`self·m` を新しい行列として返す（self は不変）。"""
        return Matrix4.multiply_matrices(self, m)

    def copy(self) -> "Matrix4":
        return Matrix4.from_matrix(self)

    # ── 適用 ───────────────────────────
    def apply_to_points(self, points: np.ndarray) -> np.ndarray:
        """`(N, 3)` の点群へ一括適用して新しい `(N, 3)` float64 配列を返す。"""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        # 列優先格納を行列として読むと転置になるため、行ベクトル側から掛ける
        m = self.elements.reshape(4, 4)
        return pts @ m[:3, :3] + m[3, :3]


__all__ = ["Matrix4"]
