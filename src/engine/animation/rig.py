"""
どこで: `engine.animation.rig`
何を: イージング済み進捗から外側/内側キューブの回転行列を導く「リグ」。
なぜ: 回転の組み立て方（係数・合成順）をデータ化し、グローバルな行列変数なしに
      `compute_frame` へ明示的に渡すため。

LoopRig（スピナー/ホバー型）:
- 外側: `rotation_y(eased · outer_turns · 2π)`（単調に増えるだけ）。
- 内側: 倍率 `m = sin(eased · outer_turns · π)` は 1 ループ内で上がって下がる。
  `a = −m · inner_amplitude` とし、
  `inner = multiply_matrices(rotation_y(外側角), rotation_axis(normalize(1,1,1), base_angle))
           .multiply(rotation_from_euler(a·wx, a·wy, a·wz))`。
  外側と内側の非対称な動きは意図どおり。

StaticRig（ブラックホール合成/警告）:
- 進捗に依存しない固定 Euler 回転。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

from common.types import Vec3
from engine.core.matrix import Matrix4
from engine.core.vector import Euler, Vector3


class RotationRig(Protocol):
    """`eased` から `(outer, inner)` の回転行列を返すもの。"""

    def matrices(self, eased_progress: float) -> tuple[Matrix4, Matrix4]: ...


@dataclass(frozen=True)
class LoopRig:
    outer_turns: float = 0.5
    inner_amplitude: float = math.pi * 0.5
    euler_weights: Vec3 = (0.8, 1.0, 0.6)
    base_axis: Vec3 = (1.0, 1.0, 1.0)
    base_angle: float = -math.pi / 4

    def outer_angle(self, eased_progress: float) -> float:
        return eased_progress * self.outer_turns * math.pi * 2

    def inner_multiplier(self, eased_progress: float) -> float:
        return math.sin(eased_progress * self.outer_turns * math.pi)

    def matrices(self, eased_progress: float) -> tuple[Matrix4, Matrix4]:
        outer_angle = self.outer_angle(eased_progress)
        outer = Matrix4.rotation_y(outer_angle)

        axis = Vector3.from_iterable(self.base_axis).normalize()
        base = Matrix4.rotation_axis(axis, self.base_angle)
        a = -self.inner_multiplier(eased_progress) * self.inner_amplitude
        wx, wy, wz = self.euler_weights
        wobble = Matrix4.rotation_from_euler(Euler(a * wx, a * wy, a * wz))

        inner = Matrix4.multiply_matrices(Matrix4.rotation_y(outer_angle), base).multiply(wobble)
        return outer, Matrix4.from_matrix(inner)


@dataclass(frozen=True)
class StaticRig:
    outer_euler: Vec3 = (0.0, 0.0, 0.0)
    inner_euler: Vec3 = (0.0, 0.0, 0.0)

    def matrices(self, eased_progress: float) -> tuple[Matrix4, Matrix4]:
        return (
            Matrix4.rotation_from_euler(*self.outer_euler),
            Matrix4.rotation_from_euler(*self.inner_euler),
        )


__all__ = ["RotationRig", "LoopRig", "StaticRig"]
