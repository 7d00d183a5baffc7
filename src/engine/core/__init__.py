"""
どこで: `engine.core` サブパッケージ。
何を: Vector3/Matrix4・固定投影・フレーム駆動（Tickable/FrameClock）を提供。
なぜ: 幾何計算の基盤を構成し、上位層（animation/render/runtime）から再利用可能にするため。
"""

from .matrix import Matrix4
from .projection import Point2D, project, project_points
from .vector import Euler, Vector3

__all__ = [
    "Vector3",
    "Euler",
    "Matrix4",
    "Point2D",
    "project",
    "project_points",
]
