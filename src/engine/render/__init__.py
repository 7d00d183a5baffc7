"""
どこで: `engine.render` サブパッケージ。
何を: FrameOutput → 抽象描画面への橋渡し。プリミティブ型・線幅表・DrawingSurface を提供。
なぜ: 計算（core/animation）と描画の責務を分離し、ホスト固有の描画処理を外側に置くため。
"""

from .surface import DrawingSurface, RecordingSurface, emit_frame
from .types import LinePrimitive, PolygonPrimitive, StrokeStyle, StrokeTable

__all__ = [
    "DrawingSurface",
    "RecordingSurface",
    "emit_frame",
    "LinePrimitive",
    "PolygonPrimitive",
    "StrokeStyle",
    "StrokeTable",
]
