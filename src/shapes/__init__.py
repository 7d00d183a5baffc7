"""
どこで: `shapes` パッケージ（関数登録）。
何を: ビルトイン shape を import 副作用で登録し、`api.presets` から解決できるようにする。
なぜ: 幾何データの拡張点を一箇所に集約するため。
"""

# 関数版 shape 定義を import して登録（副作用）
from . import hypercube as _register_hypercube  # noqa: F401
from .registry import get_shape, is_shape_registered, list_shapes, shape  # re-export

__all__ = [
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
]
