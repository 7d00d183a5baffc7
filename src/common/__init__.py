"""
どこで: `common` パッケージ。
何を: 型エイリアス・環境変数/設定・ロギング・BaseRegistry などの軽量基盤。
なぜ: engine/shapes/api から再利用する共通基盤を分離し、依存の向きを単純化するため。
"""

from .base_registry import BaseRegistry

__all__ = [
    "BaseRegistry",
]
