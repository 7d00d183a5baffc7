"""
どこで: `engine.runtime` サブパッケージ。
何を: 可視化インスタンスの開始/停止と、フレームごとの計算→描画面への送出を担う AnimationLoop。
なぜ: ホストの描画ループ管理とコアの純粋なフレーム計算を分離するため。
"""

from .loop import AnimationLoop

__all__ = ["AnimationLoop"]
