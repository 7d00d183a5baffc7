"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .env import env_bool, env_float, env_str


@dataclass
class _Settings:
    # アニメーション
    LOOP_DURATION_MS: float = 4000.0

    # ログ
    LOG_LEVEL: str = "INFO"
    FRAME_DEBUG: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - ループ周期は正の値のみ受理し、0 以下/不正値は既定値へ戻す。
    """
    duration = env_float("HCM_LOOP_DURATION_MS", 4000.0)
    _settings.LOOP_DURATION_MS = duration if math.isfinite(duration) and duration > 0.0 else 4000.0

    _settings.LOG_LEVEL = env_str("HCM_LOG_LEVEL", "INFO").upper()
    _settings.FRAME_DEBUG = env_bool("HCM_FRAME_DEBUG", False)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
