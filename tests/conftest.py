"""共通フィクスチャ。

- 設定ファイルを読まない空の設定辞書
- 既定テーマ/プリセットの FrameConfig
- 環境変数を汚さない settings の再読込
"""

from __future__ import annotations

from typing import Any, Iterator

import pytest

from api.presets import build_preset
from common import settings
from engine.animation import DARK, FrameConfig


@pytest.fixture()
def empty_config() -> dict[str, Any]:
    """`configs/default.yaml` に依存しないための空設定。"""
    return {}


@pytest.fixture()
def spinner_config(empty_config: dict[str, Any]) -> FrameConfig:
    return build_preset("spinner", DARK, config=empty_config)


@pytest.fixture()
def reload_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """テスト中に設定した `HCM_*` を後始末して settings を既定へ戻す。"""
    yield
    for name in ("HCM_LOOP_DURATION_MS", "HCM_LOG_LEVEL", "HCM_FRAME_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
