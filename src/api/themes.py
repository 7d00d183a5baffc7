"""
どこで: `api.themes`
何を: テーマ名（"dark"/"light" など）から `Theme` を解決する。
なぜ: 色の既定値をコードに持ちつつ、YAML 設定（`themes:`）で差し替えられるようにするため。
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from engine.animation.color import DARK, LIGHT, Theme
from util.utils import load_config

logger = logging.getLogger(__name__)

BUILTIN_THEMES: dict[str, Theme] = {"dark": DARK, "light": LIGHT}


def _theme_from_mapping(name: str, data: Mapping[str, Any], fallback: Theme) -> Theme:
    try:
        return Theme(
            stroke=data.get("stroke", fallback.stroke),
            fill=data.get("fill", fallback.fill),
            accent=data.get("accent", fallback.accent),
        )
    except ValueError as e:
        raise ValueError(f"theme '{name}' の色指定が不正です: {e}") from e


def load_themes(config: Mapping[str, Any] | None = None) -> dict[str, Theme]:
    """組込みテーマに設定ファイルの `themes:` を重ねた辞書を返す。"""
    cfg = load_config() if config is None else config
    themes = dict(BUILTIN_THEMES)
    section = cfg.get("themes")
    if not isinstance(section, Mapping):
        return themes
    for name, data in section.items():
        if not isinstance(data, Mapping):
            logger.warning("theme '%s' is not a mapping; ignored", name)
            continue
        key = str(name).lower()
        themes[key] = _theme_from_mapping(key, data, themes.get(key, DARK))
    return themes


def get_theme(theme: str | Theme = "dark", config: Mapping[str, Any] | None = None) -> Theme:
    """テーマ名または `Theme` を解決する。未知の名前は `KeyError`。"""
    if isinstance(theme, Theme):
        return theme
    themes = load_themes(config)
    key = theme.lower()
    if key not in themes:
        raise KeyError(f"theme '{theme}' は定義されていません: {sorted(themes)}")
    return themes[key]


__all__ = ["get_theme", "load_themes", "BUILTIN_THEMES"]
