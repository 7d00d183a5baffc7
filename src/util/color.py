"""
どこで: `util.color`。
何を: 色指定の正規化/変換（Hex, RGB 0–1, RGB 0–255, CSS `rgb()` 文字列）を一元化。
なぜ: テーマ/プリセット/YAML 設定で同一の受理仕様とエラーメッセージを提供するため。
"""

from __future__ import annotations

from typing import Sequence

from common.types import RGB

# テーマ定義で使われる CSS 色名（最小集合）
_NAMED_COLORS: dict[str, RGB] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
}


def clamp_u8(x: float) -> int:
    """最近傍整数へ丸めて 0..255 へ制限する。"""
    v = int(round(float(x)))
    return 0 if v < 0 else 255 if v > 255 else v


def parse_hex_color_str(s: str) -> RGB:
    """Hex 文字列から RGB(0–255) を返す。

    受理形式: "#RRGGBB", "0xRRGGBB", "RRGGBB", "#RGB"。
    大文字/小文字は不問。CSS 色名 "black"/"white" も受理する。
    """
    t = s.strip()
    named = _NAMED_COLORS.get(t.lower())
    if named is not None:
        return named
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) == 3:
        t = "".join(ch * 2 for ch in t)
    if len(t) != 6:
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB)")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return (r, g, b)


def to_u8_rgb(value: object) -> RGB:
    """色を RGB(0–255) へ正規化する。

    - 受理: Hex 文字列/色名, (r,g,b) （全要素が float で 0–1 なら 0–1 とみなす。それ以外は 0–255）
    - 返値: (r,g,b) の int タプル
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"unsupported color type: {type(value)!r}")
    seq: Sequence[object] = value
    if len(seq) != 3:
        raise ValueError("color tuple/list must be length 3")
    try:
        channels = [float(c) for c in seq]  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if all(isinstance(c, float) for c in seq) and all(0.0 <= c <= 1.0 for c in channels):
        channels = [c * 255.0 for c in channels]
    r, g, b = (clamp_u8(c) for c in channels)
    return (r, g, b)


def to_css_rgb(rgb: RGB) -> str:
    """RGB(0–255) を `rgb(r, g, b)` 文字列へ整形する。"""
    r, g, b = rgb
    return f"rgb({r}, {g}, {b})"


def to_hex(rgb: RGB) -> str:
    """RGB(0–255) を `#rrggbb` へ整形する。"""
    r, g, b = (clamp_u8(c) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


__all__ = [
    "clamp_u8",
    "parse_hex_color_str",
    "to_u8_rgb",
    "to_css_rgb",
    "to_hex",
]
