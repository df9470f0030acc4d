# どこで: `src/fbdraw/core/color.py`。
# 何を: packed color（`0x00RRGGBB` の int）の生成・分解・変換を提供する。
# なぜ: put_pixel と PixelBuffer と表示処理で、色の表現を 1 つに揃えるため。

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

COLOR_MASK = 0xFFFFFF

BLACK = 0x000000
WHITE = 0xFFFFFF
RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x0000FF


def _clamp_channel(value: int) -> int:
    v = int(value)
    if v < 0:
        return 0
    if v > 255:
        return 255
    return v


def rgb(r: int, g: int, b: int) -> int:
    """RGB 成分から packed color を返す。

    Notes
    -----
    各成分は `[0, 255]` にクランプされる。
    """

    return (_clamp_channel(r) << 16) | (_clamp_channel(g) << 8) | _clamp_channel(b)


def unpack_rgb(color: int) -> tuple[int, int, int]:
    """packed color を `(r, g, b)` に分解して返す。"""

    c = int(color) & COLOR_MASK
    return (c >> 16) & 0xFF, (c >> 8) & 0xFF, c & 0xFF


def parse_color(value: Any) -> int:
    """設定値などの色表現を packed color に正規化する。

    Parameters
    ----------
    value : Any
        `0xFF0000` のような int、`"#FF0000"` / `"0xFF0000"` 文字列、
        または `[r, g, b]` の 3 要素シーケンス。

    Returns
    -------
    int
        `0x00RRGGBB`。
    """

    if isinstance(value, bool):
        raise ValueError(f"色として解釈できません: got={value!r}")
    if isinstance(value, (int, np.integer)):
        v = int(value)
        if v < 0 or v > COLOR_MASK:
            raise ValueError(f"色は 0x000000..0xFFFFFF の範囲である必要がある: got={value!r}")
        return v
    if isinstance(value, str):
        s = value.strip().lower()
        if s.startswith("#"):
            s = s[1:]
        elif s.startswith("0x"):
            s = s[2:]
        if len(s) != 6:
            raise ValueError(f"色文字列は #RRGGBB 形式である必要がある: got={value!r}")
        try:
            return int(s, 16)
        except ValueError as exc:
            raise ValueError(f"色文字列は #RRGGBB 形式である必要がある: got={value!r}") from exc
    if isinstance(value, Sequence):
        if len(value) != 3:
            raise ValueError(f"色は [r, g, b] の 3 要素である必要がある: got={value!r}")
        try:
            r, g, b = (int(c) for c in value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"色は [r, g, b] の整数配列である必要がある: got={value!r}") from exc
        for c in (r, g, b):
            if c < 0 or c > 255:
                raise ValueError(f"色成分は 0..255 である必要がある: got={value!r}")
        return rgb(r, g, b)
    raise ValueError(f"色として解釈できません: got={value!r}")


def packed_to_rgb24(pixels: np.ndarray, width: int, height: int) -> np.ndarray:
    """row-major の packed color 配列を `(height, width, 3)` の uint8 配列へ変換する。

    先頭行（y=0）が画面上端になる並びのまま返す。
    """

    w = int(width)
    h = int(height)
    flat = np.asarray(pixels, dtype=np.uint32).reshape(-1)
    if flat.shape[0] != w * h:
        raise ValueError(
            f"pixels の長さが width*height と一致しません: len={flat.shape[0]}, size={w}x{h}"
        )
    grid = flat.reshape(h, w)
    out = np.empty((h, w, 3), dtype=np.uint8)
    out[..., 0] = (grid >> 16) & 0xFF
    out[..., 1] = (grid >> 8) & 0xFF
    out[..., 2] = grid & 0xFF
    return out


__all__ = [
    "BLACK",
    "BLUE",
    "COLOR_MASK",
    "GREEN",
    "RED",
    "WHITE",
    "packed_to_rgb24",
    "parse_color",
    "rgb",
    "unpack_rgb",
]
