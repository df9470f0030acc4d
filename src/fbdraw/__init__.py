# どこで: `src/fbdraw/__init__.py`。
# 何を: ルート `fbdraw` パッケージを定義する。
# なぜ: import 起点を `fbdraw` に統一するため。

from __future__ import annotations

from fbdraw.api import (
    BLACK,
    BLUE,
    GREEN,
    RED,
    WHITE,
    PixelBuffer,
    PresentationError,
    Surface,
    SurfaceError,
    WindowCreationError,
    rgb,
    run,
    unpack_rgb,
)

__all__ = [
    "BLACK",
    "BLUE",
    "GREEN",
    "PixelBuffer",
    "PresentationError",
    "RED",
    "Surface",
    "SurfaceError",
    "WHITE",
    "WindowCreationError",
    "rgb",
    "run",
    "unpack_rgb",
]
