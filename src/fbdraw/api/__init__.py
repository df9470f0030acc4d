# どこで: `src/fbdraw/api/__init__.py`。
# 何を: 公開 API（Surface / PixelBuffer / 色ヘルパ / run）を再エクスポートする。
# なぜ: ユーザーコードから `from fbdraw.api import Surface, rgb` のように簡潔に import できるようにするため。

from __future__ import annotations

from fbdraw.core.color import BLACK, BLUE, GREEN, RED, WHITE, rgb, unpack_rgb
from fbdraw.core.errors import PresentationError, SurfaceError, WindowCreationError
from fbdraw.core.pixel_buffer import PixelBuffer
from fbdraw.interactive.surface import Surface

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


def run(*args, **kwargs):
    """公開 run API へのラッパ（runner の import を呼び出し時まで遅らせる）。"""

    from .runner import run as _run

    return _run(*args, **kwargs)
