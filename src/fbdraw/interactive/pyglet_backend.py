# どこで: `src/fbdraw/interactive/pyglet_backend.py`。
# 何を: pyglet ウィンドウを生成し、packed color バッファを毎フレーム表示する WindowBackend 実装を提供する。
# なぜ: OS 依存のウィンドウ生成/イベント配送/表示を pyglet に任せ、この層に閉じ込めるため。

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import numpy as np
from pyglet.event import EVENT_HANDLED

from fbdraw.core.color import packed_to_rgb24
from fbdraw.core.errors import PresentationError, WindowCreationError

_logger = logging.getLogger(__name__)


def _load_window_api() -> tuple[Any, int]:
    """`pyglet.window.Window` と Escape のキーコードを返す。

    Notes
    -----
    `pyglet.window` の import は GL の shadow window を作るため、ディスプレイが無いとここで失敗する。
    """

    from pyglet.window import Window, key

    return Window, int(key.ESCAPE)


def _load_image_data() -> Any:
    from pyglet.image import ImageData

    return ImageData


@dataclass(slots=True)
class PygletWindowHandle:
    """pyglet window と、表示用 ImageData / 閉じ要求フラグを束ねる。"""

    # 注: pyglet の Window 型は環境/バージョン差があるため Any に寄せる。
    window: Any
    image: Any = None
    close_requested: bool = False
    destroyed: bool = False


class PygletBackend:
    """pyglet による WindowBackend。

    `pyglet.app.run()` は使わず、`refresh()` ごとに `dispatch_events()` で手動ポンプする。
    ウィンドウの実破棄は `destroy_window()` だけが行い、×ボタン/Escape は閉じ要求として記録する。
    """

    def __init__(
        self,
        *,
        close_on_escape: bool = True,
        vsync: bool = False,
        position: tuple[int, int] | None = None,
    ) -> None:
        self._close_on_escape = bool(close_on_escape)
        self._vsync = bool(vsync)
        self._position = position

    def create_window(self, title: str, width: int, height: int) -> PygletWindowHandle:
        window = None
        try:
            window_cls, escape_symbol = _load_window_api()
            window = window_cls(  # type: ignore[abstract]
                width=int(width),
                height=int(height),
                caption=str(title),
                resizable=False,
                vsync=self._vsync,
            )
            handle = PygletWindowHandle(window=window)

            def on_close() -> bool:
                # pyglet 既定の on_close（window.close()）は走らせず、破棄は destroy_window に任せる。
                handle.close_requested = True
                return EVENT_HANDLED

            def on_key_press(symbol: int, _modifiers: int) -> bool | None:
                if symbol != escape_symbol:
                    return None
                if self._close_on_escape:
                    handle.close_requested = True
                return EVENT_HANDLED

            window.push_handlers(on_close=on_close, on_key_press=on_key_press)
            if self._position is not None:
                window.set_location(*self._position)
        except Exception as exc:
            if window is not None:
                try:
                    window.close()
                except Exception:
                    _logger.exception("Failed to close half-initialized window")
            raise WindowCreationError(
                f"ウィンドウを作成できません: size={width}x{height}, error={exc}"
            ) from exc

        _logger.debug("Created window %r (%dx%d)", title, int(width), int(height))
        return handle

    def pump_events(self, handle: PygletWindowHandle) -> bool:
        if handle.destroyed:
            return False
        try:
            handle.window.dispatch_events()
        except Exception as exc:
            raise PresentationError(f"イベント処理に失敗しました: {exc}") from exc
        return not handle.close_requested and not handle.window.has_exit

    def present(
        self,
        handle: PygletWindowHandle,
        pixels: np.ndarray,
        width: int,
        height: int,
    ) -> None:
        if handle.destroyed:
            raise PresentationError("破棄済みのウィンドウへは表示できません")

        w = int(width)
        h = int(height)
        data = packed_to_rgb24(pixels, w, h).tobytes()
        # pitch を負にすると、先頭行が画面上端（top-down）として解釈される。
        pitch = -w * 3
        try:
            image = handle.image
            if image is None:
                image = _load_image_data()(w, h, "RGB", data, pitch=pitch)
                handle.image = image
            else:
                image.set_data("RGB", pitch, data)

            window = handle.window
            window.switch_to()
            window.clear()
            image.blit(0, 0, width=window.width, height=window.height)
            window.flip()
        except Exception as exc:
            raise PresentationError(f"バッファの表示に失敗しました: {exc}") from exc

    def destroy_window(self, handle: PygletWindowHandle) -> None:
        if handle.destroyed:
            return
        handle.destroyed = True
        handle.image = None
        handle.window.close()


__all__ = ["PygletBackend", "PygletWindowHandle"]
