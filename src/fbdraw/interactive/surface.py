# どこで: `src/fbdraw/interactive/surface.py`。
# 何を: PixelBuffer をライブウィンドウへ結び付け、put_pixel / refresh / is_open を提供する。
# なぜ: 1 ピクセル単位の即時 API と、フレーム単位で表示しイベントを回し続けるウィンドウの流儀を橋渡しするため。

from __future__ import annotations

import logging
import weakref
from typing import Any, Callable

from fbdraw.core.color import parse_color
from fbdraw.core.errors import PresentationError, WindowCreationError
from fbdraw.core.pixel_buffer import PixelBuffer
from fbdraw.core.runtime_config import runtime_config
from fbdraw.interactive.runtime.draw_loop import DrawLoop
from fbdraw.interactive.runtime.frame_limiter import FrameLimiter
from fbdraw.interactive.runtime.perf import RefreshTimer
from fbdraw.interactive.window_backend import WindowBackend

_logger = logging.getLogger(__name__)


def _release_window(backend: WindowBackend, handle: Any) -> None:
    # weakref.finalize からも呼ばれるため、Surface 自身は参照しない。
    try:
        backend.destroy_window(handle)
    except Exception:
        _logger.exception("Failed to destroy window")


def _default_backend(*, close_on_escape: bool) -> WindowBackend:
    # pyglet は import 時にディスプレイ周りを初期化し得るので、実ウィンドウを使うときだけ遅延 import する。
    try:
        from fbdraw.interactive.pyglet_backend import PygletBackend
    except Exception as exc:
        raise WindowCreationError(f"pyglet backend を読み込めません: {exc}") from exc

    cfg = runtime_config()
    return PygletBackend(
        close_on_escape=close_on_escape,
        vsync=cfg.vsync,
        position=cfg.window_position,
    )


class Surface:
    """ピクセルを置けるウィンドウ。

    座標系は左上が原点 (0, 0) で、X は右向き、Y は下向きに増える。

    Notes
    -----
    状態は Open → Closed の一方向のみ。
    `put_pixel()` はメモリ上のバッファを書き換えるだけで、表示は `refresh()` がまとめて行う。
    ウィンドウは `close()` / `with` ブロック終了 / GC のいずれかで必ず解放される。

    Examples
    --------
    >>> with Surface("demo", 320, 240) as surface:  # doctest: +SKIP
    ...     while surface.is_open():
    ...         surface.put_pixel(160, 120, 0xFF0000)
    ...         surface.refresh()
    """

    def __init__(
        self,
        title: str | None,
        width: int,
        height: int,
        *,
        background: Any = None,
        fps: float | None = None,
        close_on_escape: bool | None = None,
        backend: WindowBackend | None = None,
    ) -> None:
        """ウィンドウとバッファを生成する。

        Parameters
        ----------
        title : str | None
            ウィンドウタイトル。None なら設定の `window.default_title`。
        width, height : int
            ピクセル単位のサイズ。正の整数。
        background : Any
            初期色（`clear()` の既定色）。None なら設定の `window.background_color`。
        fps : float | None
            `refresh()` の最大レート。`<=0` で制限しない。None なら設定の `window.fps`。
        close_on_escape : bool | None
            Escape キーで閉じるか（既定 backend のみ参照）。None なら設定値。
        backend : WindowBackend | None
            ウィンドウ機能の提供者。None なら pyglet を使う。

        Raises
        ------
        ValueError
            width/height が正の整数でない場合（ウィンドウは作られない）。
        WindowCreationError
            ウィンドウを作成できなかった場合。
        """

        cfg = runtime_config()

        resolved_title = str(title) if title is not None else cfg.default_title
        self._background = (
            parse_color(background) if background is not None else cfg.background_color
        )

        # 寸法の検証を兼ねて、ウィンドウより先にバッファを作る。
        self._buffer = PixelBuffer(width, height, self._background)

        if backend is None:
            escape = cfg.close_on_escape if close_on_escape is None else bool(close_on_escape)
            backend = _default_backend(close_on_escape=escape)
        self._backend = backend

        self._limiter = FrameLimiter(float(fps) if fps is not None else cfg.fps)
        self._timer = RefreshTimer.from_env()
        self._title = resolved_title

        # ここで例外なら Surface は存在しない（呼び出し側へ伝播する）。
        self._handle = backend.create_window(resolved_title, self._buffer.width, self._buffer.height)
        self._finalizer = weakref.finalize(self, _release_window, backend, self._handle)
        self._open = True

    # --- 属性 ---

    @property
    def title(self) -> str:
        return self._title

    @property
    def width(self) -> int:
        return self._buffer.width

    @property
    def height(self) -> int:
        return self._buffer.height

    @property
    def buffer(self) -> PixelBuffer:
        """この Surface が所有する PixelBuffer を返す。"""

        return self._buffer

    @property
    def background(self) -> int:
        return self._background

    def size(self) -> tuple[int, int]:
        """`(width, height)` を返す。"""

        return self._buffer.size

    def is_open(self) -> bool:
        """ウィンドウが開いていれば True を返す。一度 False になったら戻らない。"""

        return self._open

    # --- 描画 ---

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """(x, y) に packed color を置く。範囲外は no-op。表示は次の `refresh()` で行われる。"""

        self._buffer.set(x, y, color)

    def get_pixel(self, x: int, y: int) -> int | None:
        """(x, y) の色を返す。範囲外なら None。"""

        return self._buffer.get(x, y)

    def clear(self, color: int | None = None) -> None:
        """バッファ全体を `color`（既定は背景色）で埋める。"""

        self._buffer.fill(self._background if color is None else color)

    # --- ループ ---

    def refresh(self) -> None:
        """イベントを処理し、現在のバッファをウィンドウへ表示する。

        Notes
        -----
        イベント処理中に閉じられた場合は表示せずに Closed へ遷移する。
        表示失敗（PresentationError）も例外にせず Closed へ遷移する。
        """

        if not self._open:
            return

        timer = self._timer
        try:
            # --- 1) イベント処理（表示より必ず先） ---
            try:
                with timer.measure("pump"):
                    still_open = self._backend.pump_events(self._handle)
            except PresentationError:
                _logger.warning("Window event pump failed; closing surface", exc_info=True)
                self.close()
                return

            if not still_open:
                _logger.info("Window %r was closed", self._title)
                self.close()
                return

            # --- 2) 表示 ---
            buffer = self._buffer
            try:
                with timer.measure("present"):
                    self._backend.present(
                        self._handle, buffer.raw_view(), buffer.width, buffer.height
                    )
            except PresentationError:
                _logger.warning("Failed to present frame; closing surface", exc_info=True)
                self.close()
                return

            # --- 3) レート制限 ---
            with timer.measure("wait"):
                self._limiter.wait()
        finally:
            timer.end_frame()

    def begin_draw(self, draw_frame: Callable[[Surface], None]) -> None:
        """閉じられるまで `draw_frame(self)` → `refresh()` を繰り返す。"""

        DrawLoop(self, draw_frame).run()

    # --- 後始末 ---

    def close(self) -> None:
        """ウィンドウを解放して Closed にする（冪等）。

        refresh 中に閉じられた/表示に失敗した場合もここを通り、その時点でウィンドウを解放する。
        """

        self._open = False
        self._finalizer()

    def __enter__(self) -> Surface:
        return self

    def __exit__(self, _exc_type: object, _exc: object, _tb: object) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "open" if self._open else "closed"
        return f"Surface(title={self._title!r}, width={self.width}, height={self.height}, {state})"


__all__ = ["Surface"]
