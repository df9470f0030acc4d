# どこで: `src/fbdraw/interactive/runtime/draw_loop.py`。
# 何を: 「開いている間は draw_frame → refresh」を繰り返す最小ランナーを提供する。
# なぜ: 呼び出し側がループ構造を書かずに、1 フレーム分の描画関数だけを渡せるようにするため。

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from fbdraw.interactive.surface import Surface


class DrawLoop:
    """Surface が閉じられるまで描画関数を回す。

    `draw_frame(surface)` はバッファへ `put_pixel` するだけにし、表示は `refresh()` が行う。
    """

    def __init__(
        self,
        surface: Surface,
        draw_frame: Callable[[Surface], None],
        *,
        on_frame_start: Callable[[], None] | None = None,
    ) -> None:
        """ループを初期化する。

        Parameters
        ----------
        surface : Surface
            描画先。
        draw_frame : Callable[[Surface], None]
            1 フレーム分の描画処理。
        on_frame_start : Callable[[], None] | None
            各フレーム冒頭に呼ぶコールバック。計測などの用途を想定する。
        """

        self._surface = surface
        self._draw_frame = draw_frame
        self._on_frame_start = on_frame_start
        self._frames = 0

    @property
    def frames(self) -> int:
        """これまでに refresh したフレーム数を返す。"""

        return int(self._frames)

    def run(self) -> None:
        """Surface が閉じられるまでループを実行する。"""

        surface = self._surface
        while surface.is_open():
            on_frame_start = self._on_frame_start
            if on_frame_start is not None:
                on_frame_start()
            self._draw_frame(surface)
            surface.refresh()
            self._frames += 1


__all__ = ["DrawLoop"]
