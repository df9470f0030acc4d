"""
どこで: `src/fbdraw/api/runner.py`。公開 API のランナー実装。
何を: Surface を開き、閉じられるまで `draw_frame(surface)` → `refresh()` を回す `run()` を提供する。
なぜ: ウィンドウ生成とループと後始末を書かずに、1 フレーム分の描画関数だけで試せる経路を用意するため。
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

from fbdraw.core.runtime_config import set_config_path
from fbdraw.interactive.runtime.draw_loop import DrawLoop
from fbdraw.interactive.surface import Surface
from fbdraw.interactive.window_backend import WindowBackend


def run(
    draw_frame: Callable[[Surface], None],
    *,
    width: int = 800,
    height: int = 600,
    title: str | None = None,
    config_path: str | Path | None = None,
    background: Any = None,
    fps: float | None = None,
    backend: WindowBackend | None = None,
) -> int:
    """ウィンドウを生成し、閉じられるまで `draw_frame(surface)` を呼び続ける。

    Parameters
    ----------
    draw_frame : Callable[[Surface], None]
        1 フレーム分の描画処理。`surface.put_pixel()` でバッファを書き換える。
    width, height : int
        ピクセル単位のウィンドウサイズ。
    title : str | None
        ウィンドウタイトル。None なら設定の `window.default_title`。
    config_path : str | Path | None
        設定ファイル（config.yaml）のパス。指定した場合は探索より優先する。
        None の場合は、事前の `set_config_path()` を含む現在の設定をそのまま使う。
    background : Any
        背景色（packed color / "#RRGGBB" / [r, g, b]）。None なら設定値。
    fps : float | None
        最大フレームレート。`<=0` の場合は制限しない。None なら設定値（既定 60）。
    backend : WindowBackend | None
        ウィンドウ機能の提供者。None なら pyglet。

    Returns
    -------
    int
        refresh したフレーム数。ウィンドウを閉じると制御を返す。
    """

    if config_path is not None:
        set_config_path(config_path)

    with Surface(title, width, height, background=background, fps=fps, backend=backend) as surface:
        loop = DrawLoop(surface, draw_frame)
        loop.run()
    return loop.frames


__all__ = ["run"]
