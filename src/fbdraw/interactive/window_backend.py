# どこで: `src/fbdraw/interactive/window_backend.py`。
# 何を: Surface が利用するウィンドウ機能（生成/イベント処理/表示/破棄）のインタフェースを定義する。
# なぜ: 実ウィンドウ（pyglet）と、呼び出しを記録するテスト用 fake を差し替え可能にするため。

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class WindowBackend(Protocol):
    """ウィンドウシステムへの最小インタフェース。

    handle は backend ごとの不透明な値で、Surface は中身を参照しない。
    """

    def create_window(self, title: str, width: int, height: int) -> Any:
        """ウィンドウを生成して handle を返す。

        失敗時は `WindowCreationError` を送出する。
        """
        ...

    def pump_events(self, handle: Any) -> bool:
        """溜まっている入力/システムイベントを処理し、ウィンドウがまだ開いていれば True を返す。

        handle が無効化されている場合は `PresentationError` を送出してよい。
        """
        ...

    def present(self, handle: Any, pixels: np.ndarray, width: int, height: int) -> None:
        """row-major の packed color 配列をウィンドウへ表示する。

        失敗時は `PresentationError` を送出する。
        """
        ...

    def destroy_window(self, handle: Any) -> None:
        """ウィンドウを破棄する。2 回目以降の呼び出しは no-op。"""
        ...


__all__ = ["WindowBackend"]
