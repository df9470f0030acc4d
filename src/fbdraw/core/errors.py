# どこで: `src/fbdraw/core/errors.py`。
# 何を: Surface/ウィンドウ周りの例外階層を定義する。
# なぜ: 「生成失敗（呼び出し側が扱う）」と「表示失敗（Surface 内で Closed へ畳む）」を型で区別するため。

from __future__ import annotations


class SurfaceError(RuntimeError):
    """fbdraw のウィンドウ関連エラーの基底。"""


class WindowCreationError(SurfaceError):
    """ウィンドウを生成できなかった（ディスプレイ無し、資源不足など）。"""


class PresentationError(SurfaceError):
    """開いているはずのウィンドウへのイベント処理/表示に失敗した。"""


__all__ = ["PresentationError", "SurfaceError", "WindowCreationError"]
