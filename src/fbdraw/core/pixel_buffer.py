# どこで: `src/fbdraw/core/pixel_buffer.py`。
# 何を: row-major の packed color 配列と (x, y) アドレッシングを提供する。
# なぜ: ウィンドウ/イベントから切り離した純粋なピクセル状態として、ヘッドレスに検証できるようにするため。

from __future__ import annotations

import numpy as np

from fbdraw.core.color import BLACK, COLOR_MASK


def _as_positive_int(value: int, *, name: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} は正の整数である必要がある: got={value!r}")
    try:
        v = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} は正の整数である必要がある: got={value!r}") from exc
    if v != value or v <= 0:
        raise ValueError(f"{name} は正の整数である必要がある: got={value!r}")
    return v


class PixelBuffer:
    """幅 `width`・高さ `height` の packed color バッファ。

    Notes
    -----
    内部表現は長さ `width * height` の `numpy.uint32` 配列で、
    `(x, y)` は index `y * width + x` に対応する。
    範囲外座標への `set()` は何もしない（例外にしない）。
    """

    __slots__ = ("_width", "_height", "_pixels")

    def __init__(self, width: int, height: int, fill_color: int = BLACK) -> None:
        self._width = _as_positive_int(width, name="width")
        self._height = _as_positive_int(height, name="height")
        self._pixels = np.full(
            self._width * self._height,
            int(fill_color) & COLOR_MASK,
            dtype=np.uint32,
        )

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        """`(width, height)` を返す。"""

        return self._width, self._height

    def __len__(self) -> int:
        return int(self._pixels.shape[0])

    def set(self, x: int, y: int, color: int) -> None:
        """(x, y) に色を書き込む。範囲外なら no-op。"""

        w = self._width
        if 0 <= x < w and 0 <= y < self._height:
            self._pixels[y * w + x] = color & COLOR_MASK

    def get(self, x: int, y: int) -> int | None:
        """(x, y) の色を返す。範囲外なら None。"""

        w = self._width
        if 0 <= x < w and 0 <= y < self._height:
            return int(self._pixels[y * w + x])
        return None

    def fill(self, color: int) -> None:
        """全スロットを `color` で埋める。"""

        self._pixels.fill(int(color) & COLOR_MASK)

    def raw_view(self) -> np.ndarray:
        """row-major の読み取り専用 1 次元ビューを返す（コピーしない）。"""

        view = self._pixels.view()
        view.flags.writeable = False
        return view

    def rows(self) -> np.ndarray:
        """`(height, width)` 形状の読み取り専用ビューを返す。"""

        view = self._pixels.reshape(self._height, self._width)
        view.flags.writeable = False
        return view

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self._width}, height={self._height})"


__all__ = ["PixelBuffer"]
