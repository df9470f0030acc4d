"""
どこで: `sketch/mandelbrot.py`。
何を: マンデルブロ集合を 1 フレームに数行ずつ描き進めるスケッチ。
なぜ: 重い per-pixel 計算でも、refresh を挟めばウィンドウが固まらないことを確かめるため。
"""

import sys

sys.path.append("src")

from fbdraw import Surface, rgb, run

WIDTH = 480
HEIGHT = 360
MAX_ITER = 64
ROWS_PER_FRAME = 4

_next_row = 0


def _escape_time(cr: float, ci: float) -> int:
    zr = zi = 0.0
    for i in range(MAX_ITER):
        zr, zi = zr * zr - zi * zi + cr, 2.0 * zr * zi + ci
        if zr * zr + zi * zi > 4.0:
            return i
    return MAX_ITER


def draw_rows(surface: Surface) -> None:
    global _next_row
    width, height = surface.size()
    for _ in range(ROWS_PER_FRAME):
        y = _next_row
        if y >= height:
            return
        ci = (y / height - 0.5) * 2.4
        for x in range(width):
            cr = (x / width - 0.7) * 3.2
            n = _escape_time(cr, ci)
            shade = 0 if n == MAX_ITER else 255 * n // MAX_ITER
            surface.put_pixel(x, y, rgb(shade, shade // 2, 255 - shade))
        _next_row += 1


if __name__ == "__main__":
    run(draw_rows, width=WIDTH, height=HEIGHT, title="mandelbrot")
