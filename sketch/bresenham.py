"""
どこで: `sketch/bresenham.py`。
何を: Bresenham の直線アルゴリズムで、中心から放射状に線を描き続けるスケッチ。
なぜ: put_pixel だけで線分ラスタライズを試す例として。
"""

import math
import sys

sys.path.append("src")

from fbdraw import Surface, rgb

WIDTH = 400
HEIGHT = 400


def draw_line(surface: Surface, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        surface.put_pixel(x0, y0, color)
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def main() -> None:
    cx, cy = WIDTH // 2, HEIGHT // 2
    # 半径を画面より少し大きくして、範囲外書き込み（no-op）も踏む。
    radius = int(WIDTH * 0.6)
    step = 0

    with Surface("bresenham", WIDTH, HEIGHT) as surface:
        while surface.is_open():
            angle = step * 0.05
            x1 = cx + int(radius * math.cos(angle))
            y1 = cy + int(radius * math.sin(angle))
            hue = (step * 3) % 256
            draw_line(surface, cx, cy, x1, y1, rgb(hue, 255 - hue, 128))
            surface.refresh()
            step += 1


if __name__ == "__main__":
    main()
