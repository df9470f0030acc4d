"""
どこで: リポジトリ直下 `main.py`。
何を: 画面中央に十字を描くだけの最小スケッチを run でプレビュー表示する。
なぜ: 動作確認用の最小エントリポイントとして利用するため。
"""

import sys

sys.path.append("src")

from fbdraw import Surface, rgb, run

CANVAS_WIDTH = 640
CANVAS_HEIGHT = 480


def draw_centered_cross(surface: Surface) -> None:
    width, height = surface.size()

    y = height // 2
    for x in range(width // 4, width * 3 // 4 + 1):
        surface.put_pixel(x, y, rgb(255, 0, 0))

    x = width // 2
    for y in range(height // 4, height * 3 // 4 + 1):
        surface.put_pixel(x, y, rgb(0, 255, 0))


if __name__ == "__main__":
    run(draw_centered_cross, width=CANVAS_WIDTH, height=CANVAS_HEIGHT)
