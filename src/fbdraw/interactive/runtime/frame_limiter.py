# どこで: `src/fbdraw/interactive/runtime/frame_limiter.py`。
# 何を: `refresh()` の呼び出しレートを目標 fps 以下に抑える待機処理を提供する。
# なぜ: 描画ループが空回りして CPU を使い切らないよう、1 フレームの最短間隔を守るため。

from __future__ import annotations

import time
from typing import Callable


class FrameLimiter:
    """固定 fps の上限レートで待機するフレーム制限器。

    Notes
    -----
    `fps <= 0` の場合は待機しない。
    前回の `wait()` から `1/fps` 秒経っていなければ、不足分だけ sleep する。
    """

    def __init__(
        self,
        fps: float,
        *,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        _fps = float(fps)
        self._fps = _fps
        self._interval = 1.0 / _fps if _fps > 0 else 0.0
        self._clock = clock
        self._sleep = sleep
        self._deadline: float | None = None

    @property
    def fps(self) -> float:
        """目標 fps を返す。"""

        return float(self._fps)

    @property
    def enabled(self) -> bool:
        return self._interval > 0.0

    def wait(self) -> float:
        """次フレームまで待機し、実際に sleep した秒数を返す。"""

        if self._interval <= 0.0:
            return 0.0

        now = float(self._clock())
        slept = 0.0
        deadline = self._deadline
        if deadline is not None and now < deadline:
            slept = float(deadline - now)
            self._sleep(slept)
            now = deadline
        self._deadline = now + self._interval
        return slept

    def reset(self) -> None:
        """待機基準をリセットする（次の `wait()` は待たない）。"""

        self._deadline = None


__all__ = ["FrameLimiter"]
