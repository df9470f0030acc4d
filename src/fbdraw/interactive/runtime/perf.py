# どこで: `src/fbdraw/interactive/runtime/perf.py`。
# 何を: `Surface.refresh()` の pump / present / wait それぞれの所要時間を集計し、定期的にログへ出す。
# なぜ: 表示が重いのかイベント処理が重いのかを、環境変数だけで切り分けられるようにするため。

from __future__ import annotations

import logging
import os
import time
from collections.abc import Iterator
from contextlib import contextmanager, nullcontext
from typing import ContextManager

_logger = logging.getLogger(__name__)

SECTIONS = ("pump", "present", "wait")


class RefreshTimer:
    """refresh 1 回分の区間時間を積算するタイマー。

    `enabled=False` のときは何も計測しない（`measure()` は nullcontext を返す）。
    `report_every` フレームごとに区間ごとの平均 ms を INFO で出力し、集計をリセットする。
    """

    def __init__(self, *, enabled: bool = False, report_every: int = 60) -> None:
        self.enabled = bool(enabled)
        self.report_every = max(1, int(report_every))
        self._totals_ns = dict.fromkeys(SECTIONS, 0)
        self._frames = 0

    @classmethod
    def from_env(cls) -> RefreshTimer:
        """`FBDRAW_PERF` / `FBDRAW_PERF_EVERY` から生成する。"""

        flag = os.environ.get("FBDRAW_PERF", "").strip().lower()
        enabled = flag in {"1", "true", "yes", "on"}
        try:
            every = int(os.environ.get("FBDRAW_PERF_EVERY", "60"))
        except ValueError:
            every = 60
        return cls(enabled=enabled, report_every=every)

    def measure(self, section: str) -> ContextManager[None]:
        """`section` の区間を計測するコンテキストマネージャを返す。"""

        if not self.enabled:
            return nullcontext()
        return self._measure(section)

    @contextmanager
    def _measure(self, section: str) -> Iterator[None]:
        t0 = time.perf_counter_ns()
        try:
            yield
        finally:
            self._totals_ns[section] = self._totals_ns.get(section, 0) + (
                time.perf_counter_ns() - t0
            )

    def end_frame(self) -> None:
        """1 フレーム分を確定し、必要ならサマリを出す。"""

        if not self.enabled:
            return
        self._frames += 1
        if self._frames >= self.report_every:
            self._report()

    def _report(self) -> None:
        frames = self._frames
        parts = [
            f"{name}={self._totals_ns[name] / frames / 1e6:.3f}ms"
            for name in self._totals_ns
        ]
        _logger.info("[fbdraw-perf] frames=%d %s", frames, " ".join(parts))
        self._totals_ns = dict.fromkeys(SECTIONS, 0)
        self._frames = 0


__all__ = ["RefreshTimer"]
