# どこで: `src/fbdraw/interactive/runtime/__init__.py`。
# 何を: refresh ループ周辺（レート制限/描画ループ/計測）の実装をまとめるパッケージ定義。
# なぜ: `src/fbdraw/interactive/surface.py` の肥大化を防ぎ、責務ごとに分けてテストできるようにするため。

from __future__ import annotations

__all__ = []
