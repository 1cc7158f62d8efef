"""共通フィクスチャ。

- 乱数ジェネレータ（シード固定）
- 環境変数で設定を差し替えて、終了時に元へ戻すヘルパ
"""

from __future__ import annotations

import os
from typing import Callable, Iterator

import numpy as np
import pytest

from common import settings


@pytest.fixture()
def rng() -> np.random.Generator:
    """シード固定の NumPy Generator。"""
    return np.random.default_rng(12345)


@pytest.fixture()
def settings_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[..., settings._Settings]]:
    """`XTB_*` 環境変数を設定して再読込し、テスト後に既定へ戻す。"""

    def _apply(**env: str) -> settings._Settings:
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        settings.reload_from_env()
        return settings.get()

    yield _apply
    for key in [k for k in os.environ if k.startswith("XTB_")]:
        monkeypatch.delenv(key)
    settings.reload_from_env()
