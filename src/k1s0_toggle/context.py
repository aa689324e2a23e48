"""ユーザー ID と属性コンテキストの保持"""

from __future__ import annotations

import structlog

from .cache import DecisionCache
from .models import Attributes

logger = structlog.stdlib.get_logger(__name__)


class ContextStore:
    """アクティブなユーザー ID と属性を保持する。

    変更操作はすべて紐付いた DecisionCache を無効化する。
    ユーザー ID の形式は検証しない（判定時に検証する）。
    """

    def __init__(self, cache: DecisionCache) -> None:
        self._cache = cache
        self._user_id: str | None = None
        self._attributes: Attributes = {}

    @property
    def user_id(self) -> str | None:
        return self._user_id

    @property
    def attributes(self) -> Attributes:
        """属性のコピーを返す。"""
        return dict(self._attributes)

    def set_user_id(self, user_id: str | None) -> None:
        self._invalidate("user_id")
        self._user_id = user_id

    def merge_attributes(self, attributes: Attributes | None = None) -> None:
        """属性を追加・上書きする。指定されなかったキーは保持する。"""
        self._invalidate("attributes")
        self._attributes = {**self._attributes, **(attributes or {})}

    def reset_attributes(self) -> None:
        self._invalidate("attributes")
        self._attributes = {}

    def _invalidate(self, reason: str) -> None:
        self._cache.clear()
        logger.debug("decision caches invalidated", reason=reason)
