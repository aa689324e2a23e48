"""ACTIVATE 通知の中継"""

from __future__ import annotations

from typing import Any

from .engine import NotificationCallback, NotificationCenter, NotificationTypes


def _noop(*args: Any, **kwargs: Any) -> None:
    return None


class Subscription:
    """通知リスナーの登録ハンドル。"""

    def __init__(self, center: NotificationCenter, listener_id: int) -> None:
        self._center = center
        self._listener_id = listener_id
        self._active = listener_id >= 0

    @property
    def listener_id(self) -> int:
        return self._listener_id

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> bool:
        """リスナーを解除する。既に解除済みなら False。"""
        if not self._active:
            return False
        self._active = False
        return self._center.remove_notification_listener(self._listener_id)


class NotificationRelay:
    """エンジンの ACTIVATE 通知をそのまま呼び出し元のコールバックへ転送する。

    フィルタリング・バッチ化・変換は行わない。
    """

    def __init__(self, center: NotificationCenter) -> None:
        self._center = center

    def connect(self, callback: NotificationCallback | None = None) -> Subscription:
        """リスナーを 1 つ登録して Subscription を返す。"""
        target = callback or _noop

        def forward(*args: Any, **kwargs: Any) -> None:
            target(*args, **kwargs)

        listener_id = self._center.add_notification_listener(
            NotificationTypes.ACTIVATE, forward
        )
        return Subscription(self._center, listener_id)
