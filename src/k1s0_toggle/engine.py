"""外部判定エンジンのプロトコル定義"""

from __future__ import annotations

from typing import Any, Callable, Protocol

from .models import Attributes

NotificationCallback = Callable[..., Any]


class NotificationTypes:
    """通知種別定数（optimizely-sdk の enums.NotificationTypes と同値）。"""

    ACTIVATE: str = "ACTIVATE:experiment, user_id, attributes, variation, event"


class NotificationCenter(Protocol):
    """エンジンの通知センタープロトコル。"""

    def add_notification_listener(
        self, notification_type: str, callback: NotificationCallback
    ) -> int: ...

    def remove_notification_listener(self, listener_id: int) -> bool: ...


class DecisionEngine(Protocol):
    """判定エンジンプロトコル。

    is_feature_enabled は参照のみで通知を発火しない。
    activate は呼び出しごとに ACTIVATE 通知を発火する。
    """

    @property
    def notification_center(self) -> NotificationCenter: ...

    def is_feature_enabled(
        self, toggle_id: str, user_id: str, attributes: Attributes
    ) -> bool: ...

    def activate(
        self, toggle_id: str, user_id: str, attributes: Attributes
    ) -> str | None: ...


class EventDispatcher(Protocol):
    """イベント送信プロトコル。"""

    def dispatch_event(self, event: Any) -> None: ...


EngineFactory = Callable[[Any, EventDispatcher], DecisionEngine]


class NoOpEventDispatcher:
    """何も送信しないイベントディスパッチャー。"""

    def dispatch_event(self, event: Any) -> None:
        return None
