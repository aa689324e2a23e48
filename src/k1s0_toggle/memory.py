"""InMemoryDecisionEngine 実装"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .engine import (
    EventDispatcher,
    NoOpEventDispatcher,
    NotificationCallback,
    NotificationTypes,
)
from .models import Attributes


@dataclass
class ActivationEvent:
    """activate 時にディスパッチャーへ渡すイベント。"""

    toggle_id: str
    user_id: str
    attributes: Attributes
    variation: str | None


class InMemoryNotificationCenter:
    """テスト用インメモリ通知センター。"""

    def __init__(self) -> None:
        self._listeners: dict[int, tuple[str, NotificationCallback]] = {}
        self._next_id = 1

    def add_notification_listener(
        self, notification_type: str, callback: NotificationCallback
    ) -> int:
        listener_id = self._next_id
        self._next_id += 1
        self._listeners[listener_id] = (notification_type, callback)
        return listener_id

    def remove_notification_listener(self, listener_id: int) -> bool:
        return self._listeners.pop(listener_id, None) is not None

    def send_notifications(self, notification_type: str, *args: Any) -> None:
        for kind, callback in list(self._listeners.values()):
            if kind == notification_type:
                callback(*args)

    def listener_count(self, notification_type: str | None = None) -> int:
        return sum(
            1
            for kind, _ in self._listeners.values()
            if notification_type is None or kind == notification_type
        )


@dataclass
class InMemoryDecisionEngine:
    """テスト用インメモリ判定エンジン。

    definition は {"features": {id: bool}, "experiments": {id: str | None}}。
    """

    features: dict[str, bool] = field(default_factory=dict)
    experiments: dict[str, str | None] = field(default_factory=dict)
    dispatcher: EventDispatcher = field(default_factory=NoOpEventDispatcher)
    notification_center: InMemoryNotificationCenter = field(
        default_factory=InMemoryNotificationCenter
    )
    feature_checks: int = 0
    activations: int = 0

    @classmethod
    def from_definition(
        cls, definition: dict[str, Any] | None, dispatcher: EventDispatcher
    ) -> InMemoryDecisionEngine:
        definition = definition or {}
        return cls(
            features=dict(definition.get("features", {})),
            experiments=dict(definition.get("experiments", {})),
            dispatcher=dispatcher,
        )

    def set_feature(self, toggle_id: str, enabled: bool) -> None:
        self.features[toggle_id] = enabled

    def set_variation(self, toggle_id: str, variation: str | None) -> None:
        self.experiments[toggle_id] = variation

    def is_feature_enabled(
        self, toggle_id: str, user_id: str, attributes: Attributes
    ) -> bool:
        self.feature_checks += 1
        return self.features.get(toggle_id, False)

    def activate(
        self, toggle_id: str, user_id: str, attributes: Attributes
    ) -> str | None:
        self.activations += 1
        variation = self.experiments.get(toggle_id)
        event = ActivationEvent(toggle_id, user_id, dict(attributes), variation)
        self.dispatcher.dispatch_event(event)
        self.notification_center.send_notifications(
            NotificationTypes.ACTIVATE,
            toggle_id,
            user_id,
            attributes,
            variation,
            event,
        )
        return variation


def in_memory_engine_factory(
    definition: dict[str, Any] | None, dispatcher: EventDispatcher
) -> InMemoryDecisionEngine:
    """EngineFactory 実装。"""
    return InMemoryDecisionEngine.from_definition(definition, dispatcher)
