"""NotificationRelay / InMemoryDecisionEngine のユニットテスト"""

from k1s0_toggle import (
    ActivationEvent,
    InMemoryNotificationCenter,
    NotificationRelay,
    NotificationTypes,
    in_memory_engine_factory,
)


class RecordingDispatcher:
    def __init__(self) -> None:
        self.events: list[ActivationEvent] = []

    def dispatch_event(self, event: ActivationEvent) -> None:
        self.events.append(event)


def test_relay_forwards_arguments_unmodified() -> None:
    """通知の引数がそのまま転送されること。"""
    center = InMemoryNotificationCenter()
    received: list[tuple] = []
    NotificationRelay(center).connect(lambda *a, **kw: received.append((a, kw)))
    center.send_notifications(NotificationTypes.ACTIVATE, "exp", "u1", {}, "b", None)
    assert received == [(("exp", "u1", {}, "b", None), {})]


def test_relay_registers_single_activate_listener() -> None:
    """ACTIVATE 用リスナーが 1 つだけ登録されること。"""
    center = InMemoryNotificationCenter()
    NotificationRelay(center).connect()
    assert center.listener_count(NotificationTypes.ACTIVATE) == 1
    assert center.listener_count("OTHER") == 0


def test_relay_default_callback_is_noop() -> None:
    """コールバック省略時は何もしないこと。"""
    center = InMemoryNotificationCenter()
    NotificationRelay(center).connect()
    center.send_notifications(NotificationTypes.ACTIVATE, "exp", "u1", {}, "b", None)


def test_relay_ignores_other_notification_types() -> None:
    """ACTIVATE 以外の通知は転送しないこと。"""
    center = InMemoryNotificationCenter()
    received: list[tuple] = []
    NotificationRelay(center).connect(lambda *a: received.append(a))
    center.send_notifications("TRACK", "event")
    assert received == []


def test_subscription_unsubscribe_once() -> None:
    """unsubscribe は 1 回目のみ True を返すこと。"""
    center = InMemoryNotificationCenter()
    subscription = NotificationRelay(center).connect()
    assert subscription.active is True
    assert subscription.unsubscribe() is True
    assert subscription.active is False
    assert subscription.unsubscribe() is False
    assert center.listener_count() == 0


def test_subscription_with_rejected_listener_is_inactive(mocker) -> None:
    """登録失敗（-1）のハンドルは非アクティブであること。"""
    center = mocker.Mock()
    center.add_notification_listener.return_value = -1
    subscription = NotificationRelay(center).connect()
    assert subscription.active is False
    assert subscription.unsubscribe() is False
    center.remove_notification_listener.assert_not_called()


def test_engine_activate_dispatches_event() -> None:
    """activate でディスパッチャーにイベントが渡ること。"""
    dispatcher = RecordingDispatcher()
    engine = in_memory_engine_factory({"experiments": {"exp": "b"}}, dispatcher)
    assert engine.activate("exp", "u1", {"plan": "pro"}) == "b"
    assert dispatcher.events == [ActivationEvent("exp", "u1", {"plan": "pro"}, "b")]


def test_engine_feature_check_does_not_dispatch() -> None:
    """is_feature_enabled はイベントを送らないこと。"""
    dispatcher = RecordingDispatcher()
    engine = in_memory_engine_factory({"features": {"flagA": True}}, dispatcher)
    assert engine.is_feature_enabled("flagA", "u1", {}) is True
    assert engine.is_feature_enabled("unknown", "u1", {}) is False
    assert dispatcher.events == []
    assert engine.feature_checks == 2
