"""ToggleResolver: 強制値・キャッシュ・外部エンジンを合成したトグル判定"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import Any

import structlog

from .cache import DecisionCache
from .context import ContextStore
from .engine import (
    DecisionEngine,
    EngineFactory,
    EventDispatcher,
    NoOpEventDispatcher,
    NotificationCallback,
)
from .exceptions import (
    EngineUnavailableError,
    ToggleError,
    ToggleErrorCodes,
    UserIdMissingError,
)
from .models import (
    DEFAULT_BOOLEAN,
    DEFAULT_VARIATION,
    Attributes,
    DecisionKind,
    ToggleValue,
)
from .notification import NotificationRelay, Subscription
from .overrides import ForcedOverrideRegistry

logger = structlog.stdlib.get_logger(__name__)


class ToggleResolver:
    """ユーザー ID と属性に対するトグル判定を返す。

    優先順位は 強制値 > キャッシュ > エンジン。強制値・キャッシュの型が
    判定種別と合わない場合は種別ごとのデフォルト値（False / "a"）を返す。

    ユーザー ID・属性・キャッシュ・強制値・エンジン参照は 1 つの RLock で
    保護する。判定中のエンジン呼び出しとキャッシュ書き込みも同じロック内で行う。
    """

    def __init__(self, engine_factory: EngineFactory | None = None) -> None:
        self._lock = threading.RLock()
        self._engine_factory = engine_factory
        self._engine: DecisionEngine | None = None
        self._cache = DecisionCache()
        self._context = ContextStore(self._cache)
        self._forced = ForcedOverrideRegistry()
        self._subscriptions: list[Subscription] = []

    @property
    def user_id(self) -> str | None:
        with self._lock:
            return self._context.user_id

    @property
    def attributes(self) -> Attributes:
        with self._lock:
            return self._context.attributes

    @property
    def forced_overrides(self) -> dict[str, ToggleValue]:
        with self._lock:
            return self._forced.snapshot()

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    def register_engine_factory(self, factory: EngineFactory) -> None:
        """initialize() で使うエンジンファクトリを登録する。"""
        with self._lock:
            self._engine_factory = factory

    def initialize(
        self,
        definition: Any,
        on_decision: NotificationCallback | None = None,
        dispatcher: EventDispatcher | None = None,
    ) -> Subscription:
        """エンジンを生成し、ACTIVATE 通知の中継を 1 つ登録する。

        Args:
            definition: エンジン定義（Optimizely の datafile など）
            on_decision: ACTIVATE 通知の転送先。省略時は何もしない
            dispatcher: エンジンに渡すイベントディスパッチャー。省略時は no-op

        Returns:
            on_decision の登録ハンドル

        Raises:
            ToggleError: エンジンファクトリが登録されていない場合
        """
        with self._lock:
            if self._engine_factory is None:
                raise ToggleError(
                    ToggleErrorCodes.ENGINE_FACTORY_MISSING,
                    "engine factory is not registered",
                )
            engine = self._engine_factory(
                definition, dispatcher or NoOpEventDispatcher()
            )
            for subscription in self._subscriptions:
                subscription.unsubscribe()
            self._subscriptions = []
            self._engine = engine
            self._cache.clear()
            logger.info("decision engine initialized", engine=type(engine).__name__)
            return self._connect(on_decision)

    def add_decision_listener(self, callback: NotificationCallback) -> Subscription:
        """ACTIVATE 通知のリスナーを追加する。"""
        with self._lock:
            return self._connect(callback)

    def set_user_id(self, user_id: str) -> None:
        with self._lock:
            self._context.set_user_id(user_id)

    def merge_attributes(self, attributes: Attributes | None = None) -> None:
        with self._lock:
            self._context.merge_attributes(attributes)

    def reset_attributes(self) -> None:
        with self._lock:
            self._context.reset_attributes()

    def apply_forced_overrides(
        self, overrides: Mapping[str, ToggleValue | None]
    ) -> None:
        """強制値を一括で追加・削除する。None は削除を意味する。"""
        with self._lock:
            self._forced.apply(overrides)

    def clear_forced_overrides(self) -> None:
        with self._lock:
            self._forced.clear()

    def reset(self) -> None:
        """ユーザー ID・属性・強制値・キャッシュを初期状態に戻す。

        エンジンと登録済みリスナーは維持する。
        """
        with self._lock:
            self._context.set_user_id(None)
            self._context.reset_attributes()
            self._forced.clear()

    def resolve_boolean(self, toggle_id: str) -> bool:
        """ブールトグルを判定する。エンジンの ACTIVATE 通知は発火しない。"""
        with self._lock:
            user_id = self._require_user_id(toggle_id)
            found, value = self._forced_or_cached(DecisionKind.BOOLEAN, toggle_id)
            if found:
                return self._coerce_boolean(toggle_id, value)

            engine = self._require_engine()
            logger.debug("querying feature enabled", toggle_id=toggle_id)
            enabled = engine.is_feature_enabled(
                toggle_id, user_id, self._context.attributes
            )
            self._cache.set(DecisionKind.BOOLEAN, toggle_id, enabled)
            return enabled

    def resolve_variation(self, toggle_id: str) -> str:
        """バリエーションを判定する。エンジン問い合わせごとに ACTIVATE が発火する。"""
        with self._lock:
            user_id = self._require_user_id(toggle_id)
            found, value = self._forced_or_cached(DecisionKind.VARIATION, toggle_id)
            if found:
                return self._coerce_variation(toggle_id, value)

            engine = self._require_engine()
            logger.debug("activating experiment", toggle_id=toggle_id)
            variation = (
                engine.activate(toggle_id, user_id, self._context.attributes)
                or DEFAULT_VARIATION
            )
            self._cache.set(DecisionKind.VARIATION, toggle_id, variation)
            return variation

    def _connect(self, callback: NotificationCallback | None) -> Subscription:
        engine = self._require_engine()
        subscription = NotificationRelay(engine.notification_center).connect(callback)
        self._subscriptions.append(subscription)
        return subscription

    def _require_user_id(self, toggle_id: str) -> str:
        user_id = self._context.user_id
        if not user_id:
            raise UserIdMissingError(toggle_id)
        return user_id

    def _require_engine(self) -> DecisionEngine:
        if self._engine is None:
            raise EngineUnavailableError()
        return self._engine

    def _forced_or_cached(
        self, kind: DecisionKind, toggle_id: str
    ) -> tuple[bool, ToggleValue | None]:
        if self._forced.contains(toggle_id):
            return True, self._forced.get(toggle_id)
        if self._cache.contains(kind, toggle_id):
            return True, self._cache.get(kind, toggle_id)
        return False, None

    @staticmethod
    def _coerce_boolean(toggle_id: str, value: ToggleValue | None) -> bool:
        if isinstance(value, bool):
            return value
        logger.debug("boolean toggle value type mismatch", toggle_id=toggle_id)
        return DEFAULT_BOOLEAN

    @staticmethod
    def _coerce_variation(toggle_id: str, value: ToggleValue | None) -> str:
        if isinstance(value, str):
            return value
        logger.debug("variation toggle value type mismatch", toggle_id=toggle_id)
        return DEFAULT_VARIATION
