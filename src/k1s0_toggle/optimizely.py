"""optimizely-sdk アダプター"""

from __future__ import annotations

import json
from typing import Any

from .engine import EventDispatcher, NotificationCenter
from .exceptions import ToggleError, ToggleErrorCodes
from .models import Attributes


class OptimizelyEngine:
    """optimizely.Optimizely クライアントを DecisionEngine として扱う。"""

    def __init__(self, client: Any) -> None:
        self._client = client

    @property
    def client(self) -> Any:
        return self._client

    @property
    def notification_center(self) -> NotificationCenter:
        return self._client.notification_center

    def is_feature_enabled(
        self, toggle_id: str, user_id: str, attributes: Attributes
    ) -> bool:
        return self._client.is_feature_enabled(toggle_id, user_id, attributes)

    def activate(
        self, toggle_id: str, user_id: str, attributes: Attributes
    ) -> str | None:
        return self._client.activate(toggle_id, user_id, attributes)


def create_optimizely_engine(
    definition: str | dict[str, Any], dispatcher: EventDispatcher
) -> OptimizelyEngine:
    """datafile から Optimizely クライアントを生成する EngineFactory。

    Raises:
        ToggleError: optimizely-sdk が未インストール、または生成に失敗した場合
    """
    try:
        from optimizely import optimizely
    except ImportError as e:
        raise ToggleError(
            code=ToggleErrorCodes.ENGINE_INIT_ERROR,
            message="optimizely-sdk is not installed (pip install k1s0-toggle[optimizely])",
            cause=e,
        ) from e

    datafile = definition if isinstance(definition, str) else json.dumps(definition)
    try:
        client = optimizely.Optimizely(datafile=datafile, event_dispatcher=dispatcher)
    except Exception as e:
        raise ToggleError(
            code=ToggleErrorCodes.ENGINE_INIT_ERROR,
            message=f"Failed to create Optimizely client: {e}",
            cause=e,
        ) from e
    return OptimizelyEngine(client)
