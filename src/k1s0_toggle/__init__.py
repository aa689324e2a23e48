"""k1s0 toggle library."""

from .cache import DecisionCache
from .context import ContextStore
from .engine import (
    DecisionEngine,
    EngineFactory,
    EventDispatcher,
    NoOpEventDispatcher,
    NotificationCenter,
    NotificationTypes,
)
from .exceptions import (
    EngineUnavailableError,
    ToggleError,
    ToggleErrorCodes,
    UserIdMissingError,
)
from .loader import apply_settings, load
from .logger import configure_logging
from .memory import (
    ActivationEvent,
    InMemoryDecisionEngine,
    InMemoryNotificationCenter,
    in_memory_engine_factory,
)
from .models import (
    DEFAULT_BOOLEAN,
    DEFAULT_VARIATION,
    AttributeValue,
    Attributes,
    DecisionKind,
    ToggleValue,
)
from .notification import NotificationRelay, Subscription
from .optimizely import OptimizelyEngine, create_optimizely_engine
from .overrides import ForcedOverrideRegistry
from .resolver import ToggleResolver
from .settings import LogSection, ToggleSettings
from .toggles import boolean_toggle, toggle

__all__ = [
    "ActivationEvent",
    "AttributeValue",
    "Attributes",
    "ContextStore",
    "DEFAULT_BOOLEAN",
    "DEFAULT_VARIATION",
    "DecisionCache",
    "DecisionEngine",
    "DecisionKind",
    "EngineFactory",
    "EngineUnavailableError",
    "EventDispatcher",
    "ForcedOverrideRegistry",
    "InMemoryDecisionEngine",
    "InMemoryNotificationCenter",
    "LogSection",
    "NoOpEventDispatcher",
    "NotificationCenter",
    "NotificationRelay",
    "NotificationTypes",
    "OptimizelyEngine",
    "Subscription",
    "ToggleError",
    "ToggleErrorCodes",
    "ToggleResolver",
    "ToggleSettings",
    "UserIdMissingError",
    "apply_settings",
    "boolean_toggle",
    "configure_logging",
    "create_optimizely_engine",
    "in_memory_engine_factory",
    "load",
    "toggle",
]
