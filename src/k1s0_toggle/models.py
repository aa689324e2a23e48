"""toggle データモデル"""

from __future__ import annotations

from enum import Enum
from typing import Union

AttributeValue = Union[str, bool]
Attributes = dict[str, AttributeValue]
ToggleValue = Union[str, bool]

DEFAULT_BOOLEAN: bool = False
# バリエーションキーは a, b, c ... の規約
DEFAULT_VARIATION: str = "a"


class DecisionKind(str, Enum):
    """判定の種類。"""

    BOOLEAN = "boolean"
    VARIATION = "variation"
