"""toggle 設定型定義（pydantic BaseModel）"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class LogSection(BaseModel):
    """ログ設定。"""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class ToggleSettings(BaseModel):
    """トグル判定の設定全体。

    forced_toggles の値が null のエントリは強制値の削除を意味する。
    """

    log: LogSection = Field(default_factory=LogSection)
    user_id: str | None = None
    attributes: dict[str, bool | str] = Field(default_factory=dict)
    forced_toggles: dict[str, bool | str | None] = Field(default_factory=dict)
