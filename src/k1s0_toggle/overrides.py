"""強制トグル値のレジストリ"""

from __future__ import annotations

from collections.abc import Mapping

from .models import ToggleValue


class ForcedOverrideRegistry:
    """オペレーターが指定した強制値。ユーザー ID や属性の変更では消えない。"""

    def __init__(self) -> None:
        self._overrides: dict[str, ToggleValue] = {}

    def apply(self, overrides: Mapping[str, ToggleValue | None]) -> None:
        """強制値を一括で追加・削除する。

        値が None のエントリは既存の強制値を削除する。
        値の型とトグル種別の整合は検証しない。
        """
        for toggle_id, value in overrides.items():
            if value is None:
                self._overrides.pop(toggle_id, None)
            else:
                self._overrides[toggle_id] = value

    def contains(self, toggle_id: str) -> bool:
        return toggle_id in self._overrides

    def get(self, toggle_id: str) -> ToggleValue | None:
        return self._overrides.get(toggle_id)

    def snapshot(self) -> dict[str, ToggleValue]:
        return dict(self._overrides)

    def clear(self) -> None:
        self._overrides.clear()

    def __len__(self) -> int:
        return len(self._overrides)
