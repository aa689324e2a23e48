"""判定結果キャッシュ"""

from __future__ import annotations

from .models import DecisionKind, ToggleValue


class DecisionCache:
    """ブール判定とバリエーション判定の 2 系統を持つメモ化テーブル。

    エントリは書き込み時点のユーザー ID と属性に対してのみ有効で、
    それらが変わったら clear() で両方まとめて破棄する。
    """

    def __init__(self) -> None:
        self._stores: dict[DecisionKind, dict[str, ToggleValue]] = {
            kind: {} for kind in DecisionKind
        }

    def contains(self, kind: DecisionKind, toggle_id: str) -> bool:
        return toggle_id in self._stores[kind]

    def get(self, kind: DecisionKind, toggle_id: str) -> ToggleValue | None:
        return self._stores[kind].get(toggle_id)

    def set(self, kind: DecisionKind, toggle_id: str, value: ToggleValue) -> None:
        self._stores[kind][toggle_id] = value

    def clear(self) -> None:
        """両方のテーブルを破棄する。"""
        for kind in DecisionKind:
            self._stores[kind] = {}

    def size(self, kind: DecisionKind) -> int:
        return len(self._stores[kind])
