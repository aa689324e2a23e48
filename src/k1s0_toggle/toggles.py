"""ToggleResolver 上に組み立てるトグル関数"""

from __future__ import annotations

from typing import Any, Callable

from .resolver import ToggleResolver


def _pick(value: Any) -> Any:
    return value() if callable(value) else value


def _variant_index(variation: str) -> int:
    if len(variation) == 1 and "a" <= variation <= "z":
        return ord(variation) - ord("a")
    return 0


def boolean_toggle(resolver: ToggleResolver) -> Callable[..., Any]:
    """ブールトグル関数を返す。

    返される関数は (toggle_id, on=True, off=False) を受け取り、判定結果に応じて
    on / off を返す。選ばれた値が呼び出し可能なら呼び出した結果を返す。
    """

    def resolve(toggle_id: str, on: Any = True, off: Any = False) -> Any:
        return _pick(on if resolver.resolve_boolean(toggle_id) else off)

    return resolve


def toggle(resolver: ToggleResolver) -> Callable[..., Any]:
    """バリエーショントグル関数を返す。

    返される関数は (toggle_id, *variants) を受け取り、バリエーション "a" なら
    variants[0]、"b" なら variants[1] ... を返す。範囲外のキーは variants[0]。
    variants を省略するとバリエーションキーをそのまま返す。
    """

    def resolve(toggle_id: str, *variants: Any) -> Any:
        variation = resolver.resolve_variation(toggle_id)
        if not variants:
            return variation
        index = _variant_index(variation)
        if index >= len(variants):
            index = 0
        return _pick(variants[index])

    return resolve
