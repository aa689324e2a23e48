"""DecisionCache / ContextStore / ForcedOverrideRegistry のユニットテスト"""

from k1s0_toggle import ContextStore, DecisionCache, DecisionKind, ForcedOverrideRegistry


def test_cache_set_and_get() -> None:
    """値の保存と取得。"""
    cache = DecisionCache()
    cache.set(DecisionKind.BOOLEAN, "flagA", True)
    assert cache.contains(DecisionKind.BOOLEAN, "flagA") is True
    assert cache.get(DecisionKind.BOOLEAN, "flagA") is True


def test_cache_kinds_are_independent() -> None:
    """ブールとバリエーションのストアは独立していること。"""
    cache = DecisionCache()
    cache.set(DecisionKind.VARIATION, "exp", "b")
    assert cache.contains(DecisionKind.BOOLEAN, "exp") is False
    assert cache.get(DecisionKind.BOOLEAN, "exp") is None


def test_cache_clear_empties_both_stores() -> None:
    """clear で両方のストアが空になること。"""
    cache = DecisionCache()
    cache.set(DecisionKind.BOOLEAN, "flagA", False)
    cache.set(DecisionKind.VARIATION, "exp", "b")
    cache.clear()
    assert cache.size(DecisionKind.BOOLEAN) == 0
    assert cache.size(DecisionKind.VARIATION) == 0


def test_cache_stores_false_as_present() -> None:
    """False もキャッシュ済みとして扱うこと。"""
    cache = DecisionCache()
    cache.set(DecisionKind.BOOLEAN, "flagA", False)
    assert cache.contains(DecisionKind.BOOLEAN, "flagA") is True


def test_context_defaults() -> None:
    """ContextStore のデフォルト値。"""
    store = ContextStore(DecisionCache())
    assert store.user_id is None
    assert store.attributes == {}


def test_context_mutations_clear_cache() -> None:
    """ContextStore の変更操作はすべてキャッシュを破棄すること。"""
    cache = DecisionCache()
    store = ContextStore(cache)
    for mutate in (
        lambda: store.set_user_id("u1"),
        lambda: store.merge_attributes({"plan": "pro"}),
        lambda: store.merge_attributes(),
        store.reset_attributes,
    ):
        cache.set(DecisionKind.BOOLEAN, "flagA", True)
        mutate()
        assert cache.contains(DecisionKind.BOOLEAN, "flagA") is False


def test_context_merge_keeps_existing_keys() -> None:
    """マージは既存キーを保持し、同じキーは上書きすること。"""
    store = ContextStore(DecisionCache())
    store.merge_attributes({"plan": "free", "beta": True})
    store.merge_attributes({"plan": "pro"})
    assert store.attributes == {"plan": "pro", "beta": True}


def test_context_attributes_returns_copy() -> None:
    """attributes の戻り値を変更しても内部状態は変わらないこと。"""
    store = ContextStore(DecisionCache())
    store.merge_attributes({"plan": "pro"})
    store.attributes["plan"] = "free"
    assert store.attributes == {"plan": "pro"}


def test_overrides_apply_and_remove() -> None:
    """値の設定と None による削除。"""
    registry = ForcedOverrideRegistry()
    registry.apply({"flagA": True, "exp": "b"})
    assert len(registry) == 2
    registry.apply({"flagA": None, "exp": "c", "missing": None})
    assert registry.snapshot() == {"exp": "c"}
    assert registry.contains("flagA") is False
    assert registry.get("exp") == "c"


def test_overrides_keep_false_values() -> None:
    """False の強制値は削除ではなく設定として扱うこと。"""
    registry = ForcedOverrideRegistry()
    registry.apply({"flagA": False})
    assert registry.contains("flagA") is True
    assert registry.get("flagA") is False


def test_overrides_clear() -> None:
    """clear で全削除。"""
    registry = ForcedOverrideRegistry()
    registry.apply({"flagA": True})
    registry.clear()
    assert len(registry) == 0
