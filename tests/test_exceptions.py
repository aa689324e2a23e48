"""例外型のユニットテスト"""

from k1s0_toggle import (
    EngineUnavailableError,
    ToggleError,
    ToggleErrorCodes,
    UserIdMissingError,
)


def test_toggle_error_format() -> None:
    """ToggleError のフォーマット。"""
    err = ToggleError(ToggleErrorCodes.VALIDATION, "bad config")
    assert str(err) == "VALIDATION_ERROR: bad config"
    assert err.code == ToggleErrorCodes.VALIDATION


def test_toggle_error_cause() -> None:
    """cause が __cause__ に設定されること。"""
    cause = OSError("disk")
    err = ToggleError(ToggleErrorCodes.READ_FILE, "read failed", cause=cause)
    assert err.__cause__ is cause


def test_user_id_missing_error() -> None:
    """UserIdMissingError は ToggleError のサブクラス。"""
    err = UserIdMissingError("flagA")
    assert isinstance(err, ToggleError)
    assert err.code == ToggleErrorCodes.USER_ID_MISSING
    assert "flagA" in str(err)


def test_engine_unavailable_error() -> None:
    """EngineUnavailableError のコード。"""
    err = EngineUnavailableError()
    assert str(err) == "ENGINE_UNAVAILABLE: decision engine is not initialized"
