"""toggle ライブラリの例外型定義"""

from __future__ import annotations


class ToggleError(Exception):
    """toggle ライブラリのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class ToggleErrorCodes:
    """ToggleError のエラーコード定数。"""

    USER_ID_MISSING: str = "USER_ID_MISSING"
    ENGINE_UNAVAILABLE: str = "ENGINE_UNAVAILABLE"
    ENGINE_FACTORY_MISSING: str = "ENGINE_FACTORY_MISSING"
    ENGINE_INIT_ERROR: str = "ENGINE_INIT_ERROR"
    READ_FILE: str = "READ_FILE_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    VALIDATION: str = "VALIDATION_ERROR"


class UserIdMissingError(ToggleError):
    """判定時にユーザー ID が設定されていない。"""

    def __init__(self, toggle_id: str) -> None:
        super().__init__(
            ToggleErrorCodes.USER_ID_MISSING,
            f"user id is not set (toggle: {toggle_id})",
        )
        self.toggle_id = toggle_id


class EngineUnavailableError(ToggleError):
    """エンジン生成前に判定エンジンが必要になった。"""

    def __init__(self, message: str = "decision engine is not initialized") -> None:
        super().__init__(ToggleErrorCodes.ENGINE_UNAVAILABLE, message)
