"""設定ファイル読み込み"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .exceptions import ToggleError, ToggleErrorCodes
from .logger import configure_logging
from .resolver import ToggleResolver
from .settings import ToggleSettings


def _read_yaml(path: Path) -> dict[str, Any]:
    """YAML ファイルを読み込む。"""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ToggleError(
            code=ToggleErrorCodes.READ_FILE,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    try:
        data: dict[str, Any] = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ToggleError(
            code=ToggleErrorCodes.PARSE_YAML,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    return data


_MAPPING_SECTIONS = ("attributes", "forced_toggles")


def _merge_mapping(base: Any, override: dict[str, Any]) -> dict[str, Any]:
    """環境別の値で上書きする。null のキーはベース側のエントリを削除する。"""
    result: dict[str, Any] = dict(base) if isinstance(base, dict) else {}
    for key, value in override.items():
        if value is None:
            result.pop(key, None)
        else:
            result[key] = value
    return result


def _merge_settings(base: dict[str, Any], env: dict[str, Any]) -> dict[str, Any]:
    """ベース設定に環境別設定を重ねる。

    attributes と forced_toggles はキー単位でマージし、null のキーは削除する。
    log はキー単位で上書きし、それ以外は値ごと置き換える。
    """
    result: dict[str, Any] = dict(base)
    for section, value in env.items():
        if section in _MAPPING_SECTIONS and isinstance(value, dict):
            result[section] = _merge_mapping(result.get(section), value)
        elif section == "log" and isinstance(value, dict):
            result[section] = {**(result.get(section) or {}), **value}
        else:
            result[section] = value
    return result


def load(base_path: Path, env_path: Path | None = None) -> ToggleSettings:
    """設定ファイルを読み込んで ToggleSettings を返す。

    base_path: ベース設定ファイルパス（必須）
    env_path: 環境別設定ファイルパス（オプション）。存在する場合はベースに重ねる。
    """
    data = _read_yaml(base_path)
    if env_path is not None and env_path.exists():
        data = _merge_settings(data, _read_yaml(env_path))
    try:
        return ToggleSettings.model_validate(data)
    except ValidationError as e:
        raise ToggleError(
            code=ToggleErrorCodes.VALIDATION,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e


def apply_settings(resolver: ToggleResolver, settings: ToggleSettings) -> None:
    """設定のログ出力を構成し、ユーザー ID・属性・強制値を resolver に反映する。"""
    configure_logging(settings.log)
    if settings.user_id is not None:
        resolver.set_user_id(settings.user_id)
    if settings.attributes:
        resolver.merge_attributes(settings.attributes)
    if settings.forced_toggles:
        resolver.apply_forced_overrides(settings.forced_toggles)
