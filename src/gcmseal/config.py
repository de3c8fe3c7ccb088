"""設定型定義と YAML 読み込み"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError, GcmSealErrorCodes


class CipherSection(BaseModel):
    """暗号設定。"""

    allow_aes192: bool = False
    nonce: Literal["random", "counter"] = "random"
    counter_prefix: str = ""  # hex, 4 bytes

    @field_validator("counter_prefix")
    @classmethod
    def _check_prefix(cls, value: str) -> str:
        if value and len(bytes.fromhex(value)) != 4:
            raise ValueError("counter_prefix must be 4 bytes of hex")
        return value.lower()


class LogSection(BaseModel):
    """ログ設定。"""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class GcmSealConfig(BaseModel):
    """gcmseal 設定全体。"""

    cipher: CipherSection = Field(default_factory=CipherSection)
    log: LogSection = Field(default_factory=LogSection)


def _read_yaml(path: Path) -> dict[str, Any]:
    """YAML ファイルを読み込む。"""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            code=GcmSealErrorCodes.READ_FILE,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    try:
        data: dict[str, Any] = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(
            code=GcmSealErrorCodes.PARSE_YAML,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    return data


def load_config(path: Path) -> GcmSealConfig:
    """設定ファイルを読み込んで GcmSealConfig を返す。"""
    data = _read_yaml(path)
    try:
        return GcmSealConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(
            code=GcmSealErrorCodes.VALIDATION,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e
