"""設定読み込みのユニットテスト"""

from __future__ import annotations

from pathlib import Path

import pytest

from gcmseal import ConfigError, GcmSealConfig, GcmSealErrorCodes, load_config


def write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "gcmseal.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults() -> None:
    """デフォルト値の確認。"""
    config = GcmSealConfig()
    assert config.cipher.allow_aes192 is False
    assert config.cipher.nonce == "random"
    assert config.cipher.counter_prefix == ""
    assert config.log.level == "INFO"
    assert config.log.format == "json"


def test_load_full(tmp_path: Path) -> None:
    path = write(
        tmp_path,
        """
cipher:
  allow_aes192: true
  nonce: counter
  counter_prefix: CAFEBABE
log:
  level: DEBUG
  format: text
""",
    )
    config = load_config(path)
    assert config.cipher.allow_aes192 is True
    assert config.cipher.nonce == "counter"
    assert config.cipher.counter_prefix == "cafebabe"
    assert config.log.level == "DEBUG"
    assert config.log.format == "text"


def test_load_empty_file_uses_defaults(tmp_path: Path) -> None:
    """空ファイルはデフォルト設定になること。"""
    config = load_config(write(tmp_path, ""))
    assert config == GcmSealConfig()


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as exc_info:
        load_config(tmp_path / "missing.yaml")
    assert exc_info.value.code == GcmSealErrorCodes.READ_FILE
    assert isinstance(exc_info.value.__cause__, OSError)


def test_load_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as exc_info:
        load_config(write(tmp_path, "cipher: [unclosed"))
    assert exc_info.value.code == GcmSealErrorCodes.PARSE_YAML


@pytest.mark.parametrize(
    "text",
    [
        "cipher:\n  nonce: sequential\n",
        "cipher:\n  counter_prefix: '0011'\n",
        "cipher:\n  counter_prefix: 'zzzzzzzz'\n",
        "log:\n  format: xml\n",
    ],
)
def test_load_validation_error(tmp_path: Path, text: str) -> None:
    """不正な値は VALIDATION_ERROR。"""
    with pytest.raises(ConfigError) as exc_info:
        load_config(write(tmp_path, text))
    assert exc_info.value.code == GcmSealErrorCodes.VALIDATION
    assert str(exc_info.value).startswith("VALIDATION_ERROR:")
