"""gcmseal の例外型定義"""

from __future__ import annotations


class GcmSealError(Exception):
    """gcmseal ライブラリのエラー基底クラス。"""

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


class GcmSealErrorCodes:
    """GcmSealError のエラーコード定数。"""

    INVALID_KEY_LENGTH: str = "INVALID_KEY_LENGTH"
    INVALID_NONCE_LENGTH: str = "INVALID_NONCE_LENGTH"
    DECODE: str = "DECODE_ERROR"
    RANDOMNESS_FAILURE: str = "RANDOMNESS_FAILURE"
    AUTHENTICATION_FAILURE: str = "AUTHENTICATION_FAILURE"
    NONCE_EXHAUSTED: str = "NONCE_EXHAUSTED"
    READ_FILE: str = "READ_FILE_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    VALIDATION: str = "VALIDATION_ERROR"


class InvalidKeyLengthError(GcmSealError):
    """鍵長が AES-128 / AES-256 のどちらにも一致しない。"""

    def __init__(self, length: int, allowed: tuple[int, ...]) -> None:
        self.length = length
        self.allowed = allowed
        sizes = ", ".join(str(n) for n in allowed)
        super().__init__(
            GcmSealErrorCodes.INVALID_KEY_LENGTH,
            f"Key must be one of {sizes} bytes, got {length}",
        )


class InvalidNonceLengthError(GcmSealError):
    """ノンス長が 12 バイトではない。"""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            GcmSealErrorCodes.INVALID_NONCE_LENGTH,
            f"Nonce must be 12 bytes, got {length}",
        )


class DecodeError(GcmSealError):
    """16 進文字列やテキストのデコード失敗。"""

    def __init__(self, field: str, message: str, cause: Exception | None = None) -> None:
        self.field = field
        super().__init__(GcmSealErrorCodes.DECODE, f"{field}: {message}", cause)


class RandomnessFailureError(GcmSealError):
    """乱数源が利用できない。呼び出し側ではシステム障害として扱う。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(GcmSealErrorCodes.RANDOMNESS_FAILURE, message, cause)


class AuthenticationFailureError(GcmSealError):
    """認証タグの検証失敗。

    改ざん・鍵違い・ノンス違い・短すぎる暗号文をすべて同一のエラーで表す。
    """

    def __init__(self) -> None:
        super().__init__(
            GcmSealErrorCodes.AUTHENTICATION_FAILURE,
            "Message authentication failed",
        )


class NonceExhaustedError(GcmSealError):
    """カウンター方式のノンスが上限に達した。"""

    def __init__(self) -> None:
        super().__init__(
            GcmSealErrorCodes.NONCE_EXHAUSTED,
            "Nonce counter exhausted; rotate the key",
        )


class ConfigError(GcmSealError):
    """設定ファイルの読み込み・検証エラー。"""
