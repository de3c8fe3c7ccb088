"""gcmseal: AES-GCM message sealing."""

from .cipher import (
    KEY_SIZES,
    AesGcmCipher,
    decrypt_text,
    encrypt_text,
    open_sealed,
    seal,
)
from .config import CipherSection, GcmSealConfig, LogSection, load_config
from .encoding import decode_hex, encode_hex
from .exceptions import (
    AuthenticationFailureError,
    ConfigError,
    DecodeError,
    GcmSealError,
    GcmSealErrorCodes,
    InvalidKeyLengthError,
    InvalidNonceLengthError,
    NonceExhaustedError,
    RandomnessFailureError,
)
from .logger import new_logger
from .models import NONCE_SIZE, TAG_SIZE, SealedMessage
from .nonce import CounterNonceSource, NonceSource, RandomNonceSource

__all__ = [
    "KEY_SIZES",
    "NONCE_SIZE",
    "TAG_SIZE",
    "AesGcmCipher",
    "SealedMessage",
    "seal",
    "open_sealed",
    "encrypt_text",
    "decrypt_text",
    "NonceSource",
    "RandomNonceSource",
    "CounterNonceSource",
    "encode_hex",
    "decode_hex",
    "GcmSealConfig",
    "CipherSection",
    "LogSection",
    "load_config",
    "new_logger",
    "GcmSealError",
    "GcmSealErrorCodes",
    "InvalidKeyLengthError",
    "InvalidNonceLengthError",
    "DecodeError",
    "RandomnessFailureError",
    "AuthenticationFailureError",
    "NonceExhaustedError",
    "ConfigError",
]
