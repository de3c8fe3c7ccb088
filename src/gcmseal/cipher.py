"""AES-GCM authenticated encryption.

Uses the ``cryptography`` library's AESGCM primitive.  Sealing draws a
fresh 12-byte nonce per call and returns it next to the ciphertext::

    nonce (12 bytes)          ciphertext ‖ tag (len(plaintext) + 16 bytes)

Both values cross textual boundaries as lowercase hex.  Keys are supplied
per call and never stored on the cipher object.
"""

from __future__ import annotations

from typing import Any

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .config import GcmSealConfig
from .encoding import decode_hex
from .exceptions import (
    AuthenticationFailureError,
    DecodeError,
    InvalidKeyLengthError,
    InvalidNonceLengthError,
    RandomnessFailureError,
)
from .logger import get_logger, new_logger
from .models import NONCE_SIZE, TAG_SIZE, SealedMessage
from .nonce import CounterNonceSource, NonceSource, RandomNonceSource

KEY_SIZES = (16, 32)  # AES-128, AES-256
_AES192_KEY_SIZE = 24


class AesGcmCipher:
    """Seal and open messages with AES-GCM.

    The cipher holds only its nonce source and logger, so one instance can
    be shared between threads.

    Parameters
    ----------
    nonce_source:
        Supplies a 12-byte nonce per :meth:`seal`.  Defaults to
        :class:`RandomNonceSource` backed by ``os.urandom``.
    allow_aes192:
        Also accept 24-byte keys.
    logger:
        A structlog logger.  Defaults to one wrapping the stdlib
        ``gcmseal`` logger, which stays silent until logging is configured.
    """

    def __init__(
        self,
        nonce_source: NonceSource | None = None,
        *,
        allow_aes192: bool = False,
        logger: Any = None,
    ) -> None:
        self._nonce_source = nonce_source or RandomNonceSource()
        self._key_sizes = (
            tuple(sorted(KEY_SIZES + (_AES192_KEY_SIZE,))) if allow_aes192 else KEY_SIZES
        )
        self._logger = logger if logger is not None else get_logger()

    @classmethod
    def from_config(cls, config: GcmSealConfig, logger: Any = None) -> AesGcmCipher:
        """Build a cipher from a loaded :class:`GcmSealConfig`.

        Unless *logger* is given, structlog is configured from the
        ``log`` section through :func:`new_logger`.
        """
        if logger is None:
            logger = new_logger(config.log.level, config.log.format)
        nonce_source: NonceSource
        if config.cipher.nonce == "counter":
            prefix = bytes.fromhex(config.cipher.counter_prefix) or None
            nonce_source = CounterNonceSource(prefix=prefix)
        else:
            nonce_source = RandomNonceSource()
        return cls(nonce_source, allow_aes192=config.cipher.allow_aes192, logger=logger)

    @property
    def key_sizes(self) -> tuple[int, ...]:
        return self._key_sizes

    def _new_aead(self, key: bytes) -> AESGCM:
        if len(key) not in self._key_sizes:
            raise InvalidKeyLengthError(len(key), self._key_sizes)
        return AESGCM(bytes(key))

    def seal(
        self,
        key: bytes,
        plaintext: bytes,
        *,
        associated_data: bytes | None = None,
    ) -> SealedMessage:
        """Encrypt and authenticate *plaintext* under a fresh nonce.

        Returns
        -------
        SealedMessage
            The nonce and ``ciphertext + tag``.

        Raises
        ------
        InvalidKeyLengthError
            If *key* is not an accepted AES key size.
        RandomnessFailureError
            If the nonce source cannot produce a nonce.  Treat this as a
            system failure, not a crypto error.
        """
        aead = self._new_aead(key)
        try:
            nonce = self._nonce_source.next_nonce()
        except RandomnessFailureError as e:
            self._logger.error("nonce source failure", error=str(e))
            raise
        ct = aead.encrypt(nonce, plaintext, associated_data)
        self._logger.debug(
            "message sealed",
            key_bits=len(key) * 8,
            nonce=nonce.hex(),
            plaintext_length=len(plaintext),
        )
        return SealedMessage(nonce=nonce, ciphertext=ct)

    def open_bytes(
        self,
        key: bytes,
        ciphertext: bytes,
        nonce: bytes,
        *,
        associated_data: bytes | None = None,
    ) -> bytes:
        """Verify and decrypt raw *ciphertext* (with its trailing tag).

        Raises
        ------
        InvalidKeyLengthError
            If *key* is not an accepted AES key size.
        InvalidNonceLengthError
            If *nonce* is not 12 bytes.
        AuthenticationFailureError
            If the ciphertext is shorter than the tag, or the tag does not
            verify.  Wrong key, wrong nonce, tampering and corruption are
            indistinguishable.
        """
        aead = self._new_aead(key)
        return self._open(aead, ciphertext, nonce, associated_data)

    def open_message(
        self,
        key: bytes,
        message: SealedMessage,
        *,
        associated_data: bytes | None = None,
    ) -> bytes:
        """Open a :class:`SealedMessage` produced by :meth:`seal`."""
        return self.open_bytes(
            key, message.ciphertext, message.nonce, associated_data=associated_data
        )

    def open_sealed(
        self,
        key: bytes,
        ciphertext_hex: str,
        nonce_hex: str,
        *,
        associated_data: bytes | None = None,
    ) -> bytes:
        """Verify and decrypt hex-encoded *ciphertext_hex* under *nonce_hex*.

        Raises
        ------
        InvalidKeyLengthError
            If *key* is not an accepted AES key size.
        DecodeError
            If either argument is not a well-formed hex string.
        InvalidNonceLengthError
            If the decoded nonce is not 12 bytes.
        AuthenticationFailureError
            See :meth:`open_bytes`.
        """
        aead = self._new_aead(key)
        ciphertext = decode_hex(ciphertext_hex, "ciphertext")
        nonce = decode_hex(nonce_hex, "nonce")
        return self._open(aead, ciphertext, nonce, associated_data)

    def _open(
        self,
        aead: AESGCM,
        ciphertext: bytes,
        nonce: bytes,
        associated_data: bytes | None,
    ) -> bytes:
        if len(nonce) != NONCE_SIZE:
            raise InvalidNonceLengthError(len(nonce))
        if len(ciphertext) < TAG_SIZE:
            self._logger.warning("message authentication failed", nonce=nonce.hex())
            raise AuthenticationFailureError()
        try:
            plaintext = aead.decrypt(nonce, ciphertext, associated_data)
        except InvalidTag:
            self._logger.warning("message authentication failed", nonce=nonce.hex())
            raise AuthenticationFailureError() from None
        self._logger.debug(
            "message opened",
            nonce=nonce.hex(),
            plaintext_length=len(plaintext),
        )
        return plaintext

    def encrypt_text(self, key: str, message: str) -> SealedMessage:
        """Seal UTF-8 *message* under the UTF-8 bytes of *key*."""
        return self.seal(key.encode("utf-8"), message.encode("utf-8"))

    def decrypt_text(self, key: str, ciphertext_hex: str, nonce_hex: str) -> str:
        """Open a message sealed by :meth:`encrypt_text`.

        Raises
        ------
        DecodeError
            Also raised when the authenticated plaintext is not valid UTF-8.
        """
        plaintext = self.open_sealed(key.encode("utf-8"), ciphertext_hex, nonce_hex)
        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError("plaintext", "not valid UTF-8", cause=e) from e


_default = AesGcmCipher()


def seal(
    key: bytes,
    plaintext: bytes,
    *,
    associated_data: bytes | None = None,
) -> SealedMessage:
    """Seal *plaintext* with the default cipher (``os.urandom`` nonces)."""
    return _default.seal(key, plaintext, associated_data=associated_data)


def open_sealed(
    key: bytes,
    ciphertext_hex: str,
    nonce_hex: str,
    *,
    associated_data: bytes | None = None,
) -> bytes:
    """Open a hex-encoded message with the default cipher."""
    return _default.open_sealed(
        key, ciphertext_hex, nonce_hex, associated_data=associated_data
    )


def encrypt_text(key: str, message: str) -> SealedMessage:
    return _default.encrypt_text(key, message)


def decrypt_text(key: str, ciphertext_hex: str, nonce_hex: str) -> str:
    return _default.decrypt_text(key, ciphertext_hex, nonce_hex)
