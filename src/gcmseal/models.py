"""gcmseal データモデル"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .encoding import decode_hex, encode_hex
from .exceptions import DecodeError, InvalidNonceLengthError

NONCE_SIZE = 12  # 96-bit nonce recommended by NIST for AES-GCM
TAG_SIZE = 16


@dataclass(frozen=True)
class SealedMessage:
    """ノンスとタグ付き暗号文の組。

    ciphertext の長さは常に平文長 + 16 バイト。
    """

    nonce: bytes
    ciphertext: bytes

    def __post_init__(self) -> None:
        if len(self.nonce) != NONCE_SIZE:
            raise InvalidNonceLengthError(len(self.nonce))
        if len(self.ciphertext) < TAG_SIZE:
            raise DecodeError(
                "ciphertext",
                f"must be at least {TAG_SIZE} bytes, got {len(self.ciphertext)}",
            )

    @property
    def nonce_hex(self) -> str:
        return encode_hex(self.nonce)

    @property
    def ciphertext_hex(self) -> str:
        return encode_hex(self.ciphertext)

    @property
    def plaintext_length(self) -> int:
        """タグを除いた平文のバイト数。"""
        return len(self.ciphertext) - TAG_SIZE

    def __iter__(self) -> Iterator[bytes]:
        """``nonce, ciphertext = sealed`` の形で展開できる。"""
        yield self.nonce
        yield self.ciphertext

    def to_hex(self) -> tuple[str, str]:
        """(ciphertext_hex, nonce_hex) を返す。open_sealed の引数順と同じ。"""
        return self.ciphertext_hex, self.nonce_hex

    @classmethod
    def from_hex(cls, ciphertext_hex: str, nonce_hex: str) -> SealedMessage:
        """16 進文字列から SealedMessage を復元する。

        Raises:
            DecodeError: 16 進文字列が不正、または暗号文がタグ長より短い場合
            InvalidNonceLengthError: ノンスが 12 バイトでない場合
        """
        return cls(
            nonce=decode_hex(nonce_hex, "nonce"),
            ciphertext=decode_hex(ciphertext_hex, "ciphertext"),
        )
