"""NonceSource 抽象基底クラスと実装"""

from __future__ import annotations

import os
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable

from .exceptions import NonceExhaustedError, RandomnessFailureError
from .models import NONCE_SIZE

_PREFIX_SIZE = 4
_COUNTER_SIZE = NONCE_SIZE - _PREFIX_SIZE
_COUNTER_MAX = 2 ** (8 * _COUNTER_SIZE) - 1


class NonceSource(ABC):
    """12 バイトのノンスを供給する抽象基底クラス。"""

    @abstractmethod
    def next_nonce(self) -> bytes:
        """次のノンスを返す。同じ鍵で同じ値を二度返してはならない。"""
        ...


class RandomNonceSource(NonceSource):
    """CSPRNG からノンスを生成する。

    random_bytes には ``os.urandom`` と同じシグネチャの関数を渡せる。
    同一鍵で約 2**32 メッセージを超える場合は CounterNonceSource を使うこと。
    """

    def __init__(self, random_bytes: Callable[[int], bytes] = os.urandom) -> None:
        self._random_bytes = random_bytes

    def next_nonce(self) -> bytes:
        try:
            nonce = self._random_bytes(NONCE_SIZE)
        except (OSError, NotImplementedError) as e:
            raise RandomnessFailureError("Random source unavailable", cause=e) from e
        if len(nonce) != NONCE_SIZE:
            raise RandomnessFailureError(
                f"Random source returned {len(nonce)} bytes, expected {NONCE_SIZE}"
            )
        return bytes(nonce)


class CounterNonceSource(NonceSource):
    """固定フィールド 4 バイト + 8 バイトのビッグエンディアンカウンター。

    NIST SP 800-38D の決定的構成。インスタンスは 1 つの鍵に対して 1 つだけ使う。
    """

    def __init__(self, prefix: bytes | None = None, start: int = 0) -> None:
        if prefix is None:
            prefix = RandomNonceSource().next_nonce()[:_PREFIX_SIZE]
        if len(prefix) != _PREFIX_SIZE:
            raise ValueError(f"prefix must be {_PREFIX_SIZE} bytes, got {len(prefix)}")
        if not 0 <= start <= _COUNTER_MAX:
            raise ValueError(f"start must be between 0 and {_COUNTER_MAX}, got {start}")
        self._prefix = bytes(prefix)
        self._counter = start
        self._lock = threading.Lock()

    @property
    def prefix(self) -> bytes:
        return self._prefix

    def next_nonce(self) -> bytes:
        with self._lock:
            if self._counter > _COUNTER_MAX:
                raise NonceExhaustedError()
            value = self._counter
            self._counter += 1
        return self._prefix + value.to_bytes(_COUNTER_SIZE, "big")
