import hashlib
from typing import Any, Callable

HashFunc = Callable[..., Any]


class Digest:
    """
    Reusable wrapper around a hashlib constructor.

    hashlib objects cannot be reset, so an empty prototype is kept and copied
    whenever the state has to start over. `finalize` does not consume the
    state; call `reset` before hashing the next input.
    """

    def __init__(self, hash_func: HashFunc = hashlib.sha1):
        self._empty = hash_func()
        self._state = self._empty.copy()

    @property
    def name(self) -> str:
        return self._empty.name

    @property
    def digest_size(self) -> int:
        return self._empty.digest_size

    def reset(self) -> None:
        self._state = self._empty.copy()

    def update(self, data) -> None:
        self._state.update(data)

    def finalize(self) -> bytes:
        return self._state.digest()
