"""Modular Crypt Format envelope: ``$<hash id>$<content>``."""

import abc
from typing import Optional


class PasswordHash(abc.ABC):
    """A parsed password hash that can check candidate passwords."""

    @abc.abstractmethod
    def verify(self, password: str) -> bool:
        """Return True when ``password`` is the one this hash was made from."""


class ModularCryptFormat:
    def __init__(self, hash_id: str, content: object) -> None:
        if hash_id is None:
            raise TypeError("hash_id must not be None")
        if content is None:
            raise TypeError("content must not be None")
        if not hash_id or "$" in hash_id:
            raise ValueError(f"invalid hash id: {hash_id!r}")
        self._hash_id = hash_id
        self._content = content

    @property
    def hash_id(self) -> str:
        return self._hash_id

    @property
    def content(self) -> object:
        return self._content

    def __str__(self) -> str:
        return f"${self._hash_id}${self._content}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._hash_id!r}, {self._content!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self._hash_id, self._content) == (other._hash_id, other._content)

    def __hash__(self) -> int:
        return hash((type(self), self._hash_id, self._content))

    @classmethod
    def try_parse(cls, text: str) -> Optional["ModularCryptFormat"]:
        """Split ``text`` into hash id and raw content, or return None.

        Only the first ``$`` after the id separates the two fields; any later
        ``$`` belongs to the content.
        """
        if not isinstance(text, str) or not text.startswith("$"):
            return None
        hash_id, sep, content = text.lstrip("$").partition("$")
        if not hash_id or not sep or not content:
            return None
        return ModularCryptFormat(hash_id, content)
