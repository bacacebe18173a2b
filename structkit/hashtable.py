"""Open-addressing hash table of student identifiers."""

from __future__ import annotations

_HASH_MODULUS = 38
_DELETED = object()


class StudentIdTable:
    """Fixed-size table with linear probing and tombstones.

    Identifiers carry a one-letter prefix (for example ``A01234567``);
    the table stores and hashes the digits that follow it.
    """

    def __init__(self, size: int = 50):
        if size < 1:
            raise ValueError("size must be positive")
        self._slots: list = [None] * size

    def _key(self, student_id: str) -> str:
        key = student_id[1:]
        if not key.isdigit():
            raise ValueError(f"invalid student id: {student_id!r}")
        return key

    def _home(self, key: str) -> int:
        return int(key) % _HASH_MODULUS % len(self._slots)

    def _probe(self, start: int):
        size = len(self._slots)
        return ((start + step) % size for step in range(1, size))

    def _locate(self, key: str) -> int | None:
        home = self._home(key)
        if self._slots[home] == key:
            return home
        if self._slots[home] is None:
            return None
        for index in self._probe(home):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot == key:
                return index
        return None

    def find(self, student_id: str) -> int | None:
        """Slot holding ``student_id``, or ``None`` when it is absent."""
        return self._locate(self._key(student_id))

    def insert(self, student_id: str) -> None:
        """Store ``student_id``; duplicates and a full table are errors."""
        key = self._key(student_id)
        if self._locate(key) is not None:
            raise ValueError("El valor ya se encuentra en la tabla")
        home = self._home(key)
        for index in (home, *self._probe(home)):
            slot = self._slots[index]
            if slot is None or slot is _DELETED:
                self._slots[index] = key
                return
        raise ValueError("La tabla esta llena")

    def remove(self, student_id: str) -> None:
        """Remove ``student_id``, leaving a tombstone in its slot."""
        index = self.find(student_id)
        if index is None:
            raise ValueError("El valor no se encuentra en la tabla")
        self._slots[index] = _DELETED

    def describe(self) -> str:
        """Render every slot as ``index-A<digits>``."""
        return "".join(
            f"{i}-A{slot if isinstance(slot, str) else ''} "
            for i, slot in enumerate(self._slots)
        )