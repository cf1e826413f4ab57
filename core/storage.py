# core/storage.py

"""
Key-value storage backends for persisting the roster.

Each backend exposes named slots holding opaque text. The roster lives in a single
slot as one JSON document; backends never parse or validate what they hold.

- `JsonFileStore` keeps each slot in `<dir_path>/<key>.json` and survives restarts.
- `MemoryStore` keeps slots in a dictionary and is used for tests and throwaway sessions.
"""

import os


class KeyValueStore:
    """
    Minimal interface for a named-slot text store.
    """

    def get(self, key: str) -> str | None:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError


class MemoryStore(KeyValueStore):

    def __init__(self, initial: dict[str, str] | None = None):
        self._slots: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._slots.get(key)

    def set(self, key: str, value: str) -> None:
        self._slots[key] = value


class JsonFileStore(KeyValueStore):

    def __init__(self, dir_path: str):
        self._dir_path = dir_path

    @property
    def dir_path(self) -> str:
        return self._dir_path

    def slot_path(self, key: str) -> str:
        return os.path.join(self._dir_path, f"{key}.json")

    def get(self, key: str) -> str | None:
        """
        Reads the text held in a slot.

        Returns:
            The slot contents, or None if the slot has never been written.

        Raises:
            OSError: If the slot exists but cannot be read.
        """
        try:
            with open(self.slot_path(key), "r", encoding="utf-8") as f:
                return f.read()

        except FileNotFoundError:
            return None

    def set(self, key: str, value: str) -> None:
        """
        Overwrites a slot with new text.

        Notes:
            - The directory is created if it does not exist.
            - The value is written to a temporary file and moved into place, so a failed
              write leaves the previous contents intact and removes the temporary file.
        """
        os.makedirs(self._dir_path, exist_ok=True)

        target = self.slot_path(key)
        temp_path = f"{target}.tmp"

        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                f.write(value)

            os.replace(temp_path, target)

        except BaseException:
            if os.path.exists(temp_path):
                os.remove(temp_path)
            raise
