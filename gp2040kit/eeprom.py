"""Emulated EEPROM kept in a RAM cache and written back to flash after a quiet period."""

from __future__ import annotations

import os
import threading
from pathlib import Path

EEPROM_SIZE_BYTES = 4096
EEPROM_ADDRESS_START = 0x101FF000
EEPROM_WRITE_WAIT_MS = 50

_ERASED = 0xFF


class FlashPROM:
    """A 4 KiB byte store backed by a flash image.

    Reads and writes go to an in-memory cache. ``commit`` does not write
    at once: it (re)starts a timer, so a burst of commits ends in a single
    write once no further commit has arrived for ``write_wait`` seconds.
    The flash image lives in memory and, when ``path`` is given, in that file.
    """

    def __init__(
        self,
        path: str | os.PathLike[str] | None = None,
        write_wait: float = EEPROM_WRITE_WAIT_MS / 1000.0,
    ) -> None:
        self.path = Path(path) if path is not None else None
        self.write_wait = write_wait
        self._cache = bytearray(EEPROM_SIZE_BYTES)
        self._flash = bytearray([_ERASED]) * EEPROM_SIZE_BYTES
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None

    def __len__(self) -> int:
        return EEPROM_SIZE_BYTES

    def __enter__(self) -> FlashPROM:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def flash_image(self) -> bytes:
        """What is currently stored in flash."""
        with self._lock:
            return bytes(self._flash)

    @property
    def pending(self) -> bool:
        """True while a commit is waiting to be written."""
        with self._lock:
            return self._timer is not None

    def start(self) -> None:
        """Load the cache from flash; an erased (all 0xFF) area is reset to zeros."""
        if self.path is not None and self.path.exists():
            stored = self.path.read_bytes()[:EEPROM_SIZE_BYTES]
            stored += bytes([_ERASED]) * (EEPROM_SIZE_BYTES - len(stored))
            with self._lock:
                self._flash[:] = stored
        with self._lock:
            self._cache[:] = self._flash
            erased = all(byte == _ERASED for byte in self._cache)
        if erased:
            self.reset()

    def commit(self) -> None:
        """Schedule the cache to be written to flash after the write wait."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            timer = threading.Timer(self.write_wait, self._timed_write)
            timer.daemon = True
            self._timer = timer
        timer.start()

    def reset(self) -> None:
        """Zero the whole store and commit it."""
        with self._lock:
            self._cache[:] = bytes(EEPROM_SIZE_BYTES)
        self.commit()

    def get(self, index: int, size: int) -> bytes:
        """Return ``size`` bytes starting at ``index``."""
        self._check_range(index, size)
        with self._lock:
            return bytes(self._cache[index:index + size])

    def set(self, index: int, data: bytes | bytearray | memoryview) -> None:
        """Store ``data`` starting at ``index``."""
        data = bytes(data)
        self._check_range(index, len(data))
        with self._lock:
            self._cache[index:index + len(data)] = data

    def flush(self) -> None:
        """Write a pending commit now."""
        with self._lock:
            timer = self._timer
            if timer is None:
                return
            timer.cancel()
            self._timer = None
            self._write_locked()

    def close(self) -> None:
        """Write any pending commit before the store is dropped."""
        self.flush()

    @staticmethod
    def _check_range(index: int, size: int) -> None:
        if size < 0:
            raise ValueError(f"negative size: {size}")
        if index < 0 or index + size > EEPROM_SIZE_BYTES or index >= EEPROM_SIZE_BYTES:
            raise IndexError(
                f"range {index}..{index + size} outside {EEPROM_SIZE_BYTES}-byte store"
            )

    def _timed_write(self) -> None:
        current = threading.current_thread()
        with self._lock:
            if self._timer is not current:
                return
            self._timer = None
            self._write_locked()

    def _write_locked(self) -> None:
        self._flash[:] = self._cache
        if self.path is not None:
            self.path.write_bytes(bytes(self._flash))