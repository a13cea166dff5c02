import logging
from typing import Optional

logger = logging.getLogger(__name__)

class PEMBuffer:
    """
    Growable byte buffer that receives encoded key material.

    Used as a context manager: the contents are copied out as text
    with ``text()`` and the buffer is released when the scope exits,
    whether or not an exception was raised. Copies already handed out
    (the encoder output and the returned text) are not affected.
    """
    _data: Optional[bytearray]

    def __init__(self):
        self._data = bytearray()

    def __enter__(self) -> "PEMBuffer":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.release()

    def __len__(self) -> int:
        return 0 if self._data is None else len(self._data)

    @property
    def released(self) -> bool:
        return self._data is None

    def write(self, content: bytes) -> int:
        if self._data is None:
            raise ValueError("Cannot write to a released buffer")
        self._data.extend(content)
        return len(content)

    def text(self, encoding: str = "utf-8") -> str:
        if self._data is None:
            raise ValueError("Cannot read from a released buffer")
        return self._data.decode(encoding)

    def release(self) -> None:
        if self._data is None:
            return
        self._data = None
        logger.debug("Released PEM buffer")
