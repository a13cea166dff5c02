import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional
from extcrypto.convention import Callback, checkCallback, deliver
from extcrypto.crypto.backend import CryptoBackend
from extcrypto.result import CallResult

logger = logging.getLogger(__name__)

class OperationVariant(Enum):
    KEYGEN = "keygen"
    EXTRACT = "extract"

    def __str__(self) -> str:
        return "%s" % self.value

class AbstractOperation(ABC):
    backend: CryptoBackend

    def __init__(self, backend: Optional[CryptoBackend] = None):
        self.backend = backend if backend is not None else CryptoBackend.instance()

    @classmethod
    @abstractmethod
    def variant(cls) -> OperationVariant:
        raise NotImplementedError(f"No OperationVariant specified for {cls.__name__}")

    @abstractmethod
    def run(self, *args: Any) -> CallResult:
        pass

    def _dispatch(self, callback: Optional[Callback], *args: Any) -> Optional[CallResult]:
        checkCallback(callback)
        mode = "sync" if callback is None else "async"
        logger.debug(f"Running {self.variant()} ({mode})")
        result = self.run(*args)
        if not result.ok:
            logger.debug(f"{self.variant()} failed: {result.error.kind}")
        return deliver(result, callback)
