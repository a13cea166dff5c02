from typing import Optional
from extcrypto.convention import Callback
from extcrypto.crypto.buffer import PEMBuffer
from extcrypto.operations.operation import AbstractOperation, OperationVariant
from extcrypto.result import CallResult, Err, ExtcryptoError, Ok

class KeyGenerator(AbstractOperation):

    @classmethod
    def variant(cls) -> OperationVariant:
        return OperationVariant.KEYGEN

    def run(self) -> CallResult:
        # One attempt only, a backend failure is final
        try:
            with self.backend.generateKeyPair() as key_pair, PEMBuffer() as buffer:
                self.backend.writePrivateKey(key_pair, buffer)
                return Ok(buffer.text())
        except ExtcryptoError as e:
            return Err(e)

    def generate(self, callback: Optional[Callback] = None) -> Optional[CallResult]:
        """
        Generate a new RSA key and serialize its private half as PEM.

        Returns the ``CallResult`` when no callback is given, otherwise
        calls ``callback(error, pem)`` once and returns ``None``.
        """
        return self._dispatch(callback)
