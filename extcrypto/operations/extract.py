import logging
from typing import Optional
from extcrypto.convention import Callback
from extcrypto.crypto.buffer import PEMBuffer
from extcrypto.operations.operation import AbstractOperation, OperationVariant
from extcrypto.result import CallResult, Err, ExtcryptoError, Ok

logger = logging.getLogger(__name__)

def encodeKeyMaterial(pem_private_key: str) -> bytes:
    if "\x00" in pem_private_key:
        logger.warning("Private key text contains an embedded NUL character")
        raise ExtcryptoError.parseFailure()
    try:
        return pem_private_key.encode("utf-8")
    except UnicodeEncodeError as e:
        logger.warning(f"Private key text is not encodable: {e}")
        raise ExtcryptoError.parseFailure() from e

class PublicKeyExtractor(AbstractOperation):

    @classmethod
    def variant(cls) -> OperationVariant:
        return OperationVariant.EXTRACT

    def run(self, pem_private_key: str) -> CallResult:
        try:
            material = encodeKeyMaterial(pem_private_key)
            # loadPrivateKey raises before a buffer exists, so a failed
            # parse never reaches public key serialization
            with self.backend.loadPrivateKey(material) as key_pair, PEMBuffer() as buffer:
                self.backend.writePublicKey(key_pair, buffer)
                return Ok(buffer.text())
        except ExtcryptoError as e:
            return Err(e)

    def extract(self,
                pem_private_key: str,
                callback: Optional[Callback] = None) -> Optional[CallResult]:
        if not isinstance(pem_private_key, str):
            raise ExtcryptoError.malformedInput(
                f"Private key must be PEM text, got {type(pem_private_key).__name__}"
            )
        return self._dispatch(callback, pem_private_key)
