import logging
from typing import Optional
from cryptography.hazmat.primitives.asymmetric import rsa

logger = logging.getLogger(__name__)

class RSAKeyPair:
    """
    Exclusive owner of one backend RSA private key, and through it the
    matching public key. Meant to be used in a ``with`` block so the
    key is dropped on every exit path of the operation holding it.
    """
    _key: Optional[rsa.RSAPrivateKey]

    def __init__(self, key: rsa.RSAPrivateKey):
        self._key = key

    def __enter__(self) -> "RSAKeyPair":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.release()

    @property
    def released(self) -> bool:
        return self._key is None

    def privateKey(self) -> rsa.RSAPrivateKey:
        if self._key is None:
            raise ValueError("Key pair has already been released")
        return self._key

    def publicKey(self) -> rsa.RSAPublicKey:
        return self.privateKey().public_key()

    def keySize(self) -> int:
        return self.privateKey().key_size

    def release(self) -> None:
        if self._key is None:
            return
        self._key = None
        logger.debug("Released RSA key pair")
