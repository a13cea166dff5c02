import logging
import threading
from typing import Optional
from cryptography.exceptions import InternalError, UnsupportedAlgorithm
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from extcrypto.config import KEY_CONFIG, KeyConfig
from extcrypto.crypto.buffer import PEMBuffer
from extcrypto.crypto.key_pair import RSAKeyPair
from extcrypto.result import ExtcryptoError

logger = logging.getLogger(__name__)

class CryptoBackend:
    """
    Wrapper over the ``cryptography`` primitives used to build, parse
    and encode RSA keys. Failures raised by the library are converted
    to ``ExtcryptoError`` here and nowhere else.

    A single process-wide instance is created by ``initialize()`` and
    is never torn down.
    """
    config: KeyConfig

    __instance: Optional["CryptoBackend"] = None
    __lock = threading.Lock()

    def __init__(self, config: KeyConfig = KEY_CONFIG):
        config.validate()
        self.config = config
        self.native = default_backend()

    @classmethod
    def initialize(cls) -> "CryptoBackend":
        with cls.__lock:
            if cls.__instance is None:
                cls.__instance = cls()
                logger.debug("Initialised cryptography backend")
            return cls.__instance

    @classmethod
    def instance(cls) -> "CryptoBackend":
        if cls.__instance is None:
            return cls.initialize()
        return cls.__instance

    def generateKeyPair(self) -> RSAKeyPair:
        logger.debug(f"Generating {self.config.key_size} bit RSA key with exponent {self.config.public_exponent}")
        try:
            key = rsa.generate_private_key(
                public_exponent=self.config.public_exponent,
                key_size=self.config.key_size,
                backend=self.native
            )
        except (ValueError, InternalError, UnsupportedAlgorithm) as e:
            logger.warning(f"RSA key generation failed: {e}")
            raise ExtcryptoError.generationFailure() from e
        return RSAKeyPair(key)

    def loadPrivateKey(self, material: bytes) -> RSAKeyPair:
        try:
            key = serialization.load_pem_private_key(
                material,
                password=None,
                backend=self.native
            )
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            logger.warning(f"Private key could not be decoded: {e}")
            raise ExtcryptoError.parseFailure() from e
        if not isinstance(key, rsa.RSAPrivateKey):
            logger.warning(f"Decoded private key is {type(key).__name__}, not RSA")
            raise ExtcryptoError.parseFailure()
        return RSAKeyPair(key)

    def writePrivateKey(self, key_pair: RSAKeyPair, buffer: PEMBuffer) -> int:
        pem = key_pair.privateKey().private_bytes(
            encoding=self.config.encoding,
            format=self.config.private_format,
            encryption_algorithm=serialization.NoEncryption()
        )
        return buffer.write(pem)

    def writePublicKey(self, key_pair: RSAKeyPair, buffer: PEMBuffer) -> int:
        pem = key_pair.publicKey().public_bytes(
            encoding=self.config.encoding,
            format=self.config.public_format
        )
        return buffer.write(pem)
