from typing import Optional
from extcrypto.convention import Callback
from extcrypto.crypto.backend import CryptoBackend
from extcrypto.operations.extract import PublicKeyExtractor
from extcrypto.operations.keygen import KeyGenerator
from extcrypto.result import CallResult

def initialize() -> CryptoBackend:
    return CryptoBackend.initialize()

def keygen(callback: Optional[Callback] = None) -> Optional[CallResult]:
    """
    Generate a 2048 bit RSA key (exponent 65537) and return its private
    key as PEM. With a callback the result is delivered as
    ``callback(error, pem)`` instead of being returned.
    """
    return KeyGenerator().generate(callback)

def extract(pem_private_key: str, callback: Optional[Callback] = None) -> Optional[CallResult]:
    """
    Derive the PKCS#1 PEM public key from an unencrypted PEM RSA private
    key. With a callback the result is delivered as
    ``callback(error, pem)`` instead of being returned.
    """
    return PublicKeyExtractor().extract(pem_private_key, callback)
