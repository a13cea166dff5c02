from dataclasses import dataclass
from cryptography.hazmat.primitives import serialization

EXPONENT = 65537
KEY_SIZE = 2048

ENCODING = serialization.Encoding.PEM
PRIVATE_FORMAT = serialization.PrivateFormat.TraditionalOpenSSL
PUBLIC_FORMAT = serialization.PublicFormat.PKCS1

SUPPORTED_EXPONENTS: tuple[int, ...] = (EXPONENT,)
SUPPORTED_KEY_SIZES: tuple[int, ...] = (KEY_SIZE,)

LOG_LEVEL_ENV = "EXTCRYPTO_LOG_LEVEL"

@dataclass(frozen=True)
class KeyConfig:
    key_size: int = KEY_SIZE
    public_exponent: int = EXPONENT
    encoding: serialization.Encoding = ENCODING
    private_format: serialization.PrivateFormat = PRIVATE_FORMAT
    public_format: serialization.PublicFormat = PUBLIC_FORMAT

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if (self.key_size not in SUPPORTED_KEY_SIZES):
            raise ValueError(f"Unsupported key size {self.key_size}, expected one of {list(SUPPORTED_KEY_SIZES)}")
        if (self.public_exponent not in SUPPORTED_EXPONENTS):
            raise ValueError(f"Unsupported public exponent {self.public_exponent}, expected one of {list(SUPPORTED_EXPONENTS)}")
        if (self.encoding != serialization.Encoding.PEM):
            raise ValueError(f"Keys can only be serialized as PEM, not {self.encoding!r}")
        if (self.private_format != PRIVATE_FORMAT):
            raise ValueError(f"Private keys are serialized as {PRIVATE_FORMAT!r}, not {self.private_format!r}")
        if (self.public_format != PUBLIC_FORMAT):
            raise ValueError(f"Public keys are serialized as {PUBLIC_FORMAT!r}, not {self.public_format!r}")

KEY_CONFIG: KeyConfig = KeyConfig()
