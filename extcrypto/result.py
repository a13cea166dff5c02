from dataclasses import dataclass
from enum import Enum
from typing import Union

class ErrorKind(Enum):
    GENERATION_FAILURE = "generation_failure"
    PARSE_FAILURE = "parse_failure"
    MALFORMED_INPUT = "malformed_input"

    def __str__(self) -> str:
        return "%s" % self.value

GENERATION_FAILURE_MESSAGE = "Unable to generate key"
PARSE_FAILURE_MESSAGE = "Unable to parse private key"

class ExtcryptoError(Exception):
    kind: ErrorKind
    message: str

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind}, {self.message!r})"

    @classmethod
    def generationFailure(cls) -> "ExtcryptoError":
        return cls(ErrorKind.GENERATION_FAILURE, GENERATION_FAILURE_MESSAGE)

    @classmethod
    def parseFailure(cls) -> "ExtcryptoError":
        return cls(ErrorKind.PARSE_FAILURE, PARSE_FAILURE_MESSAGE)

    @classmethod
    def malformedInput(cls, message: str) -> "ExtcryptoError":
        return cls(ErrorKind.MALFORMED_INPUT, message)

@dataclass(frozen=True)
class Ok:
    value: str

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> str:
        return self.value

@dataclass(frozen=True)
class Err:
    error: ExtcryptoError

    @property
    def ok(self) -> bool:
        return False

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    def unwrap(self) -> str:
        raise self.error

# Either the PEM text or the reason it could not be produced
CallResult = Union[Ok, Err]
