from typing import Any, Callable, Optional
from extcrypto.result import CallResult, ExtcryptoError, Ok

# (error, value): exactly one of the two is populated
Callback = Callable[[Optional[ExtcryptoError], Optional[str]], Any]

def checkCallback(callback: Optional[Callback]) -> None:
    if callback is not None and not callable(callback):
        raise ExtcryptoError.malformedInput(
            f"Callback must be callable, got {type(callback).__name__}"
        )

def deliver(result: CallResult, callback: Optional[Callback] = None) -> Optional[CallResult]:
    """
    Hand a finished result to the caller. Without a callback the result
    is returned as is. With one, the callback is invoked exactly once
    on the current thread as ``callback(error, value)`` and nothing is
    returned.
    """
    if callback is None:
        return result
    if isinstance(result, Ok):
        callback(None, result.value)
    else:
        callback(result.error, None)
    return None
