# solana_actions_py/errors.py

from typing import Any, Optional


class ActionError(Exception):
    """Base class for every failure an action pipeline can report."""


class ValidationError(ActionError):
    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class KeyGenerationError(ActionError):
    pass


class SigningError(ActionError):
    pass


class UpstreamRPCError(ActionError):
    """
    Failure reported by the RPC node or the transport underneath it.

    Args:
        method (str): Name of the RPC call that failed.
        cause (Optional[BaseException]): The original exception, if any.
    """

    def __init__(self, method: str, message: str, cause: Optional[BaseException] = None):
        super().__init__(f"{method}: {message}")
        self.method = method
        self.cause = cause
