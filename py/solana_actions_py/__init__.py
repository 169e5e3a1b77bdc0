# solana_actions_py/__init__.py

from .client import Action
from .errors import ActionError, KeyGenerationError, SigningError, UpstreamRPCError, ValidationError
from .options import ActionOptions
from .templates import ActionTemplate, CreateTokenAccount, GetCreatingTokenAccountFee, execute, execute_all
from .types import CreateTokenAccountResult, Failure, Outcome, Success, TransactionDraft, parse_address

__all__ = [
    'Action',
    'ActionOptions',
    'ActionError',
    'KeyGenerationError',
    'SigningError',
    'UpstreamRPCError',
    'ValidationError',
    'ActionTemplate',
    'CreateTokenAccount',
    'GetCreatingTokenAccountFee',
    'execute',
    'execute_all',
    'CreateTokenAccountResult',
    'Failure',
    'Outcome',
    'Success',
    'TransactionDraft',
    'parse_address',
]
