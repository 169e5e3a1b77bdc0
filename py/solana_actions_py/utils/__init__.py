# solana_actions_py/utils/__init__.py

from .account_creator import TOKEN_ACCOUNT_LEN, create_token_account_instructions
from .callbacks import run_with_callback
from .connection import ActionConnection
from .transaction import build_transaction_draft, send_transaction_draft

__all__ = [
    'TOKEN_ACCOUNT_LEN',
    'create_token_account_instructions',
    'run_with_callback',
    'ActionConnection',
    'build_transaction_draft',
    'send_transaction_draft',
]
