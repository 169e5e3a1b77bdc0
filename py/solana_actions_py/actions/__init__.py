# solana_actions_py/actions/__init__.py

from .token_account import TokenAccounts

__all__ = ['TokenAccounts']
