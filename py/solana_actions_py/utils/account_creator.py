# solana_actions_py/utils/account_creator.py

from typing import List

from solders.instruction import Instruction
from solders.pubkey import Pubkey
from solders.system_program import CreateAccountParams, create_account
from spl.token.constants import ACCOUNT_LEN, TOKEN_PROGRAM_ID
from spl.token.instructions import initialize_account
from spl.token.models import InitializeAccountParams

# Size of an SPL token account record (165 bytes)
TOKEN_ACCOUNT_LEN: int = ACCOUNT_LEN


def create_token_account_instructions(
    mint: Pubkey,
    new_account: Pubkey,
    payer: Pubkey,
    lamports: int,
    space: int = TOKEN_ACCOUNT_LEN,
    program_id: Pubkey = TOKEN_PROGRAM_ID,
) -> List[Instruction]:
    """
    Builds the instructions that create and initialize a token account.

    The create-account instruction always comes first: initialization
    references an account that must already exist.

    Args:
        mint (Pubkey): Mint the new token account is bound to.
        new_account (Pubkey): Address of the freshly generated account.
        payer (Pubkey): Fee payer, funds the account and becomes its owner.
        lamports (int): Balance to fund the account with (rent-exempt minimum).
        space (int): Account data size in bytes.
        program_id (Pubkey): Token program that will own the account.

    Returns:
        List[Instruction]: [create_account, initialize_account]
    """
    create_account_ix = create_account(
        CreateAccountParams(
            from_pubkey=payer,
            to_pubkey=new_account,
            lamports=lamports,
            space=space,
            owner=program_id,
        )
    )
    initialize_account_ix = initialize_account(
        InitializeAccountParams(
            program_id=program_id,
            account=new_account,
            mint=mint,
            owner=payer,
        )
    )
    return [create_account_ix, initialize_account_ix]
