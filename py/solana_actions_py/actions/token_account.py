# solana_actions_py/actions/token_account.py

from typing import Union

from solders.keypair import Keypair
from solders.pubkey import Pubkey

from ..errors import ActionError, KeyGenerationError
from ..logging import get_logger
from ..types import CreateTokenAccountResult, Failure, Outcome, Success, parse_address
from ..utils.account_creator import TOKEN_ACCOUNT_LEN, create_token_account_instructions
from ..utils.transaction import build_transaction_draft, send_transaction_draft

logger = get_logger(__name__)


class TokenAccounts:
    def __init__(self, client):
        self.client = client

    async def fetch_creating_token_account_fee(self) -> Outcome[int]:
        try:
            fee = await self._creating_token_account_fee()
        except ActionError as exc:
            logger.warning("get_creating_token_account_fee.failed", stage="fetch_fee", error=str(exc))
            return Failure(exc)
        return Success(fee)

    async def fetch_create_token_account(
        self,
        mint_address: Union[str, Pubkey],
        payer: Keypair,
    ) -> Outcome[CreateTokenAccountResult]:
        """
        Creates and initializes a new token account for the mint, paid for
        and owned by the payer.

        Stages run strictly in order and the first failure ends the call:
        latest blockhash, rent-exempt fee, mint validation and keypair
        generation, then compose/sign/submit. Each call generates a new
        account keypair; nothing is reused if submission fails.

        Args:
            mint_address (Union[str, Pubkey]): Base58 mint address.
            payer (Keypair): Fee payer, signs first and owns the new account.

        Returns:
            Outcome[CreateTokenAccountResult]: Signature and new account address, or the failure.
        """
        log = logger.bind(action="create_token_account", mint=str(mint_address))
        stage = "fetch_blockhash"
        try:
            recent_blockhash = await self.client.api.get_latest_blockhash()

            stage = "fetch_fee"
            min_balance = await self._creating_token_account_fee()

            stage = "validate"
            mint = parse_address(mint_address, "mint address")
            new_account = self._generate_keypair()
            log.debug("create_token_account.prepared", new_account=str(new_account.pubkey()), lamports=min_balance)

            stage = "submit"
            instructions = create_token_account_instructions(
                mint=mint,
                new_account=new_account.pubkey(),
                payer=payer.pubkey(),
                lamports=min_balance,
                program_id=self.client.opts.token_program_id,
            )
            draft = build_transaction_draft(instructions, recent_blockhash, [payer, new_account])
            signature = await send_transaction_draft(self.client.api, draft)
        except ActionError as exc:
            log.warning("create_token_account.failed", stage=stage, error=str(exc))
            return Failure(exc)

        result = CreateTokenAccountResult(str(signature), str(new_account.pubkey()))
        log.debug("create_token_account.submitted", signature=result.signature, new_account=result.new_pubkey)
        return Success(result)

    async def _creating_token_account_fee(self) -> int:
        return await self.client.api.get_minimum_balance_for_rent_exemption(TOKEN_ACCOUNT_LEN)

    def _generate_keypair(self) -> Keypair:
        try:
            return self.client.keypair_factory()
        except Exception as exc:  # noqa: BLE001
            raise KeyGenerationError(f"could not generate keypair for new account: {exc}") from exc
