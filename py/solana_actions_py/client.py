# solana_actions_py/client.py

import asyncio
from typing import Any, Callable, Iterable, List, Optional, Union

from solana.rpc.async_api import AsyncClient
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from .actions.token_account import TokenAccounts
from .options import ActionOptions
from .templates import ActionTemplate, execute, execute_all
from .types import CreateTokenAccountResult, Outcome
from .utils.callbacks import OnComplete, run_with_callback
from .utils.connection import ActionConnection

# ----------------------------
# Action client
# ----------------------------

class Action:
    """
    Entry point for token account actions.

    Every operation is offered three ways: as a coroutine that returns the
    value or raises ActionError, as a callback variant that receives an
    Outcome, and as a template (see templates.py) run through ``run``.
    """

    def __init__(
        self,
        connection: AsyncClient,
        opts: Optional[ActionOptions] = None,
        keypair_factory: Callable[[], Keypair] = Keypair,
    ):
        self.opts = opts if opts is not None else ActionOptions()
        self.api = ActionConnection(connection, self.opts)
        self.keypair_factory = keypair_factory

        self.token_accounts = TokenAccounts(self)

    @property
    def connection(self) -> AsyncClient:
        return self.api.connection

    @staticmethod
    def connect(endpoint: str, opts: Optional[ActionOptions] = None) -> 'Action':
        """
        Creates an Action client with its own AsyncClient.

        Args:
            endpoint (str): RPC URL, e.g. 'https://api.devnet.solana.com'.
            opts (Optional[ActionOptions]): Client options; timeout and commitment apply to the connection.

        Returns:
            Action: The connected client.
        """
        opts = opts if opts is not None else ActionOptions()
        connection = AsyncClient(endpoint, commitment=opts.commitment, timeout=opts.timeout)
        return Action(connection, opts)

    async def close(self) -> None:
        await self.connection.close()

    async def __aenter__(self) -> 'Action':
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # ----------------------------
    # Async surface
    # ----------------------------

    async def get_creating_token_account_fee(self) -> int:
        outcome = await self.token_accounts.fetch_creating_token_account_fee()
        return outcome.unwrap()

    async def create_token_account(
        self,
        mint_address: Union[str, Pubkey],
        payer: Keypair,
    ) -> CreateTokenAccountResult:
        outcome = await self.token_accounts.fetch_create_token_account(mint_address, payer)
        return outcome.unwrap()

    # ----------------------------
    # Callback surface
    # ----------------------------

    def get_creating_token_account_fee_with_callback(
        self,
        on_complete: OnComplete,
    ) -> 'asyncio.Task[Outcome[int]]':
        return run_with_callback(self.token_accounts.fetch_creating_token_account_fee(), on_complete)

    def create_token_account_with_callback(
        self,
        mint_address: Union[str, Pubkey],
        payer: Keypair,
        on_complete: OnComplete,
    ) -> 'asyncio.Task[Outcome[CreateTokenAccountResult]]':
        return run_with_callback(
            self.token_accounts.fetch_create_token_account(mint_address, payer),
            on_complete,
        )

    # ----------------------------
    # Template surface
    # ----------------------------

    async def run(self, template: ActionTemplate) -> Outcome[Any]:
        return await execute(self, template)

    async def run_all(self, templates: Iterable[ActionTemplate]) -> List[Outcome[Any]]:
        return await execute_all(self, templates)
