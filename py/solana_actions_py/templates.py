# solana_actions_py/templates.py

import asyncio
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable, ClassVar, Dict, Iterable, List, Type, Union

from solders.keypair import Keypair
from solders.pubkey import Pubkey

from .types import CreateTokenAccountResult, Outcome

if TYPE_CHECKING:
    from .client import Action

# ----------------------------
# Templates
# ----------------------------

@dataclass(frozen=True)
class GetCreatingTokenAccountFee:
    success_type: ClassVar[type] = int

    async def perform(self, action: 'Action') -> Outcome[int]:
        return await execute(action, self)


@dataclass(frozen=True)
class CreateTokenAccount:
    success_type: ClassVar[type] = CreateTokenAccountResult

    mint_address: Union[str, Pubkey]
    payer: Keypair

    async def perform(self, action: 'Action') -> Outcome[CreateTokenAccountResult]:
        return await execute(action, self)


ActionTemplate = Union[GetCreatingTokenAccountFee, CreateTokenAccount]

# ----------------------------
# Registry
# ----------------------------

Performer = Callable[['Action', Any], Awaitable[Outcome[Any]]]

ACTION_TEMPLATES: Dict[Type[Any], Performer] = {
    GetCreatingTokenAccountFee: lambda action, template: (
        action.token_accounts.fetch_creating_token_account_fee()
    ),
    CreateTokenAccount: lambda action, template: (
        action.token_accounts.fetch_create_token_account(template.mint_address, template.payer)
    ),
}


async def execute(action: 'Action', template: ActionTemplate) -> Outcome[Any]:
    """
    Runs any template against the action client.

    Args:
        action (Action): Client whose connection and options are used.
        template (ActionTemplate): The pending action.

    Returns:
        Outcome[Any]: Success with the template's success_type, or Failure.

    Raises:
        TypeError: If the template type is not registered.
    """
    try:
        performer = ACTION_TEMPLATES[type(template)]
    except KeyError:
        raise TypeError(f"unknown action template: {type(template).__name__}") from None
    return await performer(action, template)


async def execute_all(action: 'Action', templates: Iterable[ActionTemplate]) -> List[Outcome[Any]]:
    """Runs independent templates concurrently; outcomes keep the input order."""
    templates = list(templates)
    for template in templates:
        if type(template) not in ACTION_TEMPLATES:
            raise TypeError(f"unknown action template: {type(template).__name__}")
    return list(await asyncio.gather(*(execute(action, t) for t in templates)))
