"""Tests for action templates and the generic executor."""

from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass
from unittest.mock import MagicMock

import pytest
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from conftest import MIN_BALANCE, call_counts
from solana_actions_py import Action
from solana_actions_py.errors import ValidationError
from solana_actions_py.templates import (
    ACTION_TEMPLATES,
    CreateTokenAccount,
    GetCreatingTokenAccountFee,
    execute,
    execute_all,
)
from solana_actions_py.types import CreateTokenAccountResult, Failure, Success


@dataclass(frozen=True)
class CloseTokenAccount:
    account: str


class TestTemplates:
    def test_success_types(self) -> None:
        assert GetCreatingTokenAccountFee.success_type is int
        assert CreateTokenAccount.success_type is CreateTokenAccountResult

    def test_templates_are_immutable(self, payer: Keypair, mint: Pubkey) -> None:
        template = CreateTokenAccount(str(mint), payer)
        with pytest.raises(FrozenInstanceError):
            template.mint_address = "other"  # type: ignore[misc]

    def test_every_template_is_registered(self) -> None:
        assert set(ACTION_TEMPLATES) == {GetCreatingTokenAccountFee, CreateTokenAccount}

    @pytest.mark.asyncio
    async def test_perform_fee(self, action: Action) -> None:
        assert await GetCreatingTokenAccountFee().perform(action) == Success(MIN_BALANCE)

    @pytest.mark.asyncio
    async def test_perform_create(self, action: Action, payer: Keypair, mint: Pubkey) -> None:
        outcome = await CreateTokenAccount(str(mint), payer).perform(action)
        assert isinstance(outcome.value, CreateTokenAccountResult)

    @pytest.mark.asyncio
    async def test_run_matches_perform(self, action: Action) -> None:
        template = GetCreatingTokenAccountFee()
        assert await action.run(template) == await template.perform(action)


class TestExecutor:
    @pytest.mark.asyncio
    async def test_heterogeneous_batch(
        self, action: Action, connection: MagicMock, payer: Keypair, mint: Pubkey
    ) -> None:
        outcomes = await execute_all(
            action,
            [
                GetCreatingTokenAccountFee(),
                CreateTokenAccount(str(mint), payer),
                CreateTokenAccount("not a mint", payer),
            ],
        )

        assert len(outcomes) == 3
        assert outcomes[0] == Success(MIN_BALANCE)
        assert isinstance(outcomes[1].value, CreateTokenAccountResult)
        assert isinstance(outcomes[2], Failure)
        assert isinstance(outcomes[2].error, ValidationError)
        assert call_counts(connection) == (2, 3, 1)

    @pytest.mark.asyncio
    async def test_run_all(self, action: Action) -> None:
        outcomes = await action.run_all([GetCreatingTokenAccountFee(), GetCreatingTokenAccountFee()])
        assert [o.unwrap() for o in outcomes] == [MIN_BALANCE, MIN_BALANCE]

    @pytest.mark.asyncio
    async def test_unknown_template(self, action: Action) -> None:
        with pytest.raises(TypeError, match="CloseTokenAccount"):
            await execute(action, CloseTokenAccount("x"))  # type: ignore[arg-type]

    @pytest.mark.asyncio
    async def test_unknown_template_in_batch_runs_nothing(self, action: Action, connection: MagicMock) -> None:
        with pytest.raises(TypeError):
            await execute_all(action, [GetCreatingTokenAccountFee(), CloseTokenAccount("x")])  # type: ignore[list-item]
        assert call_counts(connection) == (0, 0, 0)
