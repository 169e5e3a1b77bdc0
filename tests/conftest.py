"""Shared fixtures: an AsyncClient double backed by AsyncMock."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from solana.rpc.async_api import AsyncClient
from solders.hash import Hash
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.transaction import Transaction

from solana_actions_py import Action

MIN_BALANCE = 2039280


def _submit(txn: bytes, opts=None) -> SimpleNamespace:
    # A real node reports the fee payer's signature as the transaction id.
    return SimpleNamespace(value=Transaction.from_bytes(txn).signatures[0])


@pytest.fixture
def blockhash() -> Hash:
    return Hash.new_unique()


@pytest.fixture
def connection(blockhash: Hash) -> MagicMock:
    conn = MagicMock(spec=AsyncClient)
    conn.get_latest_blockhash = AsyncMock(
        return_value=SimpleNamespace(
            value=SimpleNamespace(blockhash=blockhash, last_valid_block_height=1000)
        )
    )
    conn.get_minimum_balance_for_rent_exemption = AsyncMock(
        return_value=SimpleNamespace(value=MIN_BALANCE)
    )
    conn.send_raw_transaction = AsyncMock(side_effect=_submit)
    conn.close = AsyncMock()
    return conn


@pytest.fixture
def action(connection: MagicMock) -> Action:
    return Action(connection)


@pytest.fixture
def payer() -> Keypair:
    return Keypair()


@pytest.fixture
def mint() -> Pubkey:
    return Pubkey.new_unique()


def call_counts(conn: MagicMock) -> tuple[int, int, int]:
    return (
        conn.get_latest_blockhash.await_count,
        conn.get_minimum_balance_for_rent_exemption.await_count,
        conn.send_raw_transaction.await_count,
    )


def sent_transaction(conn: MagicMock) -> Transaction:
    payload = conn.send_raw_transaction.await_args.args[0]
    return Transaction.from_bytes(payload)
