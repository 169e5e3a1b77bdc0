# solana_actions_py/utils/connection.py

from solana.rpc.async_api import AsyncClient
from solders.hash import Hash
from solders.signature import Signature

from ..errors import UpstreamRPCError
from ..logging import get_logger
from ..options import ActionOptions

logger = get_logger(__name__)


class ActionConnection:
    """
    Thin wrapper around the solana-py AsyncClient exposing only the three
    calls the actions need. Every failure, including transport timeouts,
    comes back as UpstreamRPCError with the original exception chained.
    """

    def __init__(self, connection: AsyncClient, opts: ActionOptions):
        self.connection = connection
        self.opts = opts

    async def get_latest_blockhash(self) -> Hash:
        try:
            resp = await self.connection.get_latest_blockhash(self.opts.commitment)
            blockhash = resp.value.blockhash
        except Exception as exc:  # noqa: BLE001
            raise _upstream("getLatestBlockhash", exc) from exc
        logger.debug("rpc.latest_blockhash", blockhash=str(blockhash))
        return blockhash

    async def get_minimum_balance_for_rent_exemption(self, data_length: int) -> int:
        """
        Fetches the rent-exempt minimum for an account of the given size.

        Args:
            data_length (int): Account data size in bytes.

        Returns:
            int: Lamports required for rent exemption.
        """
        try:
            resp = await self.connection.get_minimum_balance_for_rent_exemption(
                data_length, self.opts.commitment
            )
            lamports = int(resp.value)
        except Exception as exc:  # noqa: BLE001
            raise _upstream("getMinimumBalanceForRentExemption", exc) from exc
        logger.debug("rpc.minimum_balance", data_length=data_length, lamports=lamports)
        return lamports

    async def send_raw_transaction(self, payload: bytes) -> Signature:
        try:
            resp = await self.connection.send_raw_transaction(payload, opts=self.opts.tx_opts())
            signature = resp.value
        except Exception as exc:  # noqa: BLE001
            raise _upstream("sendTransaction", exc) from exc
        logger.debug("rpc.send_transaction", signature=str(signature))
        return signature


def _upstream(method: str, exc: Exception) -> UpstreamRPCError:
    return UpstreamRPCError(method, str(exc) or type(exc).__name__, cause=exc)
