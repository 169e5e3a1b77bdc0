# solana_actions_py/utils/transaction.py

from typing import Sequence

from solders.hash import Hash
from solders.instruction import Instruction
from solders.keypair import Keypair
from solders.signature import Signature

from ..logging import get_logger
from ..types import TransactionDraft
from .connection import ActionConnection

logger = get_logger(__name__)


def build_transaction_draft(
    instructions: Sequence[Instruction],
    recent_blockhash: Hash,
    signers: Sequence[Keypair],
) -> TransactionDraft:
    return TransactionDraft(
        instructions=tuple(instructions),
        recent_blockhash=recent_blockhash,
        signers=tuple(signers),
    )


async def send_transaction_draft(api: ActionConnection, draft: TransactionDraft) -> Signature:
    """
    Signs the draft with all of its signers and submits it once.

    Args:
        api (ActionConnection): Connection used for submission.
        draft (TransactionDraft): Instructions, blockhash and signers (fee payer first).

    Returns:
        Signature: The transaction signature reported by the node.

    Raises:
        SigningError: If any signer fails to sign.
        UpstreamRPCError: If submission fails.
    """
    payload = draft.serialize()
    logger.debug(
        "transaction.submit",
        instructions=len(draft.instructions),
        signers=[str(pk) for pk in draft.signer_pubkeys],
        size=len(payload),
    )
    signature = await api.send_raw_transaction(payload)

    # the transaction is already on its way; a failing hook must not hide the signature
    if api.opts.post_send_tx_callback:
        try:
            api.opts.post_send_tx_callback(str(signature))
        except Exception as exc:  # noqa: BLE001
            logger.warning("transaction.post_send_callback_failed", signature=str(signature), error=repr(exc))

    return signature
