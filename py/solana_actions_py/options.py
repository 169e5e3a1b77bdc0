# solana_actions_py/options.py

from dataclasses import dataclass
from typing import Callable, Optional

from solana.rpc.commitment import Commitment, Confirmed
from solana.rpc.models import TxOpts
from solders.pubkey import Pubkey
from spl.token.constants import TOKEN_PROGRAM_ID

# ----------------------------
# Options for the Action client
# ----------------------------

@dataclass
class ActionOptions:
    commitment: Commitment = Confirmed
    skip_preflight: bool = False
    preflight_commitment: Commitment = Confirmed
    max_retries: Optional[int] = None  # forwarded to the node, never retried here
    token_program_id: Pubkey = TOKEN_PROGRAM_ID
    timeout: float = 10  # only used by Action.connect
    post_send_tx_callback: Optional[Callable[[str], None]] = None

    def tx_opts(self) -> TxOpts:
        return TxOpts(
            skip_preflight=self.skip_preflight,
            preflight_commitment=self.preflight_commitment,
            max_retries=self.max_retries,
        )
