# solana_actions_py/types.py

from dataclasses import dataclass
from typing import Generic, List, NamedTuple, NoReturn, Sequence, TypeVar, Union

from solders.hash import Hash
from solders.instruction import Instruction
from solders.keypair import Keypair
from solders.message import Message
from solders.pubkey import Pubkey
from solders.transaction import Transaction

from .errors import SigningError, ValidationError

T = TypeVar("T")

# ----------------------------
# Outcomes
# ----------------------------

@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: Exception

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self.error


Outcome = Union[Success[T], Failure]

# ----------------------------
# Results
# ----------------------------

class CreateTokenAccountResult(NamedTuple):
    signature: str
    new_pubkey: str

# ----------------------------
# Addresses
# ----------------------------

def parse_address(value: Union[str, Pubkey], what: str = "address") -> Pubkey:
    """
    Parses a base58 address.

    Args:
        value (Union[str, Pubkey]): The textual address, or an already parsed Pubkey.
        what (str): Label used in the error message, e.g. 'mint address'.

    Returns:
        Pubkey: The parsed public key.

    Raises:
        ValidationError: If the value is not a valid 32 byte base58 address.
    """
    if isinstance(value, Pubkey):
        return value
    if not isinstance(value, str) or not value:
        raise ValidationError(f"invalid {what}: {value!r}", value)
    try:
        return Pubkey.from_string(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"invalid {what}: {value!r}", value) from exc

# ----------------------------
# Transaction draft
# ----------------------------

@dataclass(frozen=True)
class TransactionDraft:
    instructions: Sequence[Instruction]
    recent_blockhash: Hash
    signers: Sequence[Keypair]  # fee payer first

    @property
    def fee_payer(self) -> Pubkey:
        return self.signers[0].pubkey()

    def sign(self) -> Transaction:
        if not self.signers:
            raise SigningError("transaction has no signers")
        # missing signers surface as SignerError from sign()
        tx = Transaction.new_unsigned(self._message())
        try:
            tx.sign(list(self.signers), self.recent_blockhash)
        except Exception as exc:  # noqa: BLE001
            raise SigningError(f"failed to sign transaction: {exc}") from exc
        return tx

    def serialize(self) -> bytes:
        return bytes(self.sign())

    def _message(self) -> Message:
        return Message.new_with_blockhash(list(self.instructions), self.fee_payer, self.recent_blockhash)

    @property
    def signer_pubkeys(self) -> List[Pubkey]:
        return [signer.pubkey() for signer in self.signers]
