"""Entry points invoked by the host, one call per incoming request.

Each call runs to completion against the contract's own ``GameState``; the
host supplies the caller identity, round and transaction ids, the declared
stake, a log sink and a value-transfer primitive.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Protocol, Tuple, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from pydilemma.config import GameRules, load_rules
from pydilemma.engine import AdmissionController, GameState, LookupStatus, Matchmaker, derive_seed, lookup
from pydilemma.errors import InvalidVote, MatchNotFound, MatchStillWaiting, ZeroBalance
from pydilemma.models import Player, Vote
from pydilemma.schemas import MatchRecord, TransferRecord, WaitingRecord


logger = logging.getLogger(__name__)

PlayRecord = Union[WaitingRecord, MatchRecord]


class CallParameters(BaseModel):
    """Per-call values supplied by the host."""

    sender: bytes = Field(..., min_length=1)
    round_id: bytes = Field(..., min_length=1)
    transaction_id: bytes = Field(..., min_length=1)
    amount: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)


class Host(Protocol):
    def log(self, message: str) -> None: ...

    def transfer(self, destination: bytes, amount: int) -> None: ...


@dataclass
class RecordingHost:
    """Host that keeps emitted log lines and transfer requests in memory."""

    logs: List[str] = field(default_factory=list)
    transfers: List[Tuple[bytes, int]] = field(default_factory=list)

    def log(self, message: str) -> None:
        self.logs.append(message)

    def transfer(self, destination: bytes, amount: int) -> None:
        self.transfers.append((destination, amount))


class EntryPoints(Protocol):
    def play(self, params: CallParameters, vote: Any) -> PlayRecord: ...

    def result(self, params: CallParameters, match_id: str) -> MatchRecord: ...

    def get_balance(self, params: CallParameters) -> str: ...

    def cash_out(self, params: CallParameters) -> TransferRecord: ...


def decode_vote(raw: Any) -> Vote:
    """Decode a vote argument, rejecting anything but 1 or 2."""

    if isinstance(raw, bool):
        raise InvalidVote()
    if isinstance(raw, str):
        text = raw.strip()
        if not (text.isascii() and text.isdigit()):
            raise InvalidVote()
        raw = int(text)
    if not isinstance(raw, int):
        raise InvalidVote()
    try:
        return Vote(raw)
    except ValueError:
        raise InvalidVote() from None


class PrisonersDilemma:
    def __init__(self, state: GameState, host: Host):
        self.state = state
        self.host = host

    @classmethod
    def init(cls, host: Host, rules: GameRules | None = None) -> "PrisonersDilemma":
        rules = rules or load_rules()
        state = GameState.fresh(rules)
        if rules.seed_account is not None and rules.seed_balance:
            logger.info(
                "Seeded %s with balance %d",
                rules.seed_account.hex(),
                rules.seed_balance,
            )
        return cls(state, host)

    def _emit(self, record: BaseModel) -> None:
        self.host.log(record.model_dump_json())

    def play(self, params: CallParameters, vote: Any) -> PlayRecord:
        player = Player(
            sender=params.sender,
            transaction_id=params.transaction_id,
            stake=params.amount,
            vote=decode_vote(vote),
        )

        seed = derive_seed(params.round_id, params.transaction_id)
        admission = AdmissionController(self.state).admit(player, seed)
        if not admission.ready:
            logger.info("Parked %s as match %s", player.sender_hex, admission.match_id)
            record: PlayRecord = WaitingRecord(match_id=admission.match_id)
            self._emit(record)
            return record

        outcome = Matchmaker(self.state).match_or_enqueue(player)
        if outcome.waiting:
            record = WaitingRecord(match_id=outcome.match.match_id)
        else:
            record = MatchRecord.from_match(outcome.match)
        self._emit(record)
        return record

    def result(self, params: CallParameters, match_id: str) -> MatchRecord:
        match_id = str(match_id)
        found = lookup(self.state, match_id)
        if found.status is LookupStatus.STILL_WAITING:
            raise MatchStillWaiting(match_id)
        if found.status is LookupStatus.NOT_FOUND:
            raise MatchNotFound(match_id)
        record = MatchRecord.from_match(found.match)
        self._emit(record)
        return record

    def get_balance(self, params: CallParameters) -> str:
        balance = str(self.state.ledger.balance_of(params.sender))
        self.host.log(balance)
        return balance

    def cash_out(self, params: CallParameters) -> TransferRecord:
        balance = self.state.ledger.balance_of(params.sender)
        if balance == 0:
            raise ZeroBalance(params.sender.hex())

        # The host must commit the transfer and the zeroed balance together.
        self.host.transfer(params.sender, balance)
        self.state.ledger.zero_out(params.sender)

        record = TransferRecord(destination=params.sender.hex(), amount=balance)
        logger.info("Cashed out %d to %s", balance, record.destination)
        self._emit(record)
        return record


ENTRY_POINTS: Tuple[str, ...] = ("play", "result", "get_balance", "cash_out")


def dispatch(contract: EntryPoints, entry: str, params: CallParameters, *args: Any) -> Any:
    """Route a host call by entry-point name."""

    if entry not in ENTRY_POINTS:
        raise KeyError(f"Unknown entry point {entry!r}")
    return getattr(contract, entry)(params, *args)
