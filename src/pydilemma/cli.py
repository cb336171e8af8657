"""Command-line host that runs one entry point against a JSON state file."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from pydilemma.config import load_rules
from pydilemma.contract import CallParameters, PrisonersDilemma, RecordingHost, dispatch
from pydilemma.errors import DilemmaError
from pydilemma.state_file import StateFile


def _hex_bytes(value: str) -> bytes:
    try:
        raw = bytes.fromhex(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not a hex string") from None
    if not raw:
        raise argparse.ArgumentTypeError("identifier must not be empty")
    return raw


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the staked prisoner's dilemma locally")
    parser.add_argument(
        "--state",
        type=Path,
        default=Path("pydilemma-state.json"),
        help="Path to the JSON state file",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init", help="Write a fresh state file (overwrites)")

    def caller(name: str, help_text: str) -> argparse.ArgumentParser:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--sender", type=_hex_bytes, required=True, help="Caller identity (hex)")
        sub.add_argument("--round", dest="round_id", type=_hex_bytes, default=b"\x00", help="Round id (hex)")
        sub.add_argument("--tx", dest="transaction_id", type=_hex_bytes, default=b"\x00", help="Transaction id (hex)")
        sub.add_argument("--amount", type=int, default=0, help="Declared stake")
        return sub

    play = caller("play", "Submit a stake and a vote")
    play.add_argument("vote", help="1 to cooperate, 2 to defect")

    result = caller("result", "Show a completed match")
    result.add_argument("match_id")

    caller("balance", "Show the caller's balance")
    caller("cash-out", "Withdraw the caller's balance")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    rules = load_rules()
    host = RecordingHost()

    if args.command == "init":
        contract = PrisonersDilemma.init(host, rules)
        StateFile(contract.state).save(args.state)
        print(f"Wrote fresh state to {args.state}")
        return 0

    if args.state.exists():
        state = StateFile.load(args.state, rules).state
        contract = PrisonersDilemma(state, host)
    else:
        contract = PrisonersDilemma.init(host, rules)

    try:
        params = CallParameters(
            sender=args.sender,
            round_id=args.round_id,
            transaction_id=args.transaction_id,
            amount=args.amount,
        )
    except ValidationError as exc:
        problems = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in exc.errors())
        print(f"error: invalid_parameters: {problems}", file=sys.stderr)
        return 1

    entry_args: list[object] = []
    if args.command == "play":
        entry_args.append(args.vote)
    elif args.command == "result":
        entry_args.append(args.match_id)
    entry = {"balance": "get_balance", "cash-out": "cash_out"}.get(args.command, args.command)

    try:
        dispatch(contract, entry, params, *entry_args)
    except DilemmaError as exc:
        print(f"error: {exc.code}: {exc.message}", file=sys.stderr)
        return 1

    StateFile(contract.state).save(args.state)
    for line in host.logs:
        print(line)
    for destination, amount in host.transfers:
        print(json.dumps({"transfer": {"destination": destination.hex(), "amount": amount}}))
    return 0


if __name__ == "__main__":
    sys.exit(main())
