"""Recoverable errors surfaced to the host as the result of an entry point."""

from __future__ import annotations


class DilemmaError(Exception):
    """Base class; ``code`` is stable and safe to show to callers."""

    code = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidVote(DilemmaError):
    code = "invalid_vote"

    def __init__(self, message: str = "Vote must be either 1 (cooperate) or 2 (defect)."):
        super().__init__(message)


class MatchStillWaiting(DilemmaError):
    code = "match_still_waiting"

    def __init__(self, match_id: str):
        super().__init__("Your match is still waiting for other player.")
        self.match_id = match_id


class MatchNotFound(DilemmaError):
    code = "match_not_found"

    def __init__(self, match_id: str):
        super().__init__("The match does not exist.")
        self.match_id = match_id


class ZeroBalance(DilemmaError):
    code = "zero_balance"

    def __init__(self, sender_hex: str):
        super().__init__("Sender has no balance to cash out.")
        self.sender_hex = sender_hex
