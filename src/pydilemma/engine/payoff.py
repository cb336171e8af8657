"""Payoff matrix for a completed match."""

from __future__ import annotations

from typing import NamedTuple

from pydilemma.config import DEFAULT_RULES, GameRules
from pydilemma.models import Player, Vote


class Payoff(NamedTuple):
    """Net deltas relative to each player's escrowed stake.

    ``player_one + player_two + pot == 0`` for every vote pair.
    """

    player_one: int
    player_two: int
    pot: int


def _share(pot: int, permille: int) -> int:
    return pot * permille // 1000


def compute_payoff(
    player_one: Player,
    player_two: Player,
    pot: int,
    *,
    rules: GameRules = DEFAULT_RULES,
) -> Payoff:
    """Split the stakes and a slice of the pot according to both votes.

    Mutual defection forfeits both stakes to the pot. Mutual cooperation
    returns both stakes with a 1% pot dividend each. A lone defector takes
    the cooperator's stake plus a 1.5% pot bonus.
    """

    pot = max(0, pot)
    stake_one = player_one.stake
    stake_two = player_two.stake

    if player_one.vote == Vote.DEFECT and player_two.vote == Vote.DEFECT:
        return Payoff(-stake_one, -stake_two, stake_one + stake_two)

    if player_one.vote == Vote.COOPERATE and player_two.vote == Vote.COOPERATE:
        dividend = _share(pot, rules.cooperate_dividend_permille)
        return Payoff(dividend, dividend, -2 * dividend)

    bonus = _share(pot, rules.defect_bonus_permille)
    if player_one.vote == Vote.COOPERATE:
        return Payoff(-stake_one, stake_one + bonus, -bonus)
    return Payoff(stake_two + bonus, -stake_two, -bonus)
