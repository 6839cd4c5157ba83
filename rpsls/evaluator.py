from __future__ import annotations

from rpsls.rules import RuleTable
from rpsls.schemas import Outcome, Result


def evaluate(player_hand: str, server_hand: str, rules: RuleTable) -> Outcome:
    """Player hand vs server hand -> outcome. Unknown player hands never reveal the server hand."""
    beaten = rules.get(player_hand)
    if beaten is None:
        return Outcome.unknown()
    if player_hand == server_hand:
        return Outcome(result=Result.DRAW, computer_hand=server_hand)
    if server_hand in beaten:
        return Outcome(result=Result.WIN, computer_hand=server_hand)
    return Outcome(result=Result.LOST, computer_hand=server_hand)
