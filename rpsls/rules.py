from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from rpsls.errors import InvalidHandSetError

# Sentinel produced for unreadable requests; reserved so it never matches a real hand.
UNKNOWN_HAND = "UNKNOWN"

RuleTable = Mapping[str, frozenset[str]]


def validate_accepted_hands(accepted_hands: Sequence[str]) -> None:
    if not accepted_hands:
        raise InvalidHandSetError("at least one accepted hand is required")
    if len(accepted_hands) % 2 == 0:
        raise InvalidHandSetError(
            f"accepted hands must have an odd length to form a balanced rule table, got {len(accepted_hands)}"
        )
    seen: set[str] = set()
    for hand in accepted_hands:
        if not hand or not hand.strip():
            raise InvalidHandSetError("hand names must not be blank")
        if hand == UNKNOWN_HAND:
            raise InvalidHandSetError(f"{UNKNOWN_HAND} is reserved and cannot be an accepted hand")
        if hand in seen:
            raise InvalidHandSetError(f"duplicate accepted hand: {hand}")
        seen.add(hand)


def build_rules(accepted_hands: Sequence[str]) -> RuleTable:
    """Map each hand to the hands it defeats.

    The hand at index ``i`` defeats the hands at circular offsets
    ``i + 2, i + 4, ..., i + 2k`` where ``k = (n - 1) / 2``. For odd ``n`` every
    hand beats exactly ``k`` others and any two distinct hands have exactly one
    winner between them. ``ROCK, PAPER, SCISSORS`` gives the classic game and
    ``ROCK, PAPER, SCISSORS, SPOCK, LIZARD`` gives RPSLS.
    """
    validate_accepted_hands(accepted_hands)

    n = len(accepted_hands)
    k = (n - 1) // 2
    rules: dict[str, frozenset[str]] = {}
    for i, hand in enumerate(accepted_hands):
        rules[hand] = frozenset(accepted_hands[(i + 2 * j) % n] for j in range(1, k + 1))
    return MappingProxyType(rules)
