"""Collision helpers for the game server."""

from __future__ import annotations

from typing import List, NamedTuple, Sequence

from .snake import Snake
from . import constants, utils


class CollisionOutcome(NamedTuple):
    """A resolved head-to-head collision."""

    winner: Snake
    loser: Snake
    transfer: int


def detect_head_collisions(snakes: Sequence[Snake]) -> List[CollisionOutcome]:
    """Return the outcome of every pair of snakes whose heads overlap.

    The scan only reads the snakes. Each overlapping pair is reported once and
    the snake that comes first in ``snakes`` wins it.
    """

    # TODO: the earlier snake always wins a mutual hit; switch to a fairness
    # rule such as "longer snake wins" once one is agreed on.
    outcomes: List[CollisionOutcome] = []
    for index, winner in enumerate(snakes):
        for loser in snakes[index + 1:]:
            if utils.within(winner.head, loser.head, constants.SEGMENT_SIZE):
                transfer = max(0, loser.length - constants.MINIMUM_LENGTH)
                outcomes.append(CollisionOutcome(winner, loser, transfer))
    return outcomes


def apply_collisions(outcomes: Sequence[CollisionOutcome]) -> None:
    """Apply the length transfers and resets of ``outcomes``.

    A snake that lost any collision ends the tick at the minimum length, even
    if it also won another one.
    """

    for outcome in outcomes:
        outcome.winner.length += outcome.transfer
    for outcome in outcomes:
        outcome.loser.shrink_to_minimum()
