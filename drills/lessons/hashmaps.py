"""Dictionary exercises: filling a fruit basket and building a scores table."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_NEW_FRUIT_AMOUNT = 1
_MAX_GOALS = 255


class Fruit(enum.Enum):
    """Kinds of fruit that can go in the basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add every kind of fruit not yet in the basket, leaving existing kinds untouched."""
    for fruit in Fruit:
        basket.setdefault(fruit, _NEW_FRUIT_AMOUNT)


@dataclass
class Team:
    """Goals a team scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0


def _goals(field: str) -> int:
    if not field or any(c not in "0123456789" for c in field.removeprefix("+")):
        raise ValueError(f"invalid goal count: {field!r}")
    goals = int(field)
    if goals > _MAX_GOALS:
        raise ValueError(f"goal count out of range: {field!r}")
    return goals


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals per team from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"expected four fields in {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score, team_2_score = _goals(fields[2]), _goals(fields[3])

        team_1 = scores.setdefault(team_1_name, Team())
        team_1.goals_scored += team_1_score
        team_1.goals_conceded += team_2_score

        team_2 = scores.setdefault(team_2_name, Team())
        team_2.goals_scored += team_2_score
        team_2.goals_conceded += team_1_score
    return scores