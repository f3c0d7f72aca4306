from enum import Enum
from typing import Optional, Union


class Round(str, Enum):
    RAPID_FIRE = "Rapid Fire"
    CODING_CASCADE = "Coding Cascade"
    HARDCORE_DSA = "Hardcore DSA"


ROUND_BASE_POINTS = {
    Round.RAPID_FIRE: 10,
    Round.CODING_CASCADE: 25,
    Round.HARDCORE_DSA: 100,
}

# Fixed values attached to every uploaded question
AVG_TIME_SECONDS = 180
SEQUENCE_ORDER = 0


def base_points(round_name: Optional[Union[Round, str]]) -> int:
    """Score tier of a round; unknown or missing rounds are worth nothing."""
    try:
        return ROUND_BASE_POINTS[Round(round_name)]
    except ValueError:
        return 0


def round_label(round_name: Round) -> str:
    return f"{round_name.value} ({ROUND_BASE_POINTS[round_name]} pts)"
