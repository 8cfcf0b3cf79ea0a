# performance/services/scoring.py
"""
Rating helpers used by the evaluation workflow. Kept small & testable.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional


def round_half_up(v) -> int:
    return int(Decimal(v).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def clamp_to_pct(v: Optional[float], lo: int = 0, hi: int = 100) -> int:
    if v is None:
        return 0
    return int(max(lo, min(hi, round_half_up(v))))


def aggregate_goal_rating(tasks: Iterable) -> int:
    """
    Mean of the defined task ratings, rounded half-up.
    Tasks without a rating are excluded; no rated task means 0.
    """
    ratings = [t.final_rating for t in tasks if t.final_rating is not None]
    if not ratings:
        return 0
    return clamp_to_pct(Decimal(sum(ratings)) / len(ratings))


def display_goal_rating(goal) -> int:
    """Stored goal rating when set, otherwise what the tasks add up to."""
    if goal.final_rating is not None:
        return goal.final_rating
    return aggregate_goal_rating(goal.tasks)
