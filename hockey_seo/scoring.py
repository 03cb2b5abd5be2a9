"""
Opportunity scoring and gap classification for hockey keywords.
"""
from typing import Optional, Sequence, Tuple

from .models import GapType
from .rules import (
    FIRST_TIMER_TERMS, TICKET_TERMS, Predicate, Rule,
    contains_any, first_match, has_reseller
)

BASE_SCORE = 5
MIN_SCORE = 3
MAX_SCORE = 10

# (predicate, points); every matching bonus is added
KEYWORD_BONUSES: Tuple[Tuple[Predicate, int], ...] = (
    (contains_any(*FIRST_TIMER_TERMS), 3),
    (contains_any("parking"), 2),
    (contains_any(*TICKET_TERMS), 2),
    (contains_any("seating"), 1),
)
RESELLER_BONUS = 1

GAP_TYPE_RULES = (
    Rule("first_timer", contains_any(*FIRST_TIMER_TERMS), GapType.FIRST_TIMER),
    Rule("parking", contains_any("parking"), GapType.ARENA_INFORMATION),
    Rule("reseller", has_reseller, GapType.TICKET_RESELLER),
    Rule("venue", contains_any("seating", "arena"), GapType.VENUE_EXPERIENCE),
)


def rank_adjustment(team_rank: Optional[int]) -> int:
    """Points for how visible the team already is; `None` means not ranking at all."""
    if team_rank is None:
        return 3
    if team_rank > 10:
        return 2
    if team_rank > 5:
        return 1
    if team_rank <= 3:
        return -1
    return 0


def calculate_opportunity_score(keyword: str, team_rank: Optional[int], competitors: Sequence[str]) -> int:
    """
    Score a keyword's content opportunity on a 3-10 scale.

    Args:
        keyword: Raw keyword text (matching is case-sensitive)
        team_rank: Team's position for the keyword, or None if not found
        competitors: Domains currently ranking for the keyword

    Returns:
        int: Clamped opportunity score
    """
    score = BASE_SCORE
    for matches, points in KEYWORD_BONUSES:
        if matches(keyword, competitors):
            score += points

    score += rank_adjustment(team_rank)

    if has_reseller(keyword, competitors):
        score += RESELLER_BONUS

    return min(max(score, MIN_SCORE), MAX_SCORE)


def classify_gap(keyword: str, competitors: Sequence[str]) -> GapType:
    return first_match(GAP_TYPE_RULES, keyword, competitors, default=GapType.GENERAL)
