"""
Keyword data sources.

Competitors, team rank and search volume all come from a `KeywordDataSource`.
Only a simulated source exists today; a source backed by a real SERP or
keyword-volume API can replace it without touching scoring or classification.
"""
import logging
import random
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from . import config
from .rules import FIRST_TIMER_TERMS, TICKET_TERMS, Rule, contains_any, first_match

logger = logging.getLogger(__name__)

# Ordered (rule -> half-open [low, high) range) for simulated monthly searches
VOLUME_RULES: Tuple[Rule, ...] = (
    Rule("tickets", contains_any(*TICKET_TERMS), (200, 1000)),
    Rule("first_timer", contains_any(*FIRST_TIMER_TERMS), (150, 550)),
    Rule("parking", contains_any("parking"), (100, 400)),
)
DEFAULT_VOLUME_RANGE = (50, 250)

COMPETITOR_RULES: Tuple[Rule, ...] = (
    Rule("tickets", contains_any("tickets"), ("stubhub.com", "ticketmaster.com", "seatgeek.com")),
    Rule("parking", contains_any("parking"), ("spothero.com", "parkwhiz.com", "yelp.com")),
    Rule("first_timer", contains_any("first time"), ("reddit.com", "tripadvisor.com", "hockeyforum.com")),
)
DEFAULT_COMPETITORS = ("reddit.com", "yelp.com", "hockeydb.com")


class KeywordDataSource(ABC):
    """Where per-keyword ranking, volume and competitor data comes from."""

    name = "base"
    is_real_data = False
    cost_per_keyword = 0

    @abstractmethod
    def get_competitors(self, keyword: str) -> List[str]:
        """Domains ranking for the keyword, best first."""

    @abstractmethod
    def get_team_rank(self, keyword: str) -> Optional[int]:
        """Team's position for the keyword, or None when it doesn't rank."""

    @abstractmethod
    def get_search_volume(self, keyword: str) -> int:
        """Monthly search volume estimate."""


class SimulatedDataSource(KeywordDataSource):
    """
    Stand-in data source that makes numbers up.

    Competitors are a fixed lookup by keyword substring. Rank is "not found"
    with probability `rank_not_found_probability`, otherwise uniform in
    [rank_min, rank_max]. Volume is uniform in a keyword-dependent range.
    Pass a seeded `random.Random` to get repeatable output.
    """

    name = "simulated"
    is_real_data = False
    cost_per_keyword = 0

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        rank_not_found_probability: Optional[float] = None,
        rank_min: Optional[int] = None,
        rank_max: Optional[int] = None,
        volume_rules: Sequence[Rule] = VOLUME_RULES,
        default_volume_range: Tuple[int, int] = DEFAULT_VOLUME_RANGE,
    ):
        self.rng = rng or random.Random()
        self.rank_not_found_probability = (
            config.RANK_NOT_FOUND_PROBABILITY if rank_not_found_probability is None
            else rank_not_found_probability
        )
        self.rank_min = config.RANK_MIN if rank_min is None else rank_min
        self.rank_max = config.RANK_MAX if rank_max is None else rank_max
        if not 0.0 <= self.rank_not_found_probability <= 1.0:
            raise ValueError(
                f"rank_not_found_probability must be between 0 and 1, got {self.rank_not_found_probability}"
            )
        if self.rank_min > self.rank_max:
            raise ValueError(f"rank_min ({self.rank_min}) is greater than rank_max ({self.rank_max})")
        self.volume_rules = tuple(volume_rules)
        self.default_volume_range = default_volume_range
        logger.debug(
            f"SimulatedDataSource ready: not-found probability {self.rank_not_found_probability}, "
            f"rank range {self.rank_min}-{self.rank_max}"
        )

    def get_competitors(self, keyword: str) -> List[str]:
        return list(first_match(COMPETITOR_RULES, keyword, default=DEFAULT_COMPETITORS))

    def get_team_rank(self, keyword: str) -> Optional[int]:
        if self.rng.random() < self.rank_not_found_probability:
            return None
        return self.rng.randint(self.rank_min, self.rank_max)

    def get_search_volume(self, keyword: str) -> int:
        low, high = first_match(self.volume_rules, keyword, default=self.default_volume_range)
        return self.rng.randrange(low, high)
