"""
Tests for the simulated keyword data source.
"""

import pytest
import random
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from hockey_seo.data_source import KeywordDataSource, SimulatedDataSource

# --- Fixtures ---

@pytest.fixture
def data_source():
    """Simulated data source with a fixed seed."""
    return SimulatedDataSource(rng=random.Random(1234))

# --- Competitors ---

@pytest.mark.parametrize("keyword, expected", [
    ("cheap tickets near arena", ["stubhub.com", "ticketmaster.com", "seatgeek.com"]),
    ("tickets parking", ["stubhub.com", "ticketmaster.com", "seatgeek.com"]),
    ("arena parking", ["spothero.com", "parkwhiz.com", "yelp.com"]),
    ("first time hockey", ["reddit.com", "tripadvisor.com", "hockeyforum.com"]),
    ("what to expect", ["reddit.com", "yelp.com", "hockeydb.com"]),
    ("cheap seats", ["reddit.com", "yelp.com", "hockeydb.com"]),
])
def test_get_competitors(data_source, keyword, expected):
    assert data_source.get_competitors(keyword) == expected

def test_get_competitors_returns_fresh_list(data_source):
    competitors = data_source.get_competitors("hockey")
    competitors.append("example.com")
    assert data_source.get_competitors("hockey") == ["reddit.com", "yelp.com", "hockeydb.com"]

# --- Team rank ---

def test_team_rank_bounds(data_source):
    for _ in range(500):
        rank = data_source.get_team_rank("hockey")
        assert rank is None or 1 <= rank <= 10

def test_team_rank_not_found_rate(data_source):
    draws = [data_source.get_team_rank("hockey") for _ in range(4000)]
    not_found = sum(1 for rank in draws if rank is None) / len(draws)
    assert 0.35 < not_found < 0.45

def test_team_rank_always_found():
    source = SimulatedDataSource(rng=random.Random(7), rank_not_found_probability=0.0)
    assert all(source.get_team_rank("hockey") is not None for _ in range(200))

def test_team_rank_never_found():
    source = SimulatedDataSource(rng=random.Random(7), rank_not_found_probability=1.0)
    assert all(source.get_team_rank("hockey") is None for _ in range(200))

def test_custom_rank_range():
    source = SimulatedDataSource(rng=random.Random(7), rank_not_found_probability=0.0, rank_min=11, rank_max=20)
    assert all(11 <= source.get_team_rank("hockey") <= 20 for _ in range(200))

def test_invalid_settings():
    with pytest.raises(ValueError):
        SimulatedDataSource(rank_not_found_probability=1.5)
    with pytest.raises(ValueError):
        SimulatedDataSource(rank_min=10, rank_max=1)

# --- Search volume ---

@pytest.mark.parametrize("keyword, low, high", [
    ("cheap tickets", 200, 1000),
    ("cheap seats", 200, 1000),
    ("first time tickets", 200, 1000),
    ("first time at a game", 150, 550),
    ("what to expect parking", 150, 550),
    ("arena parking", 100, 400),
    ("hockey", 50, 250),
])
def test_search_volume_ranges(data_source, keyword, low, high):
    volumes = [data_source.get_search_volume(keyword) for _ in range(300)]
    assert all(isinstance(v, int) for v in volumes)
    assert all(low <= v < high for v in volumes)

def test_seeded_sources_repeat():
    first = SimulatedDataSource(rng=random.Random(99))
    second = SimulatedDataSource(rng=random.Random(99))
    assert [first.get_search_volume("hockey") for _ in range(10)] == \
        [second.get_search_volume("hockey") for _ in range(10)]

def test_simulated_source_flags(data_source):
    assert isinstance(data_source, KeywordDataSource)
    assert data_source.is_real_data is False
    assert data_source.cost_per_keyword == 0
    assert data_source.name == "simulated"
