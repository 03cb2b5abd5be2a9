"""
Tests for content suggestions and AI-search strategies.
"""

import pytest
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from hockey_seo.models import ContentSuggestion
from hockey_seo.recommendations import (
    DEFAULT_CONTENT_SUGGESTION, DEFAULT_LLM_STRATEGY,
    get_content_suggestion, get_llm_strategy
)

def test_first_timer_suggestion():
    suggestion = get_content_suggestion("what to expect at first hockey game")
    assert isinstance(suggestion, ContentSuggestion)
    assert suggestion.title == "Complete First-Timer's Hockey Guide"
    assert suggestion.format == "FAQ-style guide with arena tips and terminology"
    assert suggestion.cta == "Buy Official Tickets"

def test_parking_suggestion():
    suggestion = get_content_suggestion("arena parking")
    assert suggestion.title == "Ultimate Arena Parking Guide"
    assert suggestion.format == "Interactive map with pricing and walking times"
    assert suggestion.cta == "Reserve Parking & Tickets"

def test_seating_suggestion():
    suggestion = get_content_suggestion("best seating for hockey")
    assert suggestion.title == "Interactive Arena Seating Guide"
    assert suggestion.format == "Visual seating chart with ice view photos"
    assert suggestion.cta == "Find Your Perfect Seats"

def test_default_suggestion():
    suggestion = get_content_suggestion("cheap tickets near arena")
    assert suggestion.title == "Comprehensive Fan Guide"
    assert suggestion.format == "Detailed FAQ with local tips"
    assert suggestion.cta == "Get Tickets"

def test_suggestion_precedence():
    """First-timer beats parking, parking beats seating."""
    assert get_content_suggestion("first time parking").title == "Complete First-Timer's Hockey Guide"
    assert get_content_suggestion("parking and seating").title == "Ultimate Arena Parking Guide"

def test_suggestion_is_a_copy():
    suggestion = get_content_suggestion("hockey")
    suggestion.title = "Changed"
    assert DEFAULT_CONTENT_SUGGESTION.title == "Comprehensive Fan Guide"
    assert get_content_suggestion("hockey").title == "Comprehensive Fan Guide"

@pytest.mark.parametrize("keyword, expected", [
    ("first time at the rink", "Create conversational Q&A content optimized for voice search and AI assistants"),
    ("what to expect parking", "Create conversational Q&A content optimized for voice search and AI assistants"),
    ("arena parking", "Use structured data and local context for location-based AI search"),
    ("seating chart", "Use structured data and local context for location-based AI search"),
    ("cheap tickets", "Optimize with natural language and hockey-specific terminology for AI search"),
])
def test_llm_strategy(keyword, expected):
    assert get_llm_strategy(keyword) == expected

def test_llm_strategy_is_case_sensitive():
    assert get_llm_strategy("First Time") == DEFAULT_LLM_STRATEGY
