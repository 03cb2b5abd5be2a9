"""
Content and AI-search recommendations for a keyword.
The copy here is fixed template text, chosen by the first matching rule.
"""
from .models import ContentSuggestion
from .rules import FIRST_TIMER_TERMS, Rule, contains_any, first_match

CONTENT_SUGGESTION_RULES = (
    Rule(
        "first_timer",
        contains_any(*FIRST_TIMER_TERMS),
        ContentSuggestion(
            title="Complete First-Timer's Hockey Guide",
            format="FAQ-style guide with arena tips and terminology",
            cta="Buy Official Tickets",
        ),
    ),
    Rule(
        "parking",
        contains_any("parking"),
        ContentSuggestion(
            title="Ultimate Arena Parking Guide",
            format="Interactive map with pricing and walking times",
            cta="Reserve Parking & Tickets",
        ),
    ),
    Rule(
        "seating",
        contains_any("seating"),
        ContentSuggestion(
            title="Interactive Arena Seating Guide",
            format="Visual seating chart with ice view photos",
            cta="Find Your Perfect Seats",
        ),
    ),
)

DEFAULT_CONTENT_SUGGESTION = ContentSuggestion(
    title="Comprehensive Fan Guide",
    format="Detailed FAQ with local tips",
    cta="Get Tickets",
)

LLM_STRATEGY_RULES = (
    Rule(
        "conversational",
        contains_any(*FIRST_TIMER_TERMS),
        "Create conversational Q&A content optimized for voice search and AI assistants",
    ),
    Rule(
        "local",
        contains_any("parking", "seating"),
        "Use structured data and local context for location-based AI search",
    ),
)

DEFAULT_LLM_STRATEGY = "Optimize with natural language and hockey-specific terminology for AI search"


def get_content_suggestion(keyword: str) -> ContentSuggestion:
    """Pick the content piece to build for a keyword."""
    suggestion = first_match(CONTENT_SUGGESTION_RULES, keyword, default=DEFAULT_CONTENT_SUGGESTION)
    # Copy so callers can't mutate the shared template
    return suggestion.model_copy()


def get_llm_strategy(keyword: str) -> str:
    """Guidance for getting the content surfaced by AI assistants and voice search."""
    return first_match(LLM_STRATEGY_RULES, keyword, default=DEFAULT_LLM_STRATEGY)
