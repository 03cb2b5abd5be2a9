"""
Ordered keyword rules.

Gap types, content suggestions and AI-search strategies are all chosen by
walking a list of rules in order and taking the first one whose predicate
matches. Keeping the rules as data makes their precedence explicit.
"""
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

# Predicates receive the raw keyword and the competitor domains for it.
Predicate = Callable[[str, Sequence[str]], bool]

RESELLER_DOMAINS = frozenset({"ticketmaster.com", "stubhub.com", "seatgeek.com"})

FIRST_TIMER_TERMS = ("first time", "what to expect")
TICKET_TERMS = ("tickets", "cheap")


@dataclass(frozen=True)
class Rule:
    name: str
    matches: Predicate
    result: Any


def contains_any(*terms: str) -> Predicate:
    """Case-sensitive substring match against the keyword as provided."""
    def predicate(keyword: str, competitors: Sequence[str] = ()) -> bool:
        return any(term in keyword for term in terms)
    return predicate


def has_reseller(keyword: str, competitors: Sequence[str] = ()) -> bool:
    return any(domain in RESELLER_DOMAINS for domain in competitors)


def first_match(rules: Iterable[Rule], keyword: str, competitors: Sequence[str] = (), default: Any = None) -> Any:
    """Return the result of the first matching rule, or `default`."""
    for rule in rules:
        if rule.matches(keyword, competitors):
            return rule.result
    return default
