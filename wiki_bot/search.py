"""
Search matching for the `/wiki` autocomplete.

Pure functions over the page index: substring match on title or tag,
capped at Discord's choice limit, with placeholder choices for short
queries and empty results.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from .pages import RESERVED_PATHS, WikiPage

MIN_QUERY_LENGTH = 3
MAX_CANDIDATES = 25
MAX_CHOICE_NAME_LENGTH = 100

START_TYPING = "start_typing"
NO_RESULTS = "no_results"
SENTINEL_VALUES = RESERVED_PATHS


@dataclass(frozen=True)
class Candidate:
    """An autocomplete choice: what the user sees and what gets submitted."""

    name: str
    value: str

    def to_choice(self) -> Dict[str, str]:
        return {"name": self.name[:MAX_CHOICE_NAME_LENGTH], "value": self.value}


START_TYPING_CANDIDATE = Candidate(
    "Start typing to search wiki pages (min 3 characters)", START_TYPING
)
NO_RESULTS_CANDIDATE = Candidate(
    "No wiki pages found. Try a different search.", NO_RESULTS
)


def is_sentinel(value: Optional[str]) -> bool:
    return value in SENTINEL_VALUES


def search_pages(pages: Sequence[WikiPage], raw_query: str) -> List[Candidate]:
    """
    Match a partially typed query against the index.

    Args:
        pages: The wiki index
        raw_query: Whatever the user has typed so far

    Returns:
        Up to MAX_CANDIDATES candidates in index order, or a single
        placeholder candidate when the query is too short or nothing matches
    """
    query = (raw_query or "").strip().lower()
    if len(query) < MIN_QUERY_LENGTH:
        return [START_TYPING_CANDIDATE]

    matches = []
    for page in pages:
        if query in page.lowercase_title or any(query in tag for tag in page.tags):
            matches.append(Candidate(name=page.title, value=page.path))
            if len(matches) == MAX_CANDIDATES:
                break

    return matches or [NO_RESULTS_CANDIDATE]


def find_page(pages: Sequence[WikiPage], path: str) -> Optional[WikiPage]:
    """Exact lookup by path."""
    for page in pages:
        if page.path == path:
            return page
    return None
