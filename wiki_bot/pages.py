"""
Wiki page index — fetched once from the wiki's GraphQL API at startup.

The index is a plain list of immutable WikiPage records. Private pages are
dropped and titles/tags are case-folded up front so matching never has to.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

import httpx

logger = logging.getLogger(__name__)

PAGES_QUERY = """
query {
  pages {
    list {
      id
      title
      path
      tags
      isPrivate
    }
  }
}
"""

# Values carried by placeholder autocomplete choices; no page may use them.
RESERVED_PATHS = frozenset({"start_typing", "no_results"})


@dataclass(frozen=True)
class WikiPage:
    """A public wiki page as seen by search."""

    title: str
    path: str
    lowercase_title: str
    tags: Tuple[str, ...] = ()

    @classmethod
    def from_api(cls, raw: Dict) -> "WikiPage":
        title = raw["title"]
        return cls(
            title=title,
            path=raw["path"],
            lowercase_title=title.lower(),
            tags=tuple(tag.lower() for tag in raw.get("tags") or []),
        )


def build_index(raw_pages: List[Dict]) -> List[WikiPage]:
    """
    Turn the raw `pages.list` payload into the search index.

    Private pages are skipped, as are pages whose path collides with a
    reserved placeholder value.
    """
    pages = []
    for raw in raw_pages:
        if raw.get("isPrivate"):
            continue
        if raw.get("path") in RESERVED_PATHS:
            logger.warning(f"Skipping page with reserved path: {raw.get('path')}")
            continue
        pages.append(WikiPage.from_api(raw))
    return pages


def load_wiki_pages(graphql_url: str, timeout: float = 10.0) -> List[WikiPage]:
    """
    Fetch every page from the wiki and build the index.

    Args:
        graphql_url: Wiki GraphQL endpoint
        timeout: Request timeout in seconds

    Returns:
        List of public WikiPage objects, or an empty list on any failure
    """
    try:
        with httpx.Client(timeout=timeout) as client:
            response = client.post(graphql_url, json={"query": PAGES_QUERY})
            response.raise_for_status()
            data = response.json()
        if data.get("errors"):
            logger.error(f"Wiki API error: {data['errors']}")
            return []
        pages = build_index(data["data"]["pages"]["list"])
    except httpx.TimeoutException:
        logger.error("Timeout fetching wiki pages")
        return []
    except httpx.HTTPError as e:
        logger.error(f"Error fetching wiki pages: {e}")
        return []
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        logger.error(f"Malformed wiki pages response: {e}")
        return []

    logger.info(f"Loaded {len(pages)} wiki pages")
    return pages
