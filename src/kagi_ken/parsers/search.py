from bs4 import BeautifulSoup, Tag
from fastmcp.utilities.logging import get_logger

from kagi_ken.errors import KagiParseError
from kagi_ken.models.search import RelatedSearches, SearchRecord, SearchResult

logger = get_logger(__name__)

PRIMARY_RESULT_SELECTOR = ".search-result"
PRIMARY_TITLE_SELECTOR = ".__sri_title_link"

GROUPED_RESULT_SELECTOR = ".sr-group .__srgi"
GROUPED_TITLE_SELECTOR = ".__srgi-title a"

SNIPPET_SELECTOR = ".__sri-desc"
PUBLISHED_SELECTOR = ".__sri-time"

RELATED_SEARCH_SELECTOR = ".related-searches a span"


def extract_results(html: str, limit: int) -> list[SearchRecord]:
    """Extract up to `limit` web results from a Kagi search page.

    Primary results are consumed first, then grouped sub-results while budget remains. Related
    searches do not count towards the limit and, when present, are always the last record.

    Args:
        html: The HTML of a `/html/search` page.
        limit: The maximum number of web results to return.

    Returns:
        The web results in document order, followed by at most one related-searches record.
    """

    try:
        soup = BeautifulSoup(html, "lxml")

        records: list[SearchRecord] = []

        for element in soup.select(PRIMARY_RESULT_SELECTOR):
            if len(records) >= limit:
                break
            if result := extract_result(element, title_selector=PRIMARY_TITLE_SELECTOR):
                records.append(result)

        if len(records) < limit:
            for element in soup.select(GROUPED_RESULT_SELECTOR):
                if len(records) >= limit:
                    break
                if result := extract_result(element, title_selector=GROUPED_TITLE_SELECTOR):
                    records.append(result)

        if related_searches := extract_related_searches(soup):
            records.append(RelatedSearches(list=related_searches))

    except Exception as e:
        msg = "Failed to parse search results - unexpected HTML structure"
        raise KagiParseError(msg) from e

    logger.debug(f"Extracted {len(records)} records from {len(html)} bytes of HTML")

    return records


def extract_result(element: Tag, title_selector: str) -> SearchResult | None:
    """Extract a single web result, or None if the element lacks a title or a link."""

    try:
        title_link = element.select_one(title_selector)
        if title_link is None:
            return None

        title = title_link.get_text().strip()
        url = title_link.get("href")

        if not title or not url or not isinstance(url, str):
            logger.debug(f"Skipping result without a title or link: {element.name}.{element.get('class')}")
            return None

        snippet = "".join(desc.get_text() for desc in element.select(SNIPPET_SELECTOR)).strip()

        published_tag = element.select_one(PUBLISHED_SELECTOR)
        published = published_tag.get_text().strip() if published_tag else ""

        return SearchResult(url=url, title=title, snippet=snippet, published=published or None)
    except (AttributeError, TypeError, ValueError) as e:
        logger.debug(f"Skipping malformed result: {e}")
        return None


def extract_related_searches(soup: BeautifulSoup) -> list[str]:
    terms = (span.get_text().strip() for span in soup.select(RELATED_SEARCH_SELECTOR))
    return [term for term in terms if term]
