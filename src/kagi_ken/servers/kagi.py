from typing import Annotated

from fastmcp.utilities.logging import get_logger
from pydantic import BaseModel, Field

from kagi_ken.api import search, summarize
from kagi_ken.constants import DEFAULT_LANGUAGE, DEFAULT_SEARCH_LIMIT
from kagi_ken.models.search import SearchResponse
from kagi_ken.models.summary import SummaryOptions, SummaryResponse, SummaryType

logger = get_logger(__name__)


class KagiServer(BaseModel):
    token: str = Field(repr=False)
    timeout: float | None = None

    async def search(
        self,
        query: str,
        limit: Annotated[int, "The maximum number of web results to return"] = DEFAULT_SEARCH_LIMIT,
    ) -> SearchResponse:
        """Search the web with Kagi. Returns web results followed by a list of related searches, if any."""

        logger.info(f"Searching Kagi for {query!r} with limit {limit}")

        return await search(query, self.token, limit, timeout=self.timeout)

    async def summarize(
        self,
        input: Annotated[str, "The URL or the text to summarize"],  # noqa: A002
        summary_type: Annotated[SummaryType, "`summary` for prose, `takeaway` for bullet points"] = SummaryType.SUMMARY,
        language: Annotated[str, "The language code of the summary, e.g. EN, DE or ZH-HANT"] = DEFAULT_LANGUAGE,
        is_url: Annotated[bool, "Whether the input is a URL rather than text"] = False,
    ) -> SummaryResponse:
        """Summarize a web page, video or a block of text with Kagi's Universal Summarizer. Returns markdown."""

        logger.info(f"Summarizing {'URL' if is_url else 'text'} as {summary_type} in {language}")

        options = SummaryOptions(type=summary_type, language=language, is_url=is_url)

        return await summarize(input, self.token, options, timeout=self.timeout)
