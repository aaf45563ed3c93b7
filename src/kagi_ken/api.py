from collections.abc import Mapping
from typing import Any

from aiohttp import ClientSession

from kagi_ken.clients.search import KagiSearchClient
from kagi_ken.clients.summarize import KagiSummarizeClient
from kagi_ken.constants import DEFAULT_SEARCH_LIMIT
from kagi_ken.models.search import SearchResponse
from kagi_ken.models.summary import SummaryOptions, SummaryResponse


async def search(
    query: str,
    token: str,
    limit: int | None = DEFAULT_SEARCH_LIMIT,
    *,
    session: ClientSession | None = None,
    timeout: float | None = None,
) -> SearchResponse:
    """Perform a search on Kagi and return structured results.

    Args:
        query: The search query.
        token: The Kagi session token.
        limit: The maximum number of web results to return. Related searches are not counted.
        session: An optional session to send the request with.
        timeout: An optional total timeout for the request, in seconds.

    Returns:
        The web results followed by the related searches, if Kagi suggested any.
    """

    client = KagiSearchClient(token=token, session=session, timeout=timeout)

    return await client.search(query, limit=limit)


async def summarize(
    input: str,  # noqa: A002
    token: str,
    options: SummaryOptions | Mapping[str, Any] | None = None,
    *,
    session: ClientSession | None = None,
    timeout: float | None = None,
) -> SummaryResponse:
    """Summarize a URL or text with Kagi's Universal Summarizer.

    Args:
        input: The URL or text to summarize.
        token: The Kagi session token.
        options: `type` (`summary` or `takeaway`), `language` (see `SUPPORTED_LANGUAGES`) and `is_url`.
        session: An optional session to send the request with.
        timeout: An optional total timeout for the request, in seconds.

    Returns:
        The summary markdown under `data.output`.
    """

    client = KagiSummarizeClient(token=token, session=session, timeout=timeout)

    return await client.summarize(input, options=options)
