from kagi_ken.clients.base import BaseKagiClient
from kagi_ken.constants import DEFAULT_SEARCH_LIMIT, SEARCH_URL
from kagi_ken.models.search import SearchResponse
from kagi_ken.parsers.search import extract_results
from kagi_ken.validation import require_text, validate_limit


class KagiSearchClient(BaseKagiClient):
    async def search(self, query: str, limit: int | None = DEFAULT_SEARCH_LIMIT) -> SearchResponse:
        """Search Kagi and return up to `limit` web results plus any related searches."""

        query = require_text(query, "Search query")
        limit = validate_limit(limit)

        html = await self.request_text("GET", SEARCH_URL, headers=self.build_headers(), params={"q": query})

        return SearchResponse(data=extract_results(html, limit))
