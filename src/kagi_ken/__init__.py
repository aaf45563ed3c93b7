from kagi_ken.api import search, summarize
from kagi_ken.clients.search import KagiSearchClient
from kagi_ken.clients.summarize import KagiSummarizeClient
from kagi_ken.constants import SUPPORTED_LANGUAGES
from kagi_ken.errors import (
    KagiAuthenticationError,
    KagiError,
    KagiHTTPError,
    KagiNetworkError,
    KagiParseError,
    KagiUpstreamError,
    KagiValidationError,
)
from kagi_ken.models.search import RelatedSearches, SearchResponse, SearchResult
from kagi_ken.models.summary import SummaryOptions, SummaryResponse, SummaryType

__all__ = [
    "SUPPORTED_LANGUAGES",
    "KagiAuthenticationError",
    "KagiError",
    "KagiHTTPError",
    "KagiNetworkError",
    "KagiParseError",
    "KagiSearchClient",
    "KagiSummarizeClient",
    "KagiUpstreamError",
    "KagiValidationError",
    "RelatedSearches",
    "SearchResponse",
    "SearchResult",
    "SummaryOptions",
    "SummaryResponse",
    "SummaryType",
    "search",
    "summarize",
]
