from typing import Annotated, Literal

from pydantic import BaseModel, Field


class SearchResult(BaseModel):
    """A single web result."""

    t: Literal[0] = 0
    url: str = Field(min_length=1)
    title: str = Field(min_length=1)
    snippet: str = ""
    published: str | None = None


class RelatedSearches(BaseModel):
    """The related search suggestions shown alongside the results."""

    t: Literal[1] = 1
    list: list[str]


SearchRecord = Annotated[SearchResult | RelatedSearches, Field(discriminator="t")]


class SearchResponse(BaseModel):
    data: list[SearchRecord]

    @property
    def results(self) -> list[SearchResult]:
        return [record for record in self.data if isinstance(record, SearchResult)]

    @property
    def related_searches(self) -> RelatedSearches | None:
        return next((record for record in self.data if isinstance(record, RelatedSearches)), None)
