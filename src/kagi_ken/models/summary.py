from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from kagi_ken.constants import DEFAULT_LANGUAGE


class SummaryType(StrEnum):
    SUMMARY = "summary"
    TAKEAWAY = "takeaway"


class SummaryOptions(BaseModel):
    """Options for a summarization request.

    Values are checked by `kagi_ken.validation.resolve_summary_options` so that bad input is
    reported as a `KagiValidationError` rather than a pydantic error.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: str = SummaryType.SUMMARY
    """Either `summary` (prose) or `takeaway` (bullet points)."""

    language: str = DEFAULT_LANGUAGE
    """The target language code, one of `SUPPORTED_LANGUAGES`."""

    is_url: StrictBool = Field(default=False, alias="isUrl")
    """Whether the input is a URL to summarize rather than the text itself."""


class SummaryOutput(BaseModel):
    output: str = ""


class SummaryResponse(BaseModel):
    data: SummaryOutput
