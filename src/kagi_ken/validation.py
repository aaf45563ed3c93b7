from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from kagi_ken.constants import DEFAULT_SEARCH_LIMIT, SUPPORTED_LANGUAGES
from kagi_ken.errors import KagiValidationError
from kagi_ken.models.summary import SummaryOptions, SummaryType


def require_text(value: Any, description: str) -> str:
    """Ensure that `value` is a non-empty string."""
    if not value or not isinstance(value, str):
        msg = f"{description} is required and must be a string"
        raise KagiValidationError(msg)

    return value


def require_token(token: Any) -> str:
    return require_text(token, "Session token")


def validate_limit(limit: Any) -> int:
    """Return the search limit, defaulting to 10 when it is omitted."""
    if limit is None:
        return DEFAULT_SEARCH_LIMIT

    # bool is an int subclass but never a meaningful limit
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        msg = "Limit must be a positive integer"
        raise KagiValidationError(msg)

    return limit


def validate_summary_type(summary_type: Any) -> SummaryType:
    if summary_type not in tuple(SummaryType):
        msg = "Type must be 'summary' or 'takeaway'"
        raise KagiValidationError(msg)

    return SummaryType(summary_type)


def validate_language(language: Any) -> str:
    if language not in SUPPORTED_LANGUAGES:
        msg = f"Unsupported language code '{language}'. Supported languages: {', '.join(SUPPORTED_LANGUAGES)}"
        raise KagiValidationError(msg)

    return language


def resolve_summary_options(options: SummaryOptions | Mapping[str, Any] | None) -> SummaryOptions:
    """Build a checked `SummaryOptions` from whatever the caller passed."""
    if options is None:
        options = SummaryOptions()
    elif not isinstance(options, SummaryOptions):
        try:
            options = SummaryOptions.model_validate(dict(options))
        except (TypeError, ValueError, ValidationError) as e:
            msg = f"Invalid summary options: {e}"
            raise KagiValidationError(msg) from e

    return SummaryOptions(
        type=validate_summary_type(options.type),
        language=validate_language(options.language),
        is_url=options.is_url,
    )
