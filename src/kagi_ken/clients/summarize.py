from collections.abc import Mapping
from typing import Any

from kagi_ken.clients.base import BaseKagiClient
from kagi_ken.constants import KAGI_HOST, STREAM_CONTENT_TYPE, SUMMARIZER_REFERER, SUMMARY_URL
from kagi_ken.models.summary import SummaryOptions, SummaryOutput, SummaryResponse
from kagi_ken.parsers.stream import extract_summary
from kagi_ken.validation import require_text, resolve_summary_options

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded;charset=UTF-8"


class KagiSummarizeClient(BaseKagiClient):
    def build_stream_headers(self, extra: dict[str, str] | None = None) -> dict[str, str]:
        """Headers that make the request look like the summarizer page in a logged in browser."""

        return self.build_headers(
            {
                "Accept": STREAM_CONTENT_TYPE,
                "Connection": "keep-alive",
                "Host": KAGI_HOST,
                "Pragma": "no-cache",
                "Referer": SUMMARIZER_REFERER,
                **(extra or {}),
            }
        )

    async def summarize(self, input: str, options: SummaryOptions | Mapping[str, Any] | None = None) -> SummaryResponse:  # noqa: A002
        """Summarize a URL or a block of text with the Universal Summarizer.

        Args:
            input: The URL (when `options.is_url` is set) or the text to summarize.
            options: The summary type, target language and input mode.

        Returns:
            The summary markdown, empty if the stream carried none.
        """

        input = require_text(input, "Input")  # noqa: A001
        options = resolve_summary_options(options)

        fields = {
            "url" if options.is_url else "text": input,
            "stream": "1",
            "target_language": options.language,
            "summary_type": str(options.type),
        }

        if options.is_url:
            body = await self.request_text("GET", SUMMARY_URL, headers=self.build_stream_headers(), params=fields)
        else:
            body = await self.request_text(
                "POST",
                f"{SUMMARY_URL}/",
                headers=self.build_stream_headers({"Content-Type": FORM_CONTENT_TYPE}),
                data=fields,
            )

        summary = extract_summary(body)

        return SummaryResponse(data=SummaryOutput(output=summary["output"]))
