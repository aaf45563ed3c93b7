import re

import pytest
from aiohttp import ClientPayloadError
from aioresponses import aioresponses

from kagi_ken.clients.summarize import FORM_CONTENT_TYPE, KagiSummarizeClient
from kagi_ken.constants import USER_AGENT
from kagi_ken.errors import KagiAuthenticationError, KagiNetworkError, KagiParseError, KagiUpstreamError, KagiValidationError
from kagi_ken.models.summary import SummaryOptions

TEXT_URL = "https://kagi.com/mother/summary_labs/"
URL_PATTERN = re.compile(r"^https://kagi\.com/mother/summary_labs\?.*$")

EXPECTED_OUTPUT = "# Summary\n\n- Python is a programming language."


@pytest.fixture
def summarize_client(token: str) -> KagiSummarizeClient:
    return KagiSummarizeClient(token=token)


def assert_stream_headers(headers: dict[str, str], token: str):
    assert headers["Accept"] == "application/vnd.kagi.stream"
    assert headers["Connection"] == "keep-alive"
    assert headers["Cookie"] == f"kagi_session={token}"
    assert headers["Host"] == "kagi.com"
    assert headers["Pragma"] == "no-cache"
    assert headers["Referer"] == "https://kagi.com/summarizer"
    assert headers["User-Agent"] == USER_AGENT


async def test_summarize_text(summarize_client: KagiSummarizeClient, mock_http: aioresponses, summary_stream: str, token: str, single_request):
    mock_http.post(TEXT_URL, body=summary_stream, content_type="application/vnd.kagi.stream")

    response = await summarize_client.summarize("Python is a programming language.")

    assert response.data.output == EXPECTED_OUTPUT
    assert response.model_dump() == {"data": {"output": EXPECTED_OUTPUT}}

    method, url, kwargs = single_request(mock_http)
    assert method == "POST"
    assert str(url) == TEXT_URL
    assert kwargs["data"] == {
        "text": "Python is a programming language.",
        "stream": "1",
        "target_language": "EN",
        "summary_type": "summary",
    }
    assert kwargs["headers"]["Content-Type"] == FORM_CONTENT_TYPE
    assert_stream_headers(kwargs["headers"], token)


async def test_summarize_url(summarize_client: KagiSummarizeClient, mock_http: aioresponses, summary_stream: str, token: str, single_request):
    mock_http.get(URL_PATTERN, body=summary_stream, content_type="application/vnd.kagi.stream")

    response = await summarize_client.summarize(
        "https://www.python.org/about/", {"type": "takeaway", "language": "DE", "isUrl": True}
    )

    assert response.data.output == EXPECTED_OUTPUT

    method, url, kwargs = single_request(mock_http)
    assert method == "GET"
    assert url.path == "/mother/summary_labs"
    assert url.query["url"] == "https://www.python.org/about/"
    assert url.query["stream"] == "1"
    assert url.query["target_language"] == "DE"
    assert url.query["summary_type"] == "takeaway"
    assert "Content-Type" not in kwargs["headers"]
    assert_stream_headers(kwargs["headers"], token)


async def test_summarize_with_options_model(summarize_client: KagiSummarizeClient, mock_http: aioresponses, summary_stream: str, single_request):
    mock_http.post(TEXT_URL, body=summary_stream)

    options = SummaryOptions(type="takeaway", language="ZH-HANT")

    await summarize_client.summarize("Some text", options)

    _, _, kwargs = single_request(mock_http)
    assert kwargs["data"]["target_language"] == "ZH-HANT"
    assert kwargs["data"]["summary_type"] == "takeaway"


async def test_summarize_upstream_error(summarize_client: KagiSummarizeClient, mock_http: aioresponses):
    mock_http.post(TEXT_URL, body='new_message.json:{"state":"error","reply":"quota exceeded"}\x00')

    with pytest.raises(KagiUpstreamError, match="quota exceeded"):
        await summarize_client.summarize("Some text")


async def test_summarize_empty_stream(summarize_client: KagiSummarizeClient, mock_http: aioresponses):
    mock_http.post(TEXT_URL, body="\x00\x00")

    with pytest.raises(KagiParseError, match="No summary data received"):
        await summarize_client.summarize("Some text")


async def test_summarize_truncated_stream(summarize_client: KagiSummarizeClient, mock_http: aioresponses):
    mock_http.post(TEXT_URL, exception=ClientPayloadError("Response payload is not completed"))

    with pytest.raises(KagiNetworkError) as exc_info:
        await summarize_client.summarize("Some text")

    assert isinstance(exc_info.value.__cause__, ClientPayloadError)


@pytest.mark.parametrize("status", [401, 403])
async def test_summarize_auth_failure(summarize_client: KagiSummarizeClient, mock_http: aioresponses, status: int):
    mock_http.post(TEXT_URL, status=status)

    with pytest.raises(KagiAuthenticationError):
        await summarize_client.summarize("Some text")


async def test_summarize_invalid_language(summarize_client: KagiSummarizeClient, mock_http: aioresponses):
    with pytest.raises(KagiValidationError, match="Unsupported language code 'XX'") as exc_info:
        await summarize_client.summarize("Some text", {"language": "XX"})

    assert "BG, CS, DA" in str(exc_info.value)
    assert "ZH-HANT" in str(exc_info.value)
    assert not mock_http.requests


@pytest.mark.parametrize("summary_type", ["bullets", "", "SUMMARY"])
async def test_summarize_invalid_type(summarize_client: KagiSummarizeClient, mock_http: aioresponses, summary_type):
    with pytest.raises(KagiValidationError, match="Type must be 'summary' or 'takeaway'"):
        await summarize_client.summarize("Some text", {"type": summary_type})

    assert not mock_http.requests


async def test_summarize_invalid_input(summarize_client: KagiSummarizeClient, mock_http: aioresponses):
    with pytest.raises(KagiValidationError, match="Input is required and must be a string"):
        await summarize_client.summarize("")

    assert not mock_http.requests
