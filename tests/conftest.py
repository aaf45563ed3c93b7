from textwrap import dedent
from typing import Any

import pytest
from aioresponses import aioresponses
from yarl import URL

TOKEN = "test-session-token"


@pytest.fixture
def token() -> str:
    return TOKEN


@pytest.fixture
def mock_http():
    with aioresponses() as m:
        yield m


def _single_request(m: aioresponses) -> tuple[str, URL, dict[str, Any]]:
    assert len(m.requests) == 1

    ((method, url), calls), *_ = m.requests.items()

    assert len(calls) == 1

    return method, url, calls[0].kwargs


@pytest.fixture
def single_request():
    """Returns a helper giving the method, URL and keyword arguments of the only request sent."""
    return _single_request


@pytest.fixture
def search_page_html() -> str:
    """Two primary results, one grouped result and three related searches."""

    html_page = """
    <html>
        <body>
            <div class="results-box">
                <div class="search-result">
                    <h3 class="__sri_title"><a class="__sri_title_link" href="https://docs.python.org/3/">Python 3 Documentation</a></h3>
                    <div class="__sri-desc">The official <b>Python</b> documentation.</div>
                    <span class="__sri-time">Jan 5, 2025</span>
                </div>
                <div class="search-result">
                    <h3 class="__sri_title"><a class="__sri_title_link" href="https://www.python.org/">Welcome to Python.org</a></h3>
                    <div class="__sri-desc">The official home of the Python Programming Language.</div>
                </div>
                <div class="sr-group">
                    <div class="__srgi">
                        <h4 class="__srgi-title"><a href="https://realpython.com/">Real Python Tutorials</a></h4>
                        <div class="__sri-desc">Learn Python online.</div>
                        <span class="__sri-time">3 days ago</span>
                    </div>
                </div>
            </div>
            <div class="related-searches">
                <a href="/search?q=python+tutorial"><span>python tutorial</span></a>
                <a href="/search?q=python+download"><span>python download</span></a>
                <a href="/search?q=python+ide"><span> python ide </span></a>
            </div>
        </body>
    </html>
    """

    return dedent(html_page).strip()


@pytest.fixture
def summary_stream() -> str:
    frames = [
        'hi:{"v":"1","trace":"abc"}',
        'update:{"md":"partial"}',
        'new_message.json:{"state":"done","md":"# Summary\\n\\n- Python is a programming language."}',
        "",
    ]
    return "\x00".join(frames)
