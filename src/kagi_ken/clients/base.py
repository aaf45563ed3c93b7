from typing import Any

from aiohttp import ClientError, ClientResponseError, ClientSession, ClientTimeout
from fastmcp.utilities.logging import get_logger

from kagi_ken.constants import SESSION_COOKIE_NAME, USER_AGENT
from kagi_ken.errors import KagiAuthenticationError, KagiHTTPError, KagiNetworkError
from kagi_ken.validation import require_token

logger = get_logger(__name__)

AUTH_FAILURE_STATUSES = frozenset({401, 403})


class BaseKagiClient:
    """Sends a single authenticated request per call and returns the response body.

    If no session is supplied, a fresh `ClientSession` is opened and closed around each request.
    """

    token: str
    session: ClientSession | None
    timeout: ClientTimeout | None

    def __init__(self, token: str, session: ClientSession | None = None, timeout: float | None = None):
        self.token = require_token(token)
        self.session = session
        self.timeout = ClientTimeout(total=timeout) if timeout is not None else None

    def build_headers(self, extra: dict[str, str] | None = None) -> dict[str, str]:
        """Build the headers shared by every request: the client identity and the session cookie."""

        return {
            "User-Agent": USER_AGENT,
            "Cookie": f"{SESSION_COOKIE_NAME}={self.token}",
            **(extra or {}),
        }

    async def request_text(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        params: dict[str, str] | None = None,
        data: dict[str, str] | None = None,
    ) -> str:
        """Send one request and return the decoded body.

        Raises:
            KagiAuthenticationError: On a 401 or 403 response.
            KagiHTTPError: On any other unsuccessful status.
            KagiNetworkError: On any transport failure, timeouts included.
        """

        logger.debug(f"Sending {method} {url}")

        try:
            if self.session is not None:
                return await self._send(self.session, method, url, headers=headers, params=params, data=data)

            async with ClientSession() as session:
                return await self._send(session, method, url, headers=headers, params=params, data=data)

        except (ClientError, TimeoutError) as e:
            logger.debug(f"Request to {url} failed: {e!r}")
            raise KagiNetworkError from e

    async def _send(self, session: ClientSession, method: str, url: str, **kwargs: Any) -> str:
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        async with session.request(method, url, **kwargs) as response:
            try:
                response.raise_for_status()
            except ClientResponseError as e:
                if e.status in AUTH_FAILURE_STATUSES:
                    raise KagiAuthenticationError from e
                raise KagiHTTPError(e.status, e.message) from e

            body = await response.text(encoding="utf-8", errors="replace")

        logger.debug(f"Received {len(body)} characters from {method} {url}")

        return body
