"""HTTP transport for the Notion API.

The service functions in `notionkit.client` only need something that can
`send()` a request and hand back the status code and raw body. Anything
satisfying `Transport` works, i.e. a fake for tests.
"""
import logging
from typing import Dict, Protocol, Tuple
from urllib.parse import urljoin

import requests

from notionkit import env
from notionkit.errors import TransportError
from notionkit.types import HTTPVerb, JsonValue, assert_never

logger = logging.getLogger(__name__)

NOTION_VERSION_HEADER = "Notion-Version"


class Transport(Protocol):
    def send(
        self, method: HTTPVerb, path: str, body: JsonValue | None = None
    ) -> Tuple[int, bytes]:
        ...


def headers(token: str, version: str) -> Dict[str, str]:
    return {
        "Accept": "application/json",
        NOTION_VERSION_HEADER: version,
        "Content-Type": "application/json",
        "Authorization": f"Bearer {token}",
    }


class RequestsTransport:
    """`Transport` backed by a `requests.Session`.

    Args:
        token: Integration token.
        url: API base URL. Request paths are resolved against it.
        version: Value of the `Notion-Version` header.
        timeout_sec: Passed to `requests` as is. `None` waits forever.
        session: Session to use. A new one is created when omitted.
    """

    def __init__(
        self,
        token: str,
        *,
        url: str = env.DEFAULT_NOTION_API_URL,
        version: str = env.DEFAULT_NOTION_VERSION,
        timeout_sec: float | None = None,
        session: requests.Session | None = None,
    ):
        self.url = url if url.endswith("/") else f"{url}/"
        self.timeout_sec = timeout_sec
        self.session = session or requests.Session()
        self.session.headers.update(headers(token, version))

    def send(
        self, method: HTTPVerb, path: str, body: JsonValue | None = None
    ) -> Tuple[int, bytes]:
        url = urljoin(self.url, path.lstrip("/"))
        logger.debug(f"{method} {url}")

        try:
            match method:
                case "GET":
                    response = self.session.get(
                        url, params=body, timeout=self.timeout_sec  # type: ignore
                    )
                case "POST":
                    response = self.session.post(
                        url, json=body, timeout=self.timeout_sec
                    )
                case never:
                    assert_never(never)
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Error making API call to {url}: {e}") from e

        return response.status_code, response.content

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, *args) -> None:
        self.close()


def create(
    token: str | None = None,
    *,
    url: str | None = None,
    version: str | None = None,
    timeout_sec: float | None = 60,
) -> RequestsTransport:
    """Create a transport, filling the blanks from the environment."""
    return RequestsTransport(
        token or env.get_notion_token(),
        url=url or env.get_notion_api_url(),
        version=version or env.get_notion_version(),
        timeout_sec=timeout_sec,
    )
