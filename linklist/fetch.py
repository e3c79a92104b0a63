"""Page fetching with httpx."""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx

from linklist.errors import FetchError

USER_AGENT = "linklist/0.1.0"


@dataclass
class FetchResult:
    """Result from fetching a URL."""

    html: str
    url: str
    status: int
    headers: dict[str, str] = field(default_factory=dict)


async def fetch_page(
    url: str,
    timeout: int = 30,
    verify_ssl: bool = True,
    username: str | None = None,
    password: str | None = None,
    headers: dict[str, str] | None = None,
) -> FetchResult:
    """Fetch a single page, requiring a 200 response.

    Basic auth is sent only when a username or password is given.

    Raises:
        FetchError: transport failure or any status other than 200
    """
    default_headers = {
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
    }
    if headers:
        default_headers.update(headers)

    auth = None
    if username or password:
        auth = httpx.BasicAuth(username or "", password or "")

    async with httpx.AsyncClient(
        timeout=timeout,
        follow_redirects=True,
        headers=default_headers,
        verify=verify_ssl,
        auth=auth,
    ) as client:
        try:
            response = await client.get(url)
        except httpx.HTTPError as e:
            raise FetchError(f"Failed to retrieve site content for '{url}': {e}") from e

    if response.status_code != httpx.codes.OK:
        raise FetchError(f"[{response.status_code}] {response.text}", status=response.status_code)

    return FetchResult(
        html=response.text,
        url=str(response.url),
        status=response.status_code,
        headers=dict(response.headers),
    )
