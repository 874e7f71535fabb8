import logging

import requests

from hoverboard_sync.errors import FetchError

logger = logging.getLogger(__name__)

USER_AGENT = "hoverboard-sync/0.1 (conference data sync)"


def fetch_upstream(url: str, timeout: float | None = None) -> str:
    """Download the upstream feed and return its raw JSON text.

    A network error, a non-success status or an empty body raises FetchError.
    """
    logger.info("Downloading %s", url)
    try:
        response = requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"Download failed for: {url} ({e})") from e

    body = response.text
    if not body or not body.strip():
        raise FetchError(f"Download failed for: {url} (empty response)")
    logger.info("Downloaded %d bytes from %s", len(body), url)
    return body
