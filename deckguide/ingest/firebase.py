import os, logging, requests
from typing import List, Dict
from requests.exceptions import RequestException

from deckguide.errors import NetworkError

log = logging.getLogger(__name__)

DECKS_GUIDE_URL = os.environ.get(
    "DECKS_GUIDE_URL", "https://random-dice-web.firebaseio.com/decks_guide.json"
)
HTTP_TIMEOUT_SECONDS = float(os.environ.get("HTTP_TIMEOUT_SECONDS", "15"))

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "deckguide-poster/0.1 (+https://randomdice.gg/)",
}


def _normalize(payload) -> List[Dict] | None:
    # Firebase serves sequential keys as an array (with null holes), sparse
    # keys as an object keyed by id, and an empty node as null.
    if payload is None:
        return []
    if isinstance(payload, dict):
        payload = list(payload.values())
    if not isinstance(payload, list):
        return None
    return [g for g in payload if g is not None]


def fetch_data(url: str | None = None, timeout: float | None = None) -> List[Dict]:
    """Download the raw deck guides. Raises NetworkError on any transport,
       status or decoding failure; nothing is retried.
    """
    url = url or DECKS_GUIDE_URL
    try:
        r = requests.get(url, timeout=timeout or HTTP_TIMEOUT_SECONDS, headers=DEFAULT_HEADERS)
    except RequestException as e:
        raise NetworkError(f"GET {url} failed: {e}") from e

    if not (200 <= r.status_code < 300):
        raise NetworkError(
            f"GET {url} returned {r.status_code}", status_code=r.status_code, response_body=r.text
        )

    try:
        payload = r.json()
    except ValueError as e:
        raise NetworkError(
            f"GET {url} returned a body that is not JSON", status_code=r.status_code, response_body=r.text
        ) from e

    guides = _normalize(payload)
    if guides is None:
        raise NetworkError(
            f"GET {url} returned {type(payload).__name__}, expected a list of deck guides",
            status_code=r.status_code, response_body=r.text,
        )
    log.debug("[fetch] %d guides from %s", len(guides), url)
    return guides
