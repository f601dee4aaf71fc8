import os, requests, logging
from typing import Dict
from requests.exceptions import RequestException

from deckguide.errors import NetworkError

log = logging.getLogger(__name__)

DISCORD_API_BASE = os.getenv("DISCORD_API_BASE", "https://discord.com/api")
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "15"))


def webhook_url(webhook_id: str, webhook_token: str) -> str:
    return f"{DISCORD_API_BASE.rstrip('/')}/webhooks/{webhook_id}/{webhook_token}"


# Post a single embed to a Discord channel via webhook
def send_embed(webhook_id: str, webhook_token: str, embed: Dict, timeout: float | None = None) -> None:
    data = {"embeds": [embed]}
    try:
        r = requests.post(
            webhook_url(webhook_id, webhook_token), json=data, timeout=timeout or HTTP_TIMEOUT_SECONDS
        )
    except RequestException as e:
        # don't leak the token into logs
        raise NetworkError(f"webhook {webhook_id} unreachable: {e.__class__.__name__}") from e

    if not (200 <= r.status_code < 300):
        raise NetworkError(
            f"webhook {webhook_id} failed {r.status_code}", status_code=r.status_code, response_body=r.text
        )
    log.debug("[send] %s -> %d", embed.get("title", "(continued)"), r.status_code)
