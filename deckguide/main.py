import os, time, logging, argparse
from typing import List, Dict
from dotenv import load_dotenv

from deckguide.errors import DeckGuideError, CredentialMissingError
from deckguide.ingest.firebase import fetch_data
from deckguide.transform.guides import process_data
from deckguide.format.embeds import make_embeds
from deckguide.format.preview import render_json, render_text
from deckguide.senders.discord import send_embed

log = logging.getLogger("deckguide")

# Discord rate-limits webhooks; one embed per second stays well under it
SEND_DELAY_SECONDS = 1.0


# -------------------------------- pipeline ------------------------------------

def build_embeds() -> List[Dict]:
    raw = fetch_data()
    data = process_data(raw)
    return make_embeds(data)


def _log_error(err: Exception) -> None:
    log.error("%s", err)
    body = getattr(err, "response_body", None)
    if body:
        log.error("%s", body)


# --------------------------------- runners ------------------------------------

def dry_run(fmt: str = "json") -> None:
    """Run the pipeline and print the embeds instead of posting them."""
    try:
        embeds = build_embeds()
    except DeckGuideError as e:
        _log_error(e)
        return
    print(render_text(embeds) if fmt == "text" else render_json(embeds))


def full_run(webhook_id: str | None, webhook_token: str | None) -> None:
    """Run the pipeline and post every embed to the webhook, one per second.
       Exits with status 1 on missing credentials or any failure.
    """
    missing = [n for n, v in (("WEBHOOK_ID", webhook_id), ("WEBHOOK_TOKEN", webhook_token)) if not v]
    if missing:
        _log_error(CredentialMissingError(missing))
        raise SystemExit(1)

    try:
        embeds = build_embeds()
        for i, embed in enumerate(embeds):
            if i:
                time.sleep(SEND_DELAY_SECONDS)
            send_embed(webhook_id, webhook_token, embed)
            log.debug("[send] %d/%d", i + 1, len(embeds))
    except DeckGuideError as e:
        _log_error(e)
        raise SystemExit(1)

    log.info("Posted %d embeds", len(embeds))


# --------------------------------- CLI args -----------------------------------

def _parse_args(argv=None):
    p = argparse.ArgumentParser(description="Post randomdice.gg deck guides to a Discord webhook")
    p.add_argument("--dry-run", action="store_true", help="Print the embeds instead of sending them")
    p.add_argument("--format", choices=("json", "text"), default="json", help="Dry-run output format")
    p.add_argument("--webhook-id", type=str, default=None, help="Override WEBHOOK_ID")
    p.add_argument("--webhook-token", type=str, default=None, help="Override WEBHOOK_TOKEN")
    p.add_argument("--debug", action="store_true", help="Verbose debug logging")
    return p.parse_args(argv)


# ----------------------------------- main -------------------------------------

def main(argv=None):
    load_dotenv()
    args = _parse_args(argv)
    debug = args.debug or bool(os.getenv("DEBUG"))
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.dry_run:
        dry_run(args.format)
        return

    full_run(
        args.webhook_id or os.getenv("WEBHOOK_ID"),
        args.webhook_token or os.getenv("WEBHOOK_TOKEN"),
    )


if __name__ == "__main__":
    main()


# Local examples:
# python -m deckguide.main --dry-run --format text --debug
# WEBHOOK_ID=... WEBHOOK_TOKEN=... python -m deckguide.main
