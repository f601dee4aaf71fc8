import logging
from typing import List, Dict
from urllib.parse import quote

from deckguide.transform.guides import process_data

log = logging.getLogger(__name__)

MAX_FIELDS = 16
COLOR = 0x6BA4A5
SITE_URL = "https://randomdice.gg/"
ICON_URL = "https://randomdice.gg/title_dice.png"
GUIDE_BASE_URL = "https://randomdice.gg/decks/guide/"
AUTHOR_NAME = "Random Dice Community Website"
FOOTER_TEXT = "randomdice.gg Decks Guide"
BLANK_NAME = "⠀"  # braille blank, Discord rejects empty field names

# Characters JavaScript's encodeURI leaves alone
_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"


def guide_url(title: str) -> str:
    return GUIDE_BASE_URL + quote(title or "", safe=_URI_SAFE)


def _named(values: List[str]) -> List[Dict]:
    return [{"name": "Guide" if i == 0 else BLANK_NAME, "value": v} for i, v in enumerate(values)]


def build_fields(guide: Dict) -> List[Dict]:
    """Dice rows first, then non-empty paragraphs; each run starts with a "Guide" field."""
    rows = [" ".join(t or "" for t in row) for row in guide["dice_list"]]
    paragraphs = [p for p in guide["paragraphs"] if p != ""]
    return _named(rows) + _named(paragraphs)


def _header(guide: Dict) -> Dict:
    return {
        "title": f"{guide['title']} ({guide['type']})",
        "author": {"name": AUTHOR_NAME, "url": SITE_URL, "icon_url": ICON_URL},
        "color": COLOR,
        "url": guide_url(guide["title"]),
    }


def _footer() -> Dict:
    return {"text": FOOTER_TEXT, "icon_url": ICON_URL}


def make_guide_embeds(guide: Dict) -> List[Dict]:
    fields = build_fields(guide)
    if len(fields) > MAX_FIELDS:
        return [
            {**_header(guide), "fields": fields[:MAX_FIELDS]},
            {"color": COLOR, "fields": fields[MAX_FIELDS:], "footer": _footer()},
        ]
    return [{**_header(guide), "fields": fields, "footer": _footer()}]


def make_embeds(processed: List[Dict] | None = None) -> List[Dict]:
    """Flatten every display guide into one or two Discord embeds, in order."""
    if processed is None:
        processed = process_data()

    embeds: List[Dict] = []
    for guide in processed:
        embeds.extend(make_guide_embeds(guide))
    log.debug("[counts] guides=%d embeds=%d", len(processed), len(embeds))
    return embeds
