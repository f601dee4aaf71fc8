import logging
from typing import List, Dict, Mapping

from deckguide.errors import DataShapeError
from deckguide.ingest.firebase import fetch_data
from deckguide.transform.dice import DICE_EMOJI, dice_to_emoji
from deckguide.transform.richtext import to_paragraphs

log = logging.getLogger(__name__)

REQUIRED_FIELDS = ("diceList", "guide")


def _check_shape(guide) -> None:
    if not isinstance(guide, dict):
        raise DataShapeError(f"deck guide must be an object, got {type(guide).__name__}")
    missing = [k for k in REQUIRED_FIELDS if guide.get(k) is None]
    if missing:
        raise DataShapeError(f"deck guide {guide.get('id', '?')} is missing {', '.join(missing)}")
    if not isinstance(guide["diceList"], list):
        raise DataShapeError(f"deck guide {guide.get('id', '?')} has a non-list diceList")
    if not isinstance(guide["guide"], str):
        raise DataShapeError(f"deck guide {guide.get('id', '?')} has a non-text guide")


def process_guide(guide: Dict, emoji: Mapping[int, str] = DICE_EMOJI) -> Dict:
    _check_shape(guide)
    return {
        # older records only carry "name"
        "title": guide.get("title") or guide.get("name"),
        "type": guide.get("type"),
        "dice_list": dice_to_emoji(guide["diceList"], emoji),
        "paragraphs": to_paragraphs(guide["guide"]),
    }


def process_data(raw_data: List[Dict] | None = None, emoji: Mapping[int, str] | None = None) -> List[Dict]:
    """Turn raw deck guides into display guides (emoji rows + text paragraphs).

    Fetches from Firebase when raw_data is None. Fetch errors propagate as-is;
    malformed records raise DataShapeError.
    """
    if raw_data is None:
        raw_data = fetch_data()
    if emoji is None:
        emoji = DICE_EMOJI

    processed = [process_guide(g, emoji) for g in raw_data]
    log.debug("[counts] processed=%d", len(processed))
    return processed
