import logging
from types import MappingProxyType
from typing import List, Mapping

from deckguide.errors import DataShapeError

log = logging.getLogger(__name__)

# Dice id -> Discord custom emoji. -1 is the "any dice" placeholder slot.
DICE_EMOJI: Mapping[int, str] = MappingProxyType({
    -1: "<:z5Dice:751231833232113684>",
    0: "<:z9Fire:751231757155696660>",
    1: "<:z9Electric:751231757281525790>",
    2: "<:z9Wind:751231756887392318>",
    3: "<:z9Poison:751231757210222632>",
    4: "<:z9Ice:751231756811894808>",
    5: "<:z9Iron:751231757164216350>",
    6: "<:z9Broken:751231756820283454>",
    7: "<:z9Gamble:751231756807700481>",
    8: "<:z9Lock:751231757176537118>",
    9: "<:z8Mine:751231756866420797>",
    10: "<:z8Light:751231756992118815>",
    11: "<:z8Thorn:751231757067485226>",
    12: "<:z8Crack:751231756933398539>",
    13: "<:z8Critical:751231757398835281>",
    14: "<:z8Energy:751231757298303047>",
    15: "<:z8Sacrifice:751231757315080252>",
    16: "<:z8Arrow:751231757239713893>",
    17: "<:z7Death:751231756870615060>",
    18: "<:z7Teleport:751231757172473886>",
    19: "<:z7Laser:751231756908101744>",
    20: "<:z7Mimic:751231757130399818>",
    21: "<:z7Infect:751231756606243013>",
    22: "<:z7ModifiedElectric:751231757033930873>",
    23: "<:z7Absorb:751231757055033495>",
    24: "<:z7MightyWind:751231756958564422>",
    25: "<:z7Switch:751231756824477737>",
    26: "<:z7Gear:751231756866289745>",
    27: "<:z7Wave:751231757084262521>",
    28: "<:z6Nuclear:756318468017487968>",
    29: "<:z6Landmine:756318467921018931>",
    30: "<:z6SandSwamp:756318467954835488>",
    31: "<:z6Joker:756318467602514025>",
    32: "<:z6HolySword:756318467941990450>",
    33: "<:z6Hell:756318467786801332>",
    34: "<:z6Shield:756318468072144926>",
    35: "<:z6Blizzard:756318467350724638>",
    36: "<:z6Growth:756318468055498822>",
    37: "<:z6Summoner:756318468026138704>",
    38: "<:z6Solar:756318468017619016>",
    39: "<:z6Assassin:756318466855796837>",
    40: "<:z6Atomic:756318467057123431>",
    41: "<:z6Gun:756318467426091121>",
    42: "<:z6Metastasis:756318467770023979>",
    43: "<:z6Typhoon:756318468013555782>",
    44: "<:z6Supplement:756318467967418398>",
    45: "<:z6Time:756318467895853138>",
    46: "<:z6Combo:756318467937927258>",
    47: "<:z6Lunar:756318467946184804>",
    48: "<:z6Flow:756318468139384952>",
    49: "<:z6Star:756318468034527302>",
    50: "<:z7Flame:751231756434276513>",
    51: "<:z7Healing:756318467686137976>",
    52: "<:z7Clone:756318467782869012>",
    53: "<:z6Silence:756318467946446889>",
    54: "<:z6ix10:756320150910926969>",
})


def dice_to_emoji(dice_list: List[List[int]], emoji: Mapping[int, str] | None = None) -> List[List[str | None]]:
    """Map each row of dice ids to emoji tokens.

    Unknown ids come back as None (rendered blank) and are logged, so a stale
    table degrades the card instead of dropping the whole guide.
    """
    emoji = DICE_EMOJI if emoji is None else emoji
    out: List[List[str | None]] = []
    for row in dice_list:
        if not isinstance(row, (list, tuple)):
            raise DataShapeError(f"dice row must be a list, got {type(row).__name__}")
        tokens = []
        for die in row:
            # bool is an int subclass but never a dice id
            if not isinstance(die, int) or isinstance(die, bool):
                raise DataShapeError(f"dice id must be an integer, got {die!r}")
            token = emoji.get(die)
            if token is None:
                log.warning("no emoji for dice id %r", die)
            tokens.append(token)
        out.append(tokens)
    return out
