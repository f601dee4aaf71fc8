from deckguide.format import embeds as embeds_mod
from deckguide.format.embeds import (
    BLANK_NAME, COLOR, FOOTER_TEXT, MAX_FIELDS, build_fields, guide_url, make_embeds,
)
from deckguide.format.preview import render_json, render_text


def display(rows=1, paragraphs=("intro",), title="Fire Crit", type_="PvP"):
    return {
        "title": title,
        "type": type_,
        "dice_list": [["<:a:1>", "<:b:2>"] for _ in range(rows)],
        "paragraphs": list(paragraphs),
    }


def test_field_naming_restarts_for_paragraphs():
    fields = build_fields(display(rows=2, paragraphs=["one", "", "two"]))
    assert [f["name"] for f in fields] == ["Guide", BLANK_NAME, "Guide", BLANK_NAME]
    assert fields[0]["value"] == "<:a:1> <:b:2>"
    assert [f["value"] for f in fields[2:]] == ["one", "two"]


def test_paragraph_only_guide_starts_with_guide():
    fields = build_fields(display(rows=0, paragraphs=["x", "y"]))
    assert [f["name"] for f in fields] == ["Guide", BLANK_NAME]


def test_missing_token_renders_blank():
    g = display()
    g["dice_list"] = [[None, "<:b:2>"]]
    assert build_fields(g)[0]["value"] == " <:b:2>"


def test_single_embed_when_within_limit():
    g = display(rows=3, paragraphs=["a", "", "b", "", "c"])
    [e] = make_embeds([g])
    assert len(e["fields"]) == 3 + 3
    assert e["title"] == "Fire Crit (PvP)"
    assert e["color"] == COLOR
    assert e["author"]["name"] == "Random Dice Community Website"
    assert e["url"] == "https://randomdice.gg/decks/guide/Fire%20Crit"
    assert e["footer"]["text"] == FOOTER_TEXT


def test_exactly_sixteen_fields_is_one_embed():
    g = display(rows=1, paragraphs=[f"p{i}" for i in range(15)])
    [e] = make_embeds([g])
    assert len(e["fields"]) == MAX_FIELDS
    assert "footer" in e


def test_split_into_two_embeds():
    g = display(rows=2, paragraphs=[f"p{i}" for i in range(20)])
    first, second = make_embeds([g])
    assert len(first["fields"]) == 16
    assert len(second["fields"]) == 6
    assert first["title"] and first["url"] and first["author"]
    assert "footer" not in first
    for key in ("title", "author", "url"):
        assert key not in second
    assert second["color"] == COLOR
    assert second["footer"]["text"] == FOOTER_TEXT
    assert second["fields"][-1]["value"] == "p19"


def test_embeds_flatten_in_guide_order():
    out = make_embeds([display(title="A"), display(title="B", paragraphs=[str(i) for i in range(20)]), display(title="C")])
    assert [e.get("title") for e in out] == ["A (PvP)", "B (PvP)", None, "C (PvP)"]


def test_guide_url_matches_encode_uri():
    assert guide_url("Crit & Joker / Co-op?") == "https://randomdice.gg/decks/guide/Crit%20&%20Joker%20/%20Co-op?"
    assert guide_url("Mimic — déjà") == "https://randomdice.gg/decks/guide/Mimic%20%E2%80%94%20d%C3%A9j%C3%A0"


def test_make_embeds_processes_when_no_input(monkeypatch):
    monkeypatch.setattr(embeds_mod, "process_data", lambda: [display()])
    assert len(make_embeds()) == 1


def test_render_text_lists_fields():
    text = render_text(make_embeds([display(paragraphs=["hello"])]))
    assert text.splitlines() == [
        "=== Embed 1/1 ===",
        "Fire Crit (PvP)",
        "https://randomdice.gg/decks/guide/Fire%20Crit",
        "[Guide] <:a:1> <:b:2>",
        "[Guide] hello",
        f"-- {FOOTER_TEXT}",
    ]


def test_render_json_keeps_unicode():
    assert BLANK_NAME in render_json(make_embeds([display(rows=2)]))
