import re
from typing import List
from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import Comment, Declaration, Doctype, ProcessingInstruction

BLOCK_TAGS = {
    "p", "div", "section", "article", "header", "footer", "blockquote", "pre",
    "h1", "h2", "h3", "h4", "h5", "h6", "table", "tr", "hr", "dl", "dt", "dd",
}
CELL_TAGS = {"td", "th"}
SKIP_TAGS = {"script", "style", "head", "title", "template"}
_WS = re.compile(r"\s+")


def _line_break(out: List[str]) -> None:
    # start a new line unless the text so far already ends one
    for chunk in reversed(out):
        if chunk.strip(" "):
            if not chunk.rstrip(" ").endswith("\n"):
                out.append("\n")
            return


def _walk(node: Tag, out: List[str]) -> None:
    for child in node.children:
        _render(child, out)


def _render(child, out: List[str]) -> None:
    if isinstance(child, (Comment, Declaration, Doctype, ProcessingInstruction)):
        return
    if isinstance(child, NavigableString):
        # HTML whitespace (including &nbsp;) renders as single spaces
        out.append(_WS.sub(" ", str(child)))
        return
    if not isinstance(child, Tag) or child.name in SKIP_TAGS:
        return

    name = child.name
    if name == "br":
        out.append("\n")
    elif name == "img":
        out.append(child.get("alt", ""))
    elif name in ("ul", "ol"):
        out.append("\n")
        n = 0
        for item in child.children:
            if isinstance(item, Tag) and item.name == "li":
                n += 1
                _line_break(out)
                out.append(f"{n}. " if name == "ol" else "- ")
                _walk(item, out)
                out.append("\n")
            else:
                _render(item, out)
        out.append("\n")
    elif name == "li":
        # stray <li> outside a list
        out.append("\n- ")
        _walk(child, out)
        out.append("\n")
    elif name in CELL_TAGS:
        out.append(" ")
        _walk(child, out)
        out.append(" ")
    elif name in BLOCK_TAGS:
        out.append("\n")
        _walk(child, out)
        out.append("\n")
    else:
        # inline markup, <a> included: keep the visible text, drop the href
        _walk(child, out)


def html_to_text(html: str) -> str:
    """Render guide HTML as plain text, one line per visual line."""
    soup = BeautifulSoup(html or "", "html.parser")
    out: List[str] = []
    _walk(soup, out)
    lines = [" ".join(line.split()) for line in "".join(out).split("\n")]
    return "\n".join(lines).strip()


def to_paragraphs(html: str) -> List[str]:
    # empty entries are kept; the embed renderer drops them
    return html_to_text(html).split("\n")
