"""Markdown syntax tree built from mistune's AST tokens."""

from __future__ import annotations

import html
from dataclasses import dataclass, field

import mistune

# GFM-flavoured parser returning the token list instead of HTML
_markdown = mistune.create_markdown(
    renderer="ast",
    plugins=["strikethrough", "table", "url", "task_lists"],
)

PARAGRAPH_TOKENS = ("paragraph", "block_text")
LIST_ITEM_TOKENS = ("list_item", "task_list_item")


@dataclass
class Root:
    children: list = field(default_factory=list)


@dataclass
class ListItem:
    # True / False for "- [x]" / "- [ ]", None for a plain list item
    checked: bool | None = None
    children: list = field(default_factory=list)


@dataclass
class Paragraph:
    children: list = field(default_factory=list)


@dataclass
class Text:
    value: str = ""


@dataclass
class Other:
    kind: str = ""
    children: list = field(default_factory=list)


def _node_from_token(token: dict):
    """Map a single mistune token to a node, without its children."""
    kind = token.get("type", "")
    if kind in LIST_ITEM_TOKENS:
        checked = None
        if kind == "task_list_item":
            checked = bool((token.get("attrs") or {}).get("checked"))
        return ListItem(checked=checked)
    if kind in PARAGRAPH_TOKENS:
        return Paragraph()
    if kind == "text":
        return Text(value=token.get("raw", ""))
    return Other(kind=kind)


def _merge_text_tokens(tokens: list[dict]) -> list[dict]:
    """
    Join runs of text and soft line breaks into one decoded text token.

    mistune splits a wrapped line, an escape or an entity into separate
    tokens; a GFM tree keeps them as one text leaf. Empty runs are dropped.
    """
    merged: list[dict] = []
    run: list[str] = []

    def flush():
        value = "".join(run)
        run.clear()
        if value:
            merged.append({"type": "text", "raw": value})

    for token in tokens:
        kind = token.get("type")
        if kind == "softbreak":
            run.append("\n")
        elif kind == "text":
            run.append(html.unescape(token.get("raw", "")))
        else:
            flush()
            merged.append(token)
    flush()
    return merged


def iter_children(node) -> list:
    """Return the children of a container node, or [] for leaves."""
    return getattr(node, "children", None) or []


def build_tree(tokens: list[dict]) -> Root:
    """
    Convert mistune tokens into a node tree.

    Uses an explicit worklist so deeply nested documents never hit the
    recursion limit. Sibling order is preserved.
    """
    root = Root()
    pending = [(token, root.children) for token in reversed(_merge_text_tokens(tokens))]
    while pending:
        token, siblings = pending.pop()
        node = _node_from_token(token)
        siblings.append(node)
        if isinstance(node, Text):
            continue
        for child in reversed(_merge_text_tokens(token.get("children") or [])):
            pending.append((child, node.children))
    return root


def parse_markdown(content: str) -> Root:
    """Parse GitHub-flavoured markdown into a node tree."""
    return build_tree(_markdown(content))
