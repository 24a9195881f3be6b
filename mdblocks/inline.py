"""Renderers for inline (phrasing) nodes.

Three views of the same inline tree:
- plain text: displayable text only, styling discarded
- mrkdwn: the surface's inline markup (*bold*, _italic_, ~strike~, `code`, <url|label>)
- rich text: leaves carrying the union of every enclosing style

Images are never rendered as mrkdwn; callers turn them into image blocks.
"""

from typing import cast

from markdown_it.tree import SyntaxTreeNode

from mdblocks.models import RichTextElement, RichTextLink, RichTextStyle, RichTextText

Style = frozenset[str]
NO_STYLE: Style = frozenset()

_CONTAINER_TYPES = ("link", "em", "strong", "s")
_MRKDWN_MARKS = {"strong": "*", "em": "_", "s": "~"}
_STYLE_FLAGS = {"strong": "bold", "em": "italic", "s": "strike"}

# The surface only wants &, < and > escaped
_MRKDWN_ESCAPES = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;"})


def escape_mrkdwn(text: str) -> str:
    return text.translate(_MRKDWN_ESCAPES)


def get_attr(node: SyntaxTreeNode, name: str) -> str | None:
    """String attribute of a node, or None when unset."""
    return cast(str | None, node.attrs.get(name))


def image_text(node: SyntaxTreeNode) -> str:
    """Title of an image, falling back to its URL."""
    return get_attr(node, "title") or get_attr(node, "src") or ""


# === PLAIN TEXT ===


def extract_plain_text(node: SyntaxTreeNode) -> list[str]:
    """Extract displayable text fragments from an inline node."""
    if node.type in _CONTAINER_TYPES:
        return [part for child in node.children for part in extract_plain_text(child)]
    elif node.type == "hardbreak":
        return []
    elif node.type == "softbreak":
        return ["\n"]
    elif node.type == "image":
        return [image_text(node)]
    elif node.type == "code_inline":
        # Literal source, backticks included
        return [f"{node.markup}{node.content}{node.markup}"]
    elif node.type in ("text", "html_inline"):
        return [node.content]
    return []


def plain_text(nodes: list[SyntaxTreeNode]) -> str:
    return "".join(part for node in nodes for part in extract_plain_text(node))


# === MRKDWN ===


def render_mrkdwn(node: SyntaxTreeNode) -> str:
    """Render an inline node to mrkdwn. Unsupported node types render empty."""
    if node.type in _MRKDWN_MARKS:
        mark = _MRKDWN_MARKS[node.type]
        return f"{mark}{''.join(render_mrkdwn(c) for c in node.children)}{mark}"
    elif node.type == "link":
        # Trailing space keeps the closing ">" from running into the next token
        label = "".join(render_mrkdwn(c) for c in node.children)
        return f"<{get_attr(node, 'href') or ''}|{label}> "
    elif node.type == "code_inline":
        return f"`{escape_mrkdwn(node.content)}`"
    elif node.type == "text":
        return escape_mrkdwn(node.content)
    elif node.type == "softbreak":
        return "\n"
    return ""


# === RICH TEXT ===


def to_rich_text_style(style: Style) -> RichTextStyle | None:
    """Convert a style set to its payload form; an empty set has no payload."""
    if not style:
        return None
    return RichTextStyle(**dict.fromkeys(style, True))


def render_rich_text(node: SyntaxTreeNode, style: Style = NO_STYLE) -> list[RichTextElement]:
    """Render an inline node to rich text leaves.

    Styling nodes never emit leaves of their own: they pass the union of the
    inherited style and their flag down to every child.
    """
    if node.type in _STYLE_FLAGS:
        child_style = style | {_STYLE_FLAGS[node.type]}
        return [leaf for child in node.children for leaf in render_rich_text(child, child_style)]
    elif node.type == "code_inline":
        return [RichTextText(text=node.content, style=to_rich_text_style(style | {"code"}))]
    elif node.type == "link":
        # Link labels keep only the inherited style, not their own nested styling
        return [
            RichTextLink(
                url=get_attr(node, "href") or "",
                text=plain_text(node.children),
                style=to_rich_text_style(style),
            )
        ]
    elif node.type == "text":
        # Emphasis delimiters leave empty text nodes behind
        if not node.content:
            return []
        return [RichTextText(text=node.content, style=to_rich_text_style(style))]
    elif node.type in ("hardbreak", "softbreak"):
        return [RichTextText(text="\n")]
    elif node.type == "image":
        return [RichTextText(text=image_text(node))]
    elif node.type == "html_inline":
        return [RichTextText(text=node.content)]
    return []
