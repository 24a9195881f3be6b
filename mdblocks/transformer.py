"""Transform markdown AST to Block Kit blocks.

Walks the markdown-it-py SyntaxTreeNode and produces an ordered list of blocks.
Every top-level node contributes zero or more blocks, in document order; node
types without a handler contribute nothing.
"""

from dataclasses import dataclass
from typing import Literal

from bs4 import BeautifulSoup, ParserRejectedMarkup
from loguru import logger
from markdown_it.tree import SyntaxTreeNode

from mdblocks.blocks import Alignment, divider, header, image, section, table
from mdblocks.exceptions import MalformedTokenError
from mdblocks.inline import extract_plain_text, get_attr, plain_text, render_mrkdwn, render_rich_text
from mdblocks.models import (
    Block,
    DividerBlock,
    HeaderBlock,
    ImageBlock,
    RichTextBlock,
    RichTextList,
    RichTextSection,
    RichTextText,
    SectionBlock,
    TableBlock,
)
from mdblocks.options import ListOptions, ParsingOptions

ListStyle = Literal["bullet", "ordered"]

_LIST_TYPES = ("bullet_list", "ordered_list")

_ALIGNMENTS: dict[str, Alignment] = {
    "text-align:left": "left",
    "text-align:center": "center",
    "text-align:right": "right",
}

# Checkbox token inserted by the tasklists plugin at the start of a task item
_CHECKBOX_PREFIX = '<input class="task-list-item-checkbox"'
_CHECKED_ATTR = 'checked="checked"'


def inline_children(node: SyntaxTreeNode) -> list[SyntaxTreeNode]:
    """Phrasing children of a block node that holds inline content."""
    if not node.children or node.children[0].type != "inline":
        raise MalformedTokenError(node.type, "inline")
    return node.children[0].children


# === LISTS ===


@dataclass(frozen=True)
class ListRun:
    """One flattened list item, tagged with its list style and nesting depth."""

    style: ListStyle
    indent: int
    section: RichTextSection


def _is_checkbox(node: SyntaxTreeNode) -> bool:
    return node.type == "html_inline" and node.content.startswith(_CHECKBOX_PREFIX)


def render_list_item(item: SyntaxTreeNode, options: ListOptions) -> RichTextSection:
    """Render the first child of a list item as a rich text section.

    Nested lists and any later children are not part of the item's own section.
    """
    if not item.children:
        return RichTextSection()

    first = item.children[0]
    if first.type != "paragraph":
        if first.children and first.children[0].type == "inline":
            text = plain_text(inline_children(first))
        else:
            text = first.content
        return RichTextSection(elements=[RichTextText(text=text)])

    children = inline_children(first)
    checked: bool | None = None
    if children and _is_checkbox(children[0]):
        checked = _CHECKED_ATTR in children[0].content
        children = children[1:]

    elements = [leaf for child in children for leaf in render_rich_text(child)]

    if checked is not None:
        # Drop the space left behind by the "[ ]" marker
        if elements and isinstance(elements[0], RichTextText):
            stripped = elements[0].text.lstrip()
            if stripped:
                elements[0] = elements[0].model_copy(update={"text": stripped})
            else:
                elements.pop(0)
        prefix = options.checkbox_prefix(checked)
        if prefix:
            elements.insert(0, RichTextText(text=prefix))

    return RichTextSection(elements=elements)


def flatten_list(node: SyntaxTreeNode, options: ListOptions, depth: int = 0) -> list[ListRun]:
    """Flatten a (possibly nested) list into depth-tagged runs, depth-first."""
    style: ListStyle = "ordered" if node.type == "ordered_list" else "bullet"
    runs: list[ListRun] = []

    for item in node.children:
        runs.append(ListRun(style=style, indent=depth, section=render_list_item(item, options)))

        for child in item.children[1:]:
            if child.type in _LIST_TYPES:
                runs.extend(flatten_list(child, options, depth + 1))

    return runs


def group_runs(runs: list[ListRun]) -> list[RichTextList]:
    """Group adjacent runs with the same style and indent into list elements.

    Only neighbours merge: a run never joins an earlier list it is not adjacent to.
    """
    lists: list[RichTextList] = []
    for run in runs:
        last = lists[-1] if lists else None
        if last and last.style == run.style and (last.indent or 0) == run.indent:
            last.elements.append(run.section)
        else:
            lists.append(
                RichTextList(
                    style=run.style,
                    indent=run.indent if run.indent > 0 else None,
                    elements=[run.section],
                )
            )
    return lists


# === RAW HTML ===


def extract_html_images(raw: str) -> list[ImageBlock]:
    """Extract image blocks from top-level <img> tags in raw HTML.

    Anything else in the markup is ignored; markup without usable images
    yields no blocks.
    """
    try:
        soup = BeautifulSoup(raw, "html.parser")
    except ParserRejectedMarkup as e:
        logger.debug(f"Dropping unparseable HTML block: {e}")
        return []

    blocks = []
    for tag in soup.find_all("img", recursive=False):
        url = tag.get("src")
        if not url:
            continue
        blocks.append(image(str(url), str(tag.get("alt") or url)))

    if not blocks:
        logger.debug(f"Dropping HTML block without images: {raw[:80]!r}")
    return blocks


# === TRANSFORMER ===


class BlockTransformer:
    """Transforms markdown AST to a list of blocks."""

    def __init__(self, options: ParsingOptions | None = None):
        self.options = options or ParsingOptions()

    def transform(self, ast: SyntaxTreeNode) -> list[Block]:
        """Transform AST root to blocks."""
        blocks: list[Block] = []
        for child in ast.children:
            blocks.extend(self._transform_node(child))
        return blocks

    def _transform_node(self, node: SyntaxTreeNode) -> list[Block]:
        """Transform a single top-level node to zero or more blocks."""
        handlers = {
            "heading": self._transform_heading,
            "paragraph": self._transform_paragraph,
            "fence": self._transform_code,
            "code_block": self._transform_code,
            "blockquote": self._transform_blockquote,
            "bullet_list": self._transform_list,
            "ordered_list": self._transform_list,
            "table": self._transform_table,
            "hr": self._transform_hr,
            "html_block": self._transform_html,
        }

        handler = handlers.get(node.type)
        if handler:
            return handler(node)

        logger.debug(f"Skipping unsupported node type {node.type!r}")
        return []

    def _transform_heading(self, node: SyntaxTreeNode) -> list[HeaderBlock]:
        return [header(plain_text(inline_children(node)))]

    def _transform_paragraph(self, node: SyntaxTreeNode) -> list[SectionBlock | ImageBlock]:
        return self._build_sections(self._accumulate_phrasing(inline_children(node)))

    def _accumulate_phrasing(self, children: list[SyntaxTreeNode]) -> list[str | ImageBlock]:
        """Fold phrasing nodes into runs of mrkdwn text separated by images.

        Consecutive non-image nodes always extend the same text run; an image
        closes it, so text after an image starts a new run.
        """
        runs: list[str | ImageBlock] = []
        for child in children:
            if child.type == "image":
                src = get_attr(child, "src") or ""
                title = get_attr(child, "title")
                runs.append(image(src, child.content or title or src, title))
            elif runs and isinstance(runs[-1], str):
                runs[-1] += render_mrkdwn(child)
            else:
                runs.append(render_mrkdwn(child))
        return runs

    def _build_sections(self, runs: list[str | ImageBlock]) -> list[SectionBlock | ImageBlock]:
        return [section(run) if isinstance(run, str) else run for run in runs]

    def _transform_code(self, node: SyntaxTreeNode) -> list[SectionBlock]:
        """Transform fenced or indented code block. The info string is not kept."""
        content = node.content.removesuffix("\n")
        return [section(f"```\n{content}\n```")]

    def _transform_blockquote(self, node: SyntaxTreeNode) -> list[SectionBlock | ImageBlock]:
        """Transform blockquote. Only direct paragraph children are rendered."""
        blocks: list[SectionBlock | ImageBlock] = []
        for child in node.children:
            if child.type != "paragraph":
                logger.debug(f"Skipping {child.type!r} inside blockquote")
                continue

            runs = self._accumulate_phrasing(inline_children(child))
            quoted = [_quote(run) if isinstance(run, str) and "\n" in run else run for run in runs]
            blocks.extend(self._build_sections(quoted))
        return blocks

    def _transform_list(self, node: SyntaxTreeNode) -> list[RichTextBlock]:
        """Transform list (bullet or ordered) into one rich text block."""
        runs = flatten_list(node, self.options.lists)
        return [RichTextBlock(elements=group_runs(runs))]

    def _transform_table(self, node: SyntaxTreeNode) -> list[TableBlock]:
        """Transform table node. Cells keep their text only."""
        thead = next((child for child in node.children if child.type == "thead"), None)
        if thead is None or not thead.children:
            raise MalformedTokenError(node.type, "thead")

        header_row = thead.children[0]
        alignments = [_ALIGNMENTS.get(str(th.attrs.get("style", "")), "left") for th in header_row.children]

        rows = [[self._cell_text(th) for th in header_row.children]]
        for child in node.children:
            if child.type == "tbody":
                for tr in child.children:
                    rows.append([self._cell_text(td) for td in tr.children])

        return [table(rows, alignments)]

    def _cell_text(self, cell: SyntaxTreeNode) -> str:
        texts = []
        for child in inline_children(cell):
            if child.type == "image":
                texts.append(get_attr(child, "src") or get_attr(child, "title") or child.content or "image")
            else:
                texts.append("".join(extract_plain_text(child)))
        return " ".join(text for text in texts if text)

    def _transform_hr(self, node: SyntaxTreeNode) -> list[DividerBlock]:
        return [divider()]

    def _transform_html(self, node: SyntaxTreeNode) -> list[ImageBlock]:
        return extract_html_images(node.content)


def _quote(text: str) -> str:
    return "> " + text.replace("\n", "\n> ")


def parse_blocks(ast: SyntaxTreeNode, options: ParsingOptions | None = None) -> list[Block]:
    """Transform markdown AST to blocks."""
    return BlockTransformer(options).transform(ast)
