"""Markdown to Block Kit block conversion."""

from loguru import logger

from mdblocks.blocks import divider, header, image, section, table
from mdblocks.models import (
    Block,
    DividerBlock,
    HeaderBlock,
    ImageBlock,
    RichTextBlock,
    SectionBlock,
    TableBlock,
    blocks_from_payload,
    blocks_to_json,
    blocks_to_payload,
)
from mdblocks.options import ListOptions, ParsingOptions
from mdblocks.parser import parse_markdown
from mdblocks.transformer import BlockTransformer, parse_blocks

# Library logging stays silent until an application opts in (see configure_logging)
logger.disable("mdblocks")


def markdown_to_blocks(body: str, options: ParsingOptions | None = None) -> list[Block]:
    """Parse markdown text and convert it to blocks."""
    return parse_blocks(parse_markdown(body), options)


__all__ = [
    "markdown_to_blocks",
    # Parser
    "parse_markdown",
    # Transformer
    "BlockTransformer",
    "parse_blocks",
    # Options
    "ParsingOptions",
    "ListOptions",
    # Constructors
    "section",
    "header",
    "image",
    "divider",
    "table",
    # Models
    "Block",
    "SectionBlock",
    "HeaderBlock",
    "ImageBlock",
    "DividerBlock",
    "TableBlock",
    "RichTextBlock",
    "blocks_to_payload",
    "blocks_to_json",
    "blocks_from_payload",
]
