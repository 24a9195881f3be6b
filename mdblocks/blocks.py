"""Constructors for output blocks.

All constructors are total: values over the platform limits are truncated,
never rejected.
"""

from typing import Literal

from mdblocks.constants import (
    HEADER_TEXT_MAX_LENGTH,
    IMAGE_ALT_TEXT_MAX_LENGTH,
    IMAGE_TITLE_MAX_LENGTH,
    IMAGE_URL_MAX_LENGTH,
    SECTION_TEXT_MAX_LENGTH,
    TABLE_MAX_COLUMNS,
    TABLE_MAX_ROWS,
)
from mdblocks.models import (
    ColumnSetting,
    DividerBlock,
    HeaderBlock,
    ImageBlock,
    MrkdwnText,
    PlainText,
    RawTextCell,
    SectionBlock,
    TableBlock,
)

Alignment = Literal["left", "center", "right"]


def section(text: str) -> SectionBlock:
    return SectionBlock(text=MrkdwnText(text=text[:SECTION_TEXT_MAX_LENGTH]))


def header(text: str) -> HeaderBlock:
    return HeaderBlock(text=PlainText(text=text[:HEADER_TEXT_MAX_LENGTH]))


def divider() -> DividerBlock:
    return DividerBlock()


def image(url: str, alt_text: str, title: str | None = None) -> ImageBlock:
    """Build an image block. An empty title is treated as no title."""
    return ImageBlock(
        image_url=url[:IMAGE_URL_MAX_LENGTH],
        alt_text=alt_text[:IMAGE_ALT_TEXT_MAX_LENGTH],
        title=PlainText(text=title[:IMAGE_TITLE_MAX_LENGTH]) if title else None,
    )


def table(rows: list[list[str]], alignments: list[Alignment] | None = None) -> TableBlock:
    """Build a table block from rows of cell text.

    Rows past TABLE_MAX_ROWS and cells past TABLE_MAX_COLUMNS are dropped.
    Column settings are omitted when no alignments are given.
    """
    cells = [[RawTextCell(text=text) for text in row[:TABLE_MAX_COLUMNS]] for row in rows[:TABLE_MAX_ROWS]]
    column_settings = None
    if alignments:
        column_settings = [ColumnSetting(align=align) for align in alignments[:TABLE_MAX_COLUMNS]]
    return TableBlock(rows=cells, column_settings=column_settings)
