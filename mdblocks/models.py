"""Data models for the Block Kit payload produced by the transformer.

Every block carries a ``type`` literal so the union can be discriminated when
loading payloads back. Optional fields default to None and are dropped on
serialization (``exclude_none=True``), matching the minimal payloads the
rendering surface expects.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter

# === TEXT OBJECTS ===


class MrkdwnText(BaseModel):
    type: Literal["mrkdwn"] = "mrkdwn"
    text: str


class PlainText(BaseModel):
    type: Literal["plain_text"] = "plain_text"
    text: str


# === RICH TEXT ===


class RichTextStyle(BaseModel):
    """Style flags for a rich text leaf. Unset flags are None, never False."""

    bold: bool | None = None
    italic: bool | None = None
    strike: bool | None = None
    code: bool | None = None


class RichTextText(BaseModel):
    type: Literal["text"] = "text"
    text: str
    style: RichTextStyle | None = None


class RichTextLink(BaseModel):
    type: Literal["link"] = "link"
    url: str
    text: str
    style: RichTextStyle | None = None


RichTextElement = Annotated[RichTextText | RichTextLink, Field(discriminator="type")]


class RichTextSection(BaseModel):
    type: Literal["rich_text_section"] = "rich_text_section"
    elements: list[RichTextElement] = Field(default_factory=list)


class RichTextList(BaseModel):
    type: Literal["rich_text_list"] = "rich_text_list"
    style: Literal["bullet", "ordered"]
    indent: int | None = None  # Omitted at depth 0
    elements: list[RichTextSection]


# === BLOCK TYPES ===


class SectionBlock(BaseModel):
    type: Literal["section"] = "section"
    text: MrkdwnText


class HeaderBlock(BaseModel):
    type: Literal["header"] = "header"
    text: PlainText


class ImageBlock(BaseModel):
    type: Literal["image"] = "image"
    image_url: str
    alt_text: str
    title: PlainText | None = None


class DividerBlock(BaseModel):
    type: Literal["divider"] = "divider"


class RawTextCell(BaseModel):
    type: Literal["raw_text"] = "raw_text"
    text: str


class ColumnSetting(BaseModel):
    align: Literal["left", "center", "right"] = "left"


class TableBlock(BaseModel):
    type: Literal["table"] = "table"
    rows: list[list[RawTextCell]]
    column_settings: list[ColumnSetting] | None = None


class RichTextBlock(BaseModel):
    type: Literal["rich_text"] = "rich_text"
    elements: list[RichTextList]


Block = Annotated[
    SectionBlock | HeaderBlock | ImageBlock | DividerBlock | TableBlock | RichTextBlock,
    Field(discriminator="type"),
]

_blocks_adapter: TypeAdapter[list[Block]] = TypeAdapter(list[Block])


def blocks_to_payload(blocks: list[Block]) -> list[dict]:
    """Serialize blocks to plain dicts, omitting unset optional fields."""
    return _blocks_adapter.dump_python(blocks, exclude_none=True)


def blocks_to_json(blocks: list[Block], indent: int | None = None) -> str:
    """Serialize blocks to a JSON string, omitting unset optional fields."""
    return _blocks_adapter.dump_json(blocks, exclude_none=True, indent=indent).decode()


def blocks_from_payload(payload: list[dict]) -> list[Block]:
    """Load blocks back from a serialized payload."""
    return _blocks_adapter.validate_python(payload)
