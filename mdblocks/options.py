from pydantic import BaseModel, ConfigDict


class ListOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    checked_prefix: str = ""  # Prepended to [x] task items
    unchecked_prefix: str = ""  # Prepended to [ ] task items

    def checkbox_prefix(self, checked: bool) -> str:
        return self.checked_prefix if checked else self.unchecked_prefix


class ParsingOptions(BaseModel):
    """Options controlling markdown to block conversion."""

    model_config = ConfigDict(frozen=True)

    lists: ListOptions = ListOptions()
