# ABOUTME: Data models for the item catalogue and the wiki lookup error type
# ABOUTME: ItemDetails holds optional scraped fields; ItemRecord is the serialised catalogue entry

from pydantic import BaseModel

NAME_NOT_FOUND = "未找到道具名称"
QUALITY_NOT_FOUND = 0


class WikiResponseError(Exception):
    """Raised when the wiki API response does not contain a rendered fragment."""

    pass


class ItemRecord(BaseModel):
    """One entry of the item catalogue written to items.json."""

    id: str
    name: str = NAME_NOT_FOUND
    quality: str | int = QUALITY_NOT_FOUND


class ItemDetails(BaseModel):
    """Fields scraped from a wiki fragment. None means the element was absent."""

    name: str | None = None
    quality: str | None = None

    @property
    def has_name(self) -> bool:
        return self.name is not None

    @property
    def has_quality(self) -> bool:
        return self.quality is not None

    def to_record(self, key: str) -> ItemRecord:
        return ItemRecord(
            id=key,
            name=self.name if self.name is not None else NAME_NOT_FOUND,
            quality=self.quality if self.quality is not None else QUALITY_NOT_FOUND,
        )
