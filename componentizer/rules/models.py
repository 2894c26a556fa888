from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator

from componentizer.domain.entities import normalize_id

# "7" and 7 load as the same key.
ComponentKey = Annotated[int | str, AfterValidator(normalize_id)]


class ComponentField(BaseModel):
    template: str
    title: str | None = None

    model_config = ConfigDict(extra="allow")


class AdvancedSettings(BaseModel):
    component_path: str = "components"
    structured_path: str = "views"
    programmatic_extension: str = "py"
    structured_extension: str = "html"
    # Searched in order, like a child theme before its parent.
    template_dirs: list[str] = Field(default_factory=lambda: ["templates"])


class LocationOrders(BaseModel):
    top: list[ComponentKey] = Field(default_factory=list)
    bottom: list[ComponentKey] = Field(default_factory=list)


class ReadingSettings(BaseModel):
    page_for_posts: ComponentKey | None = None
    page_on_front: ComponentKey | None = None


class ComponentizerConfig(BaseModel):
    component_fields: dict[ComponentKey, ComponentField] = Field(default_factory=dict)
    advanced_settings: AdvancedSettings = Field(default_factory=AdvancedSettings)
    location_orders: LocationOrders = Field(default_factory=LocationOrders)
    visible_on_archive: list[ComponentKey] = Field(default_factory=list)
    reading: ReadingSettings = Field(default_factory=ReadingSettings)

    @field_validator("location_orders", mode="before")
    @classmethod
    def _empty_location_orders(cls, value: object) -> object:
        # Stored as an empty string before any order was saved.
        if value in (None, ""):
            return {}
        return value

    @field_validator("visible_on_archive", mode="before")
    @classmethod
    def _empty_visible_on_archive(cls, value: object) -> object:
        if value in (None, ""):
            return []
        return value
