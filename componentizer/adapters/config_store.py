from collections.abc import Mapping
from pathlib import Path

from componentizer.components.build import TemplateSettings
from componentizer.components.ordering import ComponentTemplate
from componentizer.domain.entities import ComponentId, LocationPolicy
from componentizer.rules.loader import load_config
from componentizer.rules.models import ComponentizerConfig


class YamlConfigStore:
    """Config store backed by a validated configuration file."""

    def __init__(self, config: ComponentizerConfig):
        self.config = config
        self._templates = {
            component_id: ComponentTemplate(template=field.template, title=field.title)
            for component_id, field in config.component_fields.items()
        }

    @classmethod
    def from_path(cls, path: Path) -> "YamlConfigStore":
        return cls(load_config(path))

    def get_component_template_map(self) -> Mapping[ComponentId, ComponentTemplate]:
        return self._templates

    def get_advanced_settings(self) -> TemplateSettings:
        advanced = self.config.advanced_settings
        return TemplateSettings(
            component_path=advanced.component_path,
            structured_path=advanced.structured_path,
            programmatic_extension=advanced.programmatic_extension,
            structured_extension=advanced.structured_extension,
        )

    def get_location_order(self) -> LocationPolicy:
        orders = self.config.location_orders
        return {"top": list(orders.top), "bottom": list(orders.bottom)}

    def get_visible_on_listing_ids(self) -> set[ComponentId]:
        return set(self.config.visible_on_archive)

    def get_template_dirs(self) -> list[str]:
        return list(self.config.advanced_settings.template_dirs)
