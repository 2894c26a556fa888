import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from componentizer.adapters.config_store import YamlConfigStore
from componentizer.adapters.fs.locator import FileSystemTemplateLocator
from componentizer.adapters.render.renderer import TemplateRenderer, create_template_renderer


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.config_path = Path(os.environ.get("COMPONENTIZER_CONFIG", "componentizer.yaml"))
        # Relative template directories are resolved against the config file's directory.
        self.base_dir = self.config_path.resolve().parent


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Config ---
@lru_cache
def get_config_store(settings: Settings = Depends(get_settings)) -> YamlConfigStore:
    return YamlConfigStore.from_path(settings.config_path)


def get_template_dirs(
    settings: Settings = Depends(get_settings),
    store: YamlConfigStore = Depends(get_config_store),
) -> list[Path]:
    return [settings.base_dir / d for d in store.get_template_dirs()]


# --- Templates ---
def get_locator(
    template_dirs: list[Path] = Depends(get_template_dirs),
) -> FileSystemTemplateLocator:
    return FileSystemTemplateLocator(template_dirs)


def get_renderer(
    template_dirs: list[Path] = Depends(get_template_dirs),
) -> TemplateRenderer:
    return create_template_renderer(template_dirs)
