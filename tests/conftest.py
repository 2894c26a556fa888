from pathlib import Path

import pytest

from componentizer.adapters.config_store import YamlConfigStore
from componentizer.rules.loader import parse_config

CONFIG_TEXT = """
component_fields:
  1:
    template: hero
    title: Hero
  2:
    template: content
  3:
    template: gallery
  4:
    template: call-to-action
  5:
    template: footer-links

advanced_settings:
  component_path: components
  structured_path: views
  programmatic_extension: py
  structured_extension: html
  template_dirs:
    - child
    - parent

location_orders:
  top: [1]
  bottom: [5, 4]

visible_on_archive: [1, 2]

reading:
  page_for_posts: 10
  page_on_front: 2
"""

TEMPLATES = {
    "parent/components/hero.py": (
        "def render(context):\n"
        "    return '<header>' + str(context['component']) + '</header>'\n"
    ),
    "child/components/hero-single.py": (
        "def render(context):\n"
        "    return '<header class=\"single\">' + str(context['subject_id']) + '</header>'\n"
    ),
    "parent/views/content.html": "<main>{{ component }}</main>",
    "parent/views/content-archive.html": "<ul>{{ suffixes|join(',') }}</ul>",
    "child/views/footer-links.html": "<footer>{{ component }}</footer>",
}


@pytest.fixture
def config_text() -> str:
    return CONFIG_TEXT


@pytest.fixture
def config_store() -> YamlConfigStore:
    """Config store for the test configuration."""
    return YamlConfigStore(parse_config(CONFIG_TEXT))


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """
    Child and parent template directories.

    hero has a generic template in the parent and a single-view template in the
    child. content and footer-links are Jinja2 templates. gallery and
    call-to-action have no templates.
    """
    for rel, body in TEMPLATES.items():
        target = tmp_path / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(body)
    return tmp_path


@pytest.fixture
def template_dirs(template_root: Path) -> list[Path]:
    return [template_root / "child", template_root / "parent"]
