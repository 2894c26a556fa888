"""
Editor Preview API Routes.

Shows which components, suffixes and templates a subject resolves to, and
renders the result, so editors can check a page before publishing.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from componentizer.adapters.config_store import YamlConfigStore
from componentizer.adapters.context import RequestContext
from componentizer.adapters.fs.locator import FileSystemTemplateLocator
from componentizer.adapters.memory import InMemoryContentRepo
from componentizer.adapters.render.renderer import TemplateRenderer
from componentizer.api.deps import get_config_store, get_locator, get_renderer
from componentizer.components.build import (
    BuildInput,
    BuildValidationError,
    SelectTemplatesInput,
    run_build,
    run_select_templates,
)
from componentizer.domain.entities import SelectedTemplate
from componentizer.rules.models import ComponentKey

router = APIRouter()


# --- Request/Response Models ---


class PreviewRequest(BaseModel):
    """Request describing the subject and view to preview."""

    subject_id: ComponentKey | None = Field(default=None, description="Subject being rendered")
    post_type: str | None = None
    editor: bool = Field(default=False, description="Resolve as the editor screen")

    singular: bool = False
    page: bool = False
    attachment: bool = False
    search: bool = False
    not_found: bool = False
    home: bool = False
    front_page: bool = False

    listing: bool = False
    author: bool = False
    category: bool = False
    tag: bool = False
    taxonomy: bool = False
    taxonomy_slug: str | None = None
    date: bool = False
    paged: bool = False

    template_slug: str | None = Field(default=None, description="Custom template of the subject")
    component_ids: list[ComponentKey] | None = Field(
        default=None, description="Saved component order of the subject"
    )

    components: list[str] | None = Field(default=None, description="Component override")
    suffixes: list[str] | None = Field(default=None, description="Suffix override")
    extra_suffixes: list[str] = Field(default_factory=list, description="Suffixes to prepend")


class TemplateRef(BaseModel):
    """A selected template."""

    component: str
    path: str
    kind: str


class ResolveResponse(BaseModel):
    """What a build of the subject would render."""

    components: list[str]
    suffixes: list[str]
    templates: list[TemplateRef]


class BuildResponse(BaseModel):
    """Rendered preview."""

    html: str
    templates: list[TemplateRef]


# --- Helper Functions ---


def build_context(request: PreviewRequest, store: YamlConfigStore) -> RequestContext:
    """Request context for a preview request."""
    reading = store.config.reading
    template_slugs: dict[int | str, str] = {}
    if request.subject_id is not None and request.template_slug:
        template_slugs[request.subject_id] = request.template_slug

    return RequestContext(
        subject_id=request.subject_id,
        post_type=request.post_type,
        editor=request.editor,
        singular=request.singular,
        page=request.page,
        attachment=request.attachment,
        search=request.search,
        not_found=request.not_found,
        home=request.home,
        front_page=request.front_page,
        listing=request.listing,
        author=request.author,
        category=request.category,
        tag=request.tag,
        taxonomy=request.taxonomy,
        taxonomy_slug=request.taxonomy_slug,
        date=request.date,
        paged=request.paged,
        posts_page=reading.page_for_posts,
        static_front_page=reading.page_on_front,
        template_slugs=template_slugs,
    )


def build_content_repo(request: PreviewRequest, store: YamlConfigStore) -> InMemoryContentRepo:
    """Content repository seeded with the request's saved order."""
    orders: dict[int | str, list[int | str]] = {}
    if request.subject_id is not None and request.component_ids:
        orders[request.subject_id] = request.component_ids
    return InMemoryContentRepo(
        orders=orders,
        configured=list(store.get_component_template_map()),
    )


def to_refs(templates: tuple[SelectedTemplate, ...]) -> list[TemplateRef]:
    return [TemplateRef(component=t.component, path=t.path, kind=t.kind) for t in templates]


def _optional_tuple(values: list[str] | None) -> tuple[str, ...] | None:
    return tuple(values) if values is not None else None


def raise_for_errors(errors: list[BuildValidationError]) -> None:
    if errors:
        raise HTTPException(
            status_code=400,
            detail=[
                {"code": err.code, "message": err.message, "field": err.field} for err in errors
            ],
        )


# --- Routes ---


@router.post("/preview/resolve", response_model=ResolveResponse)
def preview_resolve(
    request: PreviewRequest,
    store: YamlConfigStore = Depends(get_config_store),
    locator: FileSystemTemplateLocator = Depends(get_locator),
    renderer: TemplateRenderer = Depends(get_renderer),
) -> ResolveResponse:
    """Resolve components, suffixes and templates without rendering."""
    inp = SelectTemplatesInput(
        subject_id=request.subject_id,
        components=_optional_tuple(request.components),
        suffixes=_optional_tuple(request.suffixes),
        extra_suffixes=tuple(request.extra_suffixes),
    )
    result = run_select_templates(
        inp,
        config=store,
        content_repo=build_content_repo(request, store),
        context=build_context(request, store),
        locator=locator,
        renderer=renderer,
    )
    raise_for_errors(result.errors)

    return ResolveResponse(
        components=list(result.components),
        suffixes=list(result.suffixes),
        templates=to_refs(result.templates),
    )


@router.post("/preview/build", response_model=BuildResponse)
def preview_build(
    request: PreviewRequest,
    store: YamlConfigStore = Depends(get_config_store),
    locator: FileSystemTemplateLocator = Depends(get_locator),
    renderer: TemplateRenderer = Depends(get_renderer),
) -> BuildResponse:
    """Render the subject's components."""
    inp = BuildInput(
        subject_id=request.subject_id,
        components=_optional_tuple(request.components),
        suffixes=_optional_tuple(request.suffixes),
        extra_suffixes=tuple(request.extra_suffixes),
    )
    result = run_build(
        inp,
        config=store,
        content_repo=build_content_repo(request, store),
        context=build_context(request, store),
        locator=locator,
        renderer=renderer,
    )
    raise_for_errors(result.errors)

    return BuildResponse(html=result.html, templates=to_refs(result.templates))
