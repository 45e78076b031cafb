# pagehost/domain/content.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

# Fields a page draft can override, in the order they are reported
OVERRIDABLE_FIELDS: Tuple[str, ...] = (
    "html_content",
    "css_content",
    "js_content",
    "meta_title",
    "meta_description",
    "meta_keywords",
    "og_image",
    "canonical_url",
)

DRAFT_FIELDS: Tuple[str, ...] = tuple(f"{name}_draft" for name in OVERRIDABLE_FIELDS)

COMPONENT_OVERRIDABLE_FIELDS: Tuple[str, ...] = ("html_content", "css_content")


def draft_field(name: str) -> str:
    return f"{name}_draft"


def effective_content(
    record: Any,
    *,
    preview: bool = False,
    fields: Tuple[str, ...] = OVERRIDABLE_FIELDS,
) -> Dict[str, Any]:
    """
    Build the effective view of a record's content fields.

    Published values are returned unless preview is requested and the
    record carries a draft. In that case each field falls back to its
    draft value only when the draft value is non-empty.
    """
    use_draft = preview and bool(getattr(record, "has_draft", False))

    content: Dict[str, Any] = {}
    for name in fields:
        published = getattr(record, name)
        if use_draft:
            content[name] = getattr(record, draft_field(name)) or published
        else:
            content[name] = published
    return content


@dataclass
class ResolvedPage:
    """
    A page row plus the content a reader should see.

    `content` only ever holds OVERRIDABLE_FIELDS; metadata (slug, title,
    flags) is read from `page`, draft columns are never copied out.
    """
    page: Any
    content: Dict[str, Any]
    is_preview: bool = False

    @property
    def id(self) -> str:
        return self.page.id

    @property
    def slug(self) -> str:
        return self.page.slug

    @property
    def category(self) -> Optional[str]:
        return self.page.category

    @property
    def has_draft(self) -> bool:
        return bool(self.page.has_draft)

    @property
    def is_listing(self) -> bool:
        return self.page.is_listing


@dataclass
class ResolvedComponent:
    component: Any
    content: Dict[str, Any]
    is_preview: bool = False

    @property
    def component_type(self) -> str:
        return self.component.component_type

    @property
    def html_content(self) -> Optional[str]:
        return self.content.get("html_content")

    @property
    def css_content(self) -> Optional[str]:
        return self.content.get("css_content")
