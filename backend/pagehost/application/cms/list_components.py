from typing import List, Optional
from pagehost.models.client_component import ClientComponent
from pagehost.domain.content import (
    COMPONENT_OVERRIDABLE_FIELDS,
    ResolvedComponent,
    effective_content,
)
from .resolve_page import get_client_site


def list_client_components(
    *,
    tenant_slug: str,
    component_type: Optional[str] = None,
    preview: bool = False,
) -> List[ResolvedComponent]:
    """
    Active header/footer fragments for a client, with the same draft
    override rules as pages when previewing.
    """
    client = get_client_site(tenant_slug)
    if not client:
        return []

    query = ClientComponent.query.filter_by(client_id=client.id, is_active=True)
    if component_type:
        query = query.filter_by(component_type=component_type)

    components = query.order_by(ClientComponent.created_at.asc()).all()

    return [
        ResolvedComponent(
            component=component,
            content=effective_content(
                component,
                preview=preview,
                fields=COMPONENT_OVERRIDABLE_FIELDS,
            ),
            is_preview=preview and component.has_draft,
        )
        for component in components
    ]
