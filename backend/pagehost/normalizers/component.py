def normalize_component(resolved):
    component = resolved.component
    return {
        "id": component.id,
        "component_type": component.component_type,
        "name": component.name,
        "is_active": component.is_active,
        "has_draft": component.has_draft,
        "html_content": resolved.html_content,
        "css_content": resolved.css_content,
        "is_preview": resolved.is_preview,
    }
