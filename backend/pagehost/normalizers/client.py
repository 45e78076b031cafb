from .common import iso


def normalize_client(client):
    return {
        "id": client.id,
        "name": client.name,
        "slug": client.slug,
        "global_css": client.global_css,
        "favicon": client.favicon,
        "meta_defaults": client.meta_defaults or {},
        "is_active": client.is_active,
        "created_at": iso(client.created_at),
        "updated_at": iso(client.updated_at),
    }
