from .common import iso


def normalize_version(version, include_snapshot=False):
    data = {
        "id": version.id,
        "page_id": version.page_id,
        "version_number": version.version_number,
        "status": version.status,
        "created_by": version.created_by,
        "created_at": iso(version.created_at),
    }

    if include_snapshot:
        data["snapshot"] = version.snapshot

    return data
