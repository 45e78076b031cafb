from pagehost.domain.content import OVERRIDABLE_FIELDS


def snapshot_page(page):
    """
    Copy of the page's published content, as stored on a version row.
    """
    snapshot = {"title": page.title}
    for name in OVERRIDABLE_FIELDS:
        snapshot[name] = getattr(page, name)
    return snapshot


def restore_snapshot(page, snapshot):
    if "title" in snapshot:
        page.title = snapshot["title"]
    for name in OVERRIDABLE_FIELDS:
        setattr(page, name, snapshot.get(name))


def next_version(page_id):
    from pagehost.models.client_page_version import ClientPageVersion

    last = (
        ClientPageVersion.query
        .filter_by(page_id=page_id)
        .order_by(ClientPageVersion.version_number.desc())
        .first()
    )
    return (last.version_number + 1) if last else 1
