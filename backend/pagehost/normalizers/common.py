def iso(value):
    """ISO-8601 string for dates and datetimes, None passthrough."""
    return value.isoformat() if value is not None else None
