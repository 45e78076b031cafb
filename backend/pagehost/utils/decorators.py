from functools import wraps
from typing import Optional
from flask import current_app
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request


def editor_required(fn):
    """
    Write endpoints accept a bearer token; it is mandatory unless
    CMS_REQUIRE_AUTH is switched off.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        required = current_app.config.get("CMS_REQUIRE_AUTH", True)
        verify_jwt_in_request(optional=not required)
        return fn(*args, **kwargs)
    return wrapper


def current_actor_id(fallback: Optional[str] = None) -> Optional[str]:
    """Token identity when present, else the caller-supplied id."""
    identity = get_jwt_identity()
    return identity or fallback
