from flask import Blueprint

# Server-rendered client pages
site_bp = Blueprint("site", __name__)

from . import routes
