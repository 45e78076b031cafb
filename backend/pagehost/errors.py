from flask import current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException
from pagehost.extensions import db
from pagehost.domain.exceptions import ContentError, RemoteFailure


def _error_body(error, message, details=None):
    body = {"success": False, "error": message, "code": error}
    if details is not None:
        body["details"] = details
    return body


def register_error_handlers(app):
    @app.errorhandler(ContentError)
    def handle_content_error(error):
        if error.status_code >= 500:
            current_app.logger.error("%s: %s", error.error, error.message)

        response = jsonify(_error_body(error.error, error.message, error.details))
        response.status_code = error.status_code
        return response

    @app.errorhandler(SQLAlchemyError)
    def handle_datastore_error(error):
        db.session.rollback()
        current_app.logger.exception("Datastore error on %s %s", request.method, request.path)

        failure = RemoteFailure("Internal server error")
        body = _error_body(failure.error, failure.message)
        if current_app.config.get("EXPOSE_ERROR_DETAILS"):
            body["details"] = str(error)

        response = jsonify(body)
        response.status_code = failure.status_code
        return response

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        # Rendered pages keep Werkzeug's HTML error documents
        if not request.path.startswith("/api/"):
            return error.get_response()

        response = jsonify(_error_body(error.name, error.description))
        response.status_code = error.code
        return response
