from flask import current_app, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from nexacms.domain.errors import DomainError
from nexacms.application.validation import describe_errors


def _error_response(kind, message, status_code):
    response = jsonify({
        "error": kind,
        "message": message,
    })
    response.status_code = status_code
    return response


def register_error_handlers(app):
    @app.errorhandler(DomainError)
    def handle_domain_error(error):
        if error.status_code >= 500:
            current_app.logger.error("%s: %s", error.kind, error.message)
        else:
            current_app.logger.info("%s %s -> %s: %s", request.method, request.path, error.kind, error.message)
        return _error_response(error.kind, error.message, error.status_code)

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        return _error_response("BadInput", describe_errors(error), 400)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        # Storefront keeps Werkzeug's HTML error pages
        if not request.path.startswith("/api/"):
            return error
        return _error_response(error.name.replace(" ", ""), error.description, error.code)
