from flask import jsonify
from werkzeug.exceptions import BadRequest, InternalServerError, NotFound
from fondation_cms.domain.invariants.exceptions import (
    ContentValidationError,
    InvariantViolation,
)

def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        response = jsonify({
            "error": "InvariantViolation",
            "message": str(error)
        })
        response.status_code = 400
        return response

    @app.errorhandler(ContentValidationError)
    def handle_content_validation(error):
        response = jsonify({
            "error": "ValidationError",
            "message": str(error),
            "errors": error.errors
        })
        response.status_code = 400
        return response

    @app.errorhandler(BadRequest)
    def handle_bad_request(error):
        response = jsonify({
            "error": "BadRequest",
            "message": error.description
        })
        response.status_code = 400
        return response

    @app.errorhandler(NotFound)
    def handle_not_found(error):
        response = jsonify({
            "error": "NotFound",
            "message": error.description
        })
        response.status_code = 404
        return response

    @app.errorhandler(InternalServerError)
    def handle_internal_error(error):
        response = jsonify({
            "error": "InternalServerError",
            "message": error.description
        })
        response.status_code = 500
        return response
