from flask import current_app, jsonify
from werkzeug.exceptions import RequestEntityTooLarge
from dashboard.application.cms.save_document import DocumentWriteError
from dashboard.domain.invariants.exceptions import InvariantViolation

def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        response = jsonify({
            "error": "InvariantViolation",
            "message": str(error)
        })
        response.status_code = 400
        return response

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(error):
        response = jsonify({"error": "Payload too large"})
        response.status_code = 413
        return response

    @app.errorhandler(DocumentWriteError)
    def handle_write_error(error):
        current_app.logger.error(f"Error writing dashboard content: {error}")
        response = jsonify({
            "error": "Failed to save content",
            "details": str(error)
        })
        response.status_code = 500
        return response
