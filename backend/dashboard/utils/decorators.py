from functools import wraps
from flask import current_app, request, jsonify


def max_body_size(config_key="MAX_DOCUMENT_BYTES"):
    """Rejects JSON bodies larger than the configured limit with 413."""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            limit = current_app.config.get(config_key)
            if limit and request.content_length and request.content_length > limit:
                return jsonify({"error": "Payload too large"}), 413

            return fn(*args, **kwargs)
        return wrapper
    return decorator


def json_body(fn):
    """Rejects requests whose body is not valid JSON with 400."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if request.get_json(silent=True) is None:
            return jsonify({"error": "Invalid request body"}), 400

        return fn(*args, **kwargs)
    return wrapper
