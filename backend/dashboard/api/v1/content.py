# dashboard/api/v1/content.py
from flask import current_app, request, jsonify
from flask_jwt_extended import jwt_required
from dashboard.application.cms.save_document import save_document
from dashboard.models.site_document import SiteDocument
from dashboard.utils.decorators import json_body, max_body_size
from . import v1_bp


@v1_bp.route("/dashboard-content", methods=["GET"])
def get_dashboard_content():
    document = SiteDocument.current()
    if not document or not document.has_content:
        return jsonify({"error": "No content found"}), 404

    return jsonify(document.to_dict())


@v1_bp.route("/dashboard-content", methods=["POST"])
@jwt_required()
@max_body_size("MAX_DOCUMENT_BYTES")
@json_body
def post_dashboard_content():
    data = request.get_json()
    content = data.get("content") if isinstance(data, dict) else None
    history = data.get("history") if isinstance(data, dict) else None

    if content is None or history is None:
        current_app.logger.error("Missing content or history in POST /api/dashboard-content")
        return jsonify({"error": "Missing content or history"}), 400

    saved = save_document(content=content, history=history)

    return jsonify(saved), 200
