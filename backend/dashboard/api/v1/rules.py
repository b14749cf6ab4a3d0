# dashboard/api/v1/rules.py
from flask import request, jsonify
from flask_jwt_extended import jwt_required
from dashboard.application.cms.rules import list_rules, save_rules
from dashboard.utils.decorators import json_body, max_body_size
from . import v1_bp


@v1_bp.route("/rules", methods=["GET"])
def get_rules():
    return jsonify(list_rules())


@v1_bp.route("/rules", methods=["POST"])
@jwt_required()
@max_body_size("MAX_DOCUMENT_BYTES")
@json_body
def post_rules():
    rules = save_rules(rules=request.get_json())
    return jsonify(rules), 200
