# dashboard/api/v1/uploads.py
from flask import request, jsonify
from flask_jwt_extended import jwt_required
from dashboard.application.cms.upload_media import upload_media
from . import v1_bp


@v1_bp.route("/backgrounds/upload", methods=["POST"])
@jwt_required()
def upload_backgrounds():
    try:
        urls = upload_media(files=request.files.getlist("backgrounds"), purpose="background")
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    return jsonify({"urls": urls}), 201
