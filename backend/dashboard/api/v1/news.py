# dashboard/api/v1/news.py
from flask import request, jsonify
from flask_jwt_extended import jwt_required
from dashboard.application.cms.news import list_news, create_news_post, delete_news_post
from dashboard.application.cms.upload_media import upload_media
from dashboard.utils.decorators import json_body, max_body_size
from . import v1_bp


@v1_bp.route("/news", methods=["GET"])
def get_news():
    return jsonify(list_news())


@v1_bp.route("/news", methods=["POST"])
@jwt_required()
@max_body_size("MAX_DOCUMENT_BYTES")
@json_body
def post_news():
    post = create_news_post(data=request.get_json())
    return jsonify(post), 201


@v1_bp.route("/news/<post_id>", methods=["DELETE"])
@jwt_required()
def remove_news(post_id):
    if not delete_news_post(post_id=post_id):
        return jsonify({"error": "News post not found"}), 404

    return jsonify({"message": "News post deleted"}), 200


@v1_bp.route("/news/upload", methods=["POST"])
@jwt_required()
def upload_news_images():
    try:
        urls = upload_media(files=request.files.getlist("images"), purpose="news")
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    return jsonify({"urls": urls}), 201
