from flask import request, jsonify
from flask_jwt_extended import create_access_token
from dashboard.models.user import User
from . import v1_bp


@v1_bp.route("/login", methods=["POST"])
def login():
    data = request.get_json(silent=True)
    if not data:
        return jsonify({"error": "Invalid request body"}), 400

    username = data.get("username")
    password = data.get("password")

    if not username or not password:
        return jsonify({"error": "Username and password required"}), 400

    user = User.query.filter_by(username=username).first()

    if not user or not user.check_password(password):
        return jsonify({"error": "Invalid credentials"}), 401

    if not user.is_active:
        return jsonify({"error": "User account disabled"}), 403

    token = create_access_token(identity=user.username)

    return jsonify({
        "token": token,
        "user": {"username": user.username}
    }), 200
