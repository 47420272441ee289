from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity

from board.routes.responses import error_response
from board.services import member_service


member_bp = Blueprint("members", __name__)


@member_bp.route("/members", methods=["POST"])
def register():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON body"}), 400

    result = member_service.register(
        data.get("email"),
        data.get("password"),
        data.get("nick_name"),
    )
    if not result.ok:
        return error_response(result)
    return jsonify({"message": "Member registered"}), 201


@member_bp.route("/members/login", methods=["POST"])
def login():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON body"}), 400

    result = member_service.login(data.get("email"), data.get("password"))
    if not result.ok:
        return error_response(result)
    return jsonify(result.value), 200


@member_bp.route("/members/token", methods=["POST"])
@jwt_required(refresh=True)
def refresh_token():
    email = get_jwt_identity()
    return jsonify(member_service.refresh_access_token(email)), 200
