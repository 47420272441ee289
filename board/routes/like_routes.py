from flask import Blueprint, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required

from board.routes.responses import error_response
from board.services import like_service


like_bp = Blueprint("likes", __name__)


@like_bp.route("/posts/<int:post_id>/like", methods=["PUT"])
@jwt_required(optional=True)
def toggle_like(post_id):
    caller = get_jwt_identity()

    result = like_service.toggle_like(post_id, caller)
    if not result.ok:
        return error_response(result, caller)
    return jsonify(result.value), 200


@like_bp.route("/posts/<int:post_id>/like", methods=["GET"])
@jwt_required(optional=True)
def get_like(post_id):
    caller = get_jwt_identity()

    result = like_service.get_like_info(post_id, caller)
    if not result.ok:
        return error_response(result, caller)
    return jsonify(result.value), 200
