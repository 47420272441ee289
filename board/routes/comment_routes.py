from flask import Blueprint, request, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required

from board.routes.responses import error_response
from board.schemas.comment_schema import CommentResponseSchema
from board.services import comment_service


comment_bp = Blueprint("comments", __name__)


@comment_bp.route("/posts/<int:post_id>/comments", methods=["POST"])
@jwt_required(optional=True)
def create_comment(post_id):
    caller = get_jwt_identity()
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON body"}), 400

    result = comment_service.add_comment(post_id, data.get("text"), caller)
    if not result.ok:
        return error_response(result, caller)

    return jsonify({
        "id": result.value,
        "message": "Comment created"
    }), 201


@comment_bp.route("/posts/<int:post_id>/comments", methods=["GET"])
def list_comments(post_id):
    result = comment_service.get_post_comments(post_id)
    if not result.ok:
        return error_response(result)
    return jsonify(CommentResponseSchema(many=True).dump(result.value)), 200


@comment_bp.route("/comments/<int:comment_id>", methods=["DELETE"])
@jwt_required(optional=True)
def delete_comment(comment_id):
    caller = get_jwt_identity()

    result = comment_service.delete_comment(comment_id, caller)
    if not result.ok:
        return error_response(result, caller)
    return jsonify({"message": "Comment deleted"}), 200
