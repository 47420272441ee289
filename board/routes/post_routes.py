from flask import Blueprint, current_app, request, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required

from board.routes.responses import error_response
from board.schemas.post_schema import PostDetailSchema, PostPageSchema
from board.services import post_service


post_bp = Blueprint("posts", __name__)

_post_page_schema = PostPageSchema()
_post_detail_schema = PostDetailSchema()


def _read_post_form():
    content_type = (request.content_type or "").lower()

    if "multipart/form-data" in content_type:
        files = (
            request.files.getlist("files")
            or request.files.getlist("files[]")
        )
        remove_files = (
            request.form.getlist("remove_files")
            or request.form.getlist("remove_files[]")
        )
        return request.form.get("title"), request.form.get("content"), files, remove_files

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None
    remove_files = data.get("remove_files") or []
    if not isinstance(remove_files, list):
        remove_files = [remove_files]
    return data.get("title"), data.get("content"), [], [str(name) for name in remove_files]


@post_bp.route("/posts", methods=["POST"])
@jwt_required(optional=True)
def create_post():
    caller = get_jwt_identity()

    form = _read_post_form()
    if form is None:
        return jsonify({"error": "Invalid JSON body"}), 400
    title, content, files, _ = form

    result = post_service.create_post(title, content, files, caller)
    if not result.ok:
        return error_response(result, caller)

    return jsonify({
        "message": "Post created successfully",
        "post_id": result.value
    }), 201


@post_bp.route("/posts", methods=["GET"])
def list_posts():
    page = request.args.get("page", default=1, type=int)
    size = request.args.get(
        "size",
        default=current_app.config.get("BOARD_PAGE_SIZE", post_service.DEFAULT_PAGE_SIZE),
        type=int,
    )
    keyword = request.args.get("q", default="", type=str)

    result = post_service.list_posts(keyword, page, size)
    return jsonify(_post_page_schema.dump(result.value)), 200


@post_bp.route("/posts/<int:post_id>", methods=["GET"])
def get_post(post_id):
    result = post_service.get_post(post_id)
    if not result.ok:
        return error_response(result)
    return jsonify(_post_detail_schema.dump(result.value)), 200


@post_bp.route("/posts/<int:post_id>", methods=["PUT"])
@jwt_required(optional=True)
def update_post(post_id):
    caller = get_jwt_identity()

    form = _read_post_form()
    if form is None:
        return jsonify({"error": "Invalid JSON body"}), 400
    title, content, files, remove_files = form

    result = post_service.update_post(post_id, title, content, files, remove_files, caller)
    if not result.ok:
        return error_response(result, caller)
    return jsonify({"message": "Post updated"}), 200


@post_bp.route("/posts/<int:post_id>", methods=["DELETE"])
@jwt_required(optional=True)
def delete_post(post_id):
    caller = get_jwt_identity()

    result = post_service.delete_post(post_id, caller)
    if not result.ok:
        return error_response(result, caller)
    return jsonify({"message": "Post deleted"}), 200
