from flask import jsonify

from board.errors import ErrorKind


_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORAGE: 503,
}


def error_response(result, caller=None):
    if result.error is ErrorKind.UNAUTHORIZED:
        status = 403 if caller is not None else 401
    else:
        status = _STATUS_BY_KIND.get(result.error, 500)
    return jsonify({"error": result.message}), status
