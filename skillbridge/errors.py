from flask import jsonify
from werkzeug.exceptions import HTTPException


class ApiError(Exception):
    """Base class for failures reported to the caller as ``{"message": ...}``."""

    status_code = 500
    message = 'Internal server error'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class ValidationError(ApiError):
    status_code = 400
    message = 'Missing or malformed input'


class ConflictError(ApiError):
    status_code = 400
    message = 'This email is already registered'


class AuthError(ApiError):
    """Unknown email or bad credential.

    ``reason`` is kept for server-side logs only; the caller always sees the
    same message so the response does not reveal whether the email exists.
    """

    status_code = 400
    message = 'Invalid email or password'

    def __init__(self, reason):
        super().__init__()
        self.reason = reason


class NotFoundError(ApiError):
    status_code = 404
    message = 'Not found'


class InternalError(ApiError):
    status_code = 500


def register_error_handlers(app, db):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if isinstance(error, AuthError):
            print(f"[DEBUG] Authentication failed: {error.reason}")
        return jsonify({'message': error.message}), error.status_code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        # Unknown routes, bad methods and oversized uploads keep werkzeug's response
        if isinstance(error, HTTPException):
            return error

        db.session.rollback()
        print(f"[ERROR] Unhandled error: {error!r}")
        internal = InternalError()
        return jsonify({'message': internal.message}), internal.status_code
