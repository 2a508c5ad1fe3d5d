"""
API Response Utilities - Standardized error handling and responses
"""

from flask import jsonify
from functools import wraps
from sqlalchemy.exc import SQLAlchemyError
import logging

from gameshelf.exceptions import GameShelfException

logger = logging.getLogger(__name__)


# API Error Codes
class ErrorCode:
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    CONFLICT = "CONFLICT"


DEFAULT_MESSAGES = {
    ErrorCode.NOT_FOUND: "Resource not found",
    ErrorCode.VALIDATION_ERROR: "Invalid request parameters",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred",
    ErrorCode.CONFLICT: "Resource conflict",
}


def error_response(
    error_code=ErrorCode.INTERNAL_ERROR,
    message=None,
    details=None,
    status_code=400,
    log_error=True,
):
    """
    Standard error response format for API endpoints
    """
    response = {"code": error_code, "success": False}
    response["message"] = message or DEFAULT_MESSAGES.get(error_code, "Request failed")

    if details:
        response["details"] = details

    if log_error and error_code in [ErrorCode.INTERNAL_ERROR, ErrorCode.VALIDATION_ERROR]:
        logger.error(f"{error_code}: {response['message']} | Details: {details}")

    return jsonify(response), status_code


def handle_api_errors(f):
    """
    Decorator to standardize error handling for API endpoints
    Automatically catches exceptions and returns consistent error responses
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except GameShelfException as e:
            return error_response(e.code, message=e.message, status_code=e.status_code, log_error=False)
        except ValueError as e:
            return error_response(ErrorCode.VALIDATION_ERROR, message=str(e), status_code=400)
        except SQLAlchemyError as e:
            from gameshelf.db import db

            db.session.rollback()
            logger.error(f"Database error in {f.__name__}: {e}", exc_info=True)
            return error_response(
                ErrorCode.INTERNAL_ERROR, details=str(e), status_code=500, log_error=False
            )
        except Exception as e:
            logger.error(f"Unhandled exception in {f.__name__}: {e}", exc_info=True)
            return error_response(
                ErrorCode.INTERNAL_ERROR, details=str(e), status_code=500, log_error=False
            )

    return wrapper

