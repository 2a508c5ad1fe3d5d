"""
GameShelf - Custom Exceptions and Exception Handlers
"""
import structlog
from flask import jsonify, render_template, request
from werkzeug.exceptions import HTTPException

from gameshelf.constants import BUILD_VERSION

logger = structlog.get_logger('exceptions')


class GameShelfException(Exception):
    """Base exception for GameShelf"""
    status_code = 400

    def __init__(self, message: str, code: str = "GAMESHELF_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self):
        return {
            'success': False,
            'code': self.code,
            'message': self.message
        }


class ValidationException(GameShelfException):
    """Validation-related exceptions"""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")
        logger.warning(f"Validation error: {message}")


class NotFoundException(GameShelfException):
    """Missing resource"""
    status_code = 404

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, code="NOT_FOUND")


class ConflictException(GameShelfException):
    """Unique constraint violations (duplicate igdbId)"""
    status_code = 409

    def __init__(self, message: str):
        super().__init__(message, code="CONFLICT")
        logger.warning(f"Conflict: {message}")


class IGDBException(GameShelfException):
    """IGDB API exceptions"""
    status_code = 502

    def __init__(self, message: str):
        super().__init__(message, code="IGDB_ERROR")
        logger.error(f"IGDB error: {message}")


def register_exception_handlers(app):
    """Register exception handlers with Flask app"""

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        """Handle HTTP exceptions, HTML pages keep Flask's default rendering"""
        if not request.path.startswith('/api'):
            return e
        return jsonify({
            'success': False,
            'code': e.name.upper().replace(' ', '_'),
            'message': e.description
        }), e.code

    @app.errorhandler(GameShelfException)
    def handle_gameshelf_exception(e):
        """Handle GameShelf custom exceptions with their own status code"""
        if not request.path.startswith('/api'):
            return render_template(
                'error.html', title='Error', message=e.message, build_version=BUILD_VERSION
            ), e.status_code
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(Exception)
    def handle_generic_exception(e):
        """Handle all other exceptions"""
        logger.error(f"Unhandled exception: {e}", exc_info=True)
        return jsonify({
            'success': False,
            'code': 'INTERNAL_ERROR',
            'message': 'An unexpected error occurred'
        }), 500
