from flask import current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError
from sitenav.domain.navigation.exceptions import MenuResolutionError

def register_error_handlers(app):
    @app.errorhandler(MenuResolutionError)
    def handle_menu_resolution_error(error):
        response = jsonify({
            "error": type(error).__name__,
            "message": str(error)
        })
        response.status_code = 400
        return response

    @app.errorhandler(SQLAlchemyError)
    def handle_storage_error(error):
        current_app.logger.exception("Storage error while handling request")
        response = jsonify({
            "error": "StorageUnavailable",
            "message": "The menu store could not be read."
        })
        response.status_code = 503
        return response
