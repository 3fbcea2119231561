from .api_routes import register_api_routes
from .debug_routes import register_debug_routes


def register_routes(app):
    """Register all application routes."""
    register_api_routes(app)
    register_debug_routes(app)


# Make the main function available at package level
__all__ = ['register_routes']
