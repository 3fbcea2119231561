import os
from flask import Flask

# Import configuration and services
from config import config
from services.radar_service import RadarService
from routes import register_routes


def create_app(config_name=None):
    """Flask application factory."""
    app = Flask(__name__)

    # Load configuration
    config_name = config_name or os.environ.get('APP_CONFIG', 'default')
    app.config.from_object(config[config_name])

    # Initialize radar service
    RadarService(app)

    # Register routes
    register_routes(app)

    return app


def main():
    """Main application entry point."""
    print("🎯 MAIN: Starting MR-231-3 radar sentence converter...")

    # Create Flask app
    app = create_app()

    # Start Flask web server
    start_web_server(app)


def start_web_server(app):
    """Start the Flask web server."""
    print("🌐 MAIN: Starting Flask web server...")
    strict = app.config['STRICT_CODE_LETTERS']
    print(f"📡 MAIN: Accepting TTM/RSD sentences on POST /api/convert (strict codes: {strict})")

    # Start Flask (disable reloader to prevent double initialization)
    app.run(
        host=app.config.get('HOST', '0.0.0.0'),
        port=app.config.get('PORT', 5000),
        debug=app.config.get('DEBUG', False),
        use_reloader=False
    )


if __name__ == "__main__":
    main()
