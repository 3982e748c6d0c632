"""
WeatherWall Flask Application.

Main entry point for the web application. Initializes:
- WeatherService (airport store, ingestion, queries, stats)
- Static airport list
- API routes

Usage:
    python -m weatherwall.app

Or with gunicorn:
    gunicorn 'weatherwall.app:create_app()'
"""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from weatherwall.api import collect_bp, query_bp
from weatherwall.config import AppConfig, config as default_config
from weatherwall.ingestion.airport_loader import load_airport_file
from weatherwall.services import WeatherService

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )


def create_app(
    service: Optional[WeatherService] = None,
    app_config: Optional[AppConfig] = None,
    airports_file: Optional[str] = None,
) -> Flask:
    """
    Application factory for Flask.

    Args:
        service: Pre-built WeatherService. A fresh one is created if None;
                 pass one in for testing.
        app_config: Configuration (module default if None)
        airports_file: Airport list to load at startup. Falls back to
                       AIRPORTS_FILE when None.

    Returns:
        Configured Flask application instance.
    """
    cfg = app_config or default_config
    configure_logging(cfg.debug)

    app = Flask(__name__)
    app.config['SECRET_KEY'] = cfg.secret_key

    # Clients may call the query API from browsers
    CORS(app, resources={r'/query/*': {'origins': list(cfg.cors_origins)}})

    service = service or WeatherService(app_config=cfg)
    app.config['WEATHER_SERVICE'] = service

    airports_file = airports_file or cfg.airports.data_file
    if airports_file:
        logger.info(f'Loading airports from {airports_file}')
        service.load_airports(load_airport_file(airports_file))
    else:
        logger.warning('No airport list configured. Set AIRPORTS_FILE or POST /collect/airport/...')

    app.register_blueprint(collect_bp)
    app.register_blueprint(query_bp)

    @app.route('/health')
    def health():
        """Simple health check endpoint."""
        return {'status': 'ok', 'airports': len(service.store)}

    # -------------------------------------------------------------------------
    # Error handlers
    # -------------------------------------------------------------------------

    @app.errorhandler(404)
    def not_found(e):
        return {'error': 'Not found'}, 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return {'error': 'Method not allowed'}, 405

    @app.errorhandler(500)
    def server_error(e):
        logger.error(f'Server error: {e}')
        return {'error': 'Internal server error'}, 500

    return app


def run_development_server():
    """Run the development server."""
    app = create_app()
    port = default_config.port

    logger.info(f'Starting WeatherWall on http://localhost:{port}')
    logger.info(f'Collector API: http://localhost:{port}/collect/ping')
    logger.info(f'Query API: http://localhost:{port}/query/ping')

    app.run(
        host='0.0.0.0',
        port=port,
        debug=default_config.debug,
        use_reloader=False,
    )


if __name__ == '__main__':
    run_development_server()
