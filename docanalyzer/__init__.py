"""
Flask Application Factory

This module provides the Flask application factory pattern for the Legal Document Analyzer.
"""

import logging
from flask import Flask, request, g, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from docanalyzer.errors import AnalyzerError


def create_app(config_name='default', test_config=None, services=None):
    """
    Create and configure Flask application instance.

    Args:
        config_name (str): Configuration environment name
        test_config (dict): Optional overrides applied after the config object
        services (AnalyzerServices): Pre-built services, skips credential loading

    Returns:
        Flask: Configured Flask application instance
    """
    app = Flask(__name__)

    if config_name == 'testing':
        app.config.from_object('config.testing.TestingConfig')
    else:
        app.config.from_object('config.default.DefaultConfig')

    if test_config:
        app.config.update(test_config)

    CORS(
        app,
        resources={r"/*": {"origins": [app.config['CORS_ORIGIN']]}},
        methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    configure_logging(app)

    register_trace_id_handler(app)

    register_preflight_handler(app)

    from docanalyzer.services.registry import init_services
    init_services(app, services)

    from docanalyzer.routes.root import register_root_routes
    register_root_routes(app)

    register_blueprints(app)

    register_error_handlers(app)

    return app


def configure_logging(app):
    """Configure application logging with clean output."""
    logging.basicConfig(
        level=logging.DEBUG if app.debug else logging.INFO,
        format='[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[
            logging.StreamHandler()
        ],
        force=True
    )

    noisy_loggers = [
        'google', 'google.auth', 'google.genai', 'google_genai',
        'google.api_core', 'grpc',
        'urllib3', 'httpcore', 'httpx',
        'werkzeug'
    ]
    for logger_name in noisy_loggers:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logging.info("=" * 50)
    logging.info("LEGAL DOCUMENT ANALYZER - STARTUP")
    logging.info("=" * 50)
    logging.info(f"Debug Mode: {app.debug}")
    logging.info(f"Allowed Origin: {app.config['CORS_ORIGIN']}")


def register_trace_id_handler(app):
    """Register before/after request handlers for trace ID management."""
    from docanalyzer.utils.logging_utils import set_trace_id, clear_trace_id, get_trace_id

    @app.before_request
    def before_request():
        trace_id = request.headers.get('X-Trace-ID')
        set_trace_id(trace_id)
        g.trace_id = get_trace_id()

    @app.after_request
    def after_request(response):
        if hasattr(g, 'trace_id'):
            response.headers['X-Trace-ID'] = g.trace_id
        clear_trace_id()
        return response


def register_preflight_handler(app):
    """Answer OPTIONS on every path, routed or not; flask-cors adds the CORS headers."""

    @app.before_request
    def answer_preflight():
        if request.method == 'OPTIONS':
            return '', 204


def register_error_handlers(app):
    """Register global error handlers for consistent JSON responses."""
    from docanalyzer.utils.logging_utils import get_logger

    logger = get_logger('docanalyzer.error_handler')

    @app.errorhandler(AnalyzerError)
    def analyzer_error(error):
        if error.status_code >= 500:
            logger.error(f"{type(error).__name__}: {error.message} {error.detail or ''}".rstrip())
        else:
            logger.warning(f"{type(error).__name__}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(413)
    def request_entity_too_large(error):
        logger.warning("File too large")
        return jsonify({"error": "File size exceeds maximum allowed (16MB)"}), 413

    @app.errorhandler(HTTPException)
    def http_error(error):
        return jsonify({"error": error.description or error.name}), error.code

    @app.errorhandler(500)
    def internal_server_error(error):
        logger.error(f"Internal server error: {error}")
        return jsonify({"error": "An internal error occurred"}), 500


def register_blueprints(app):
    """Register application blueprints."""
    from docanalyzer.routes import api_bp

    app.register_blueprint(api_bp)
