from flask import jsonify


def register_root_routes(app):
    """Register root routes."""

    @app.route('/')
    def index():
        return jsonify({
            "message": "Legal Document Analyzer API",
            "version": "1.0",
            "endpoints": {
                "upload": "/api/upload",
                "ping": "/api/ping",
                "health": "/health"
            }
        })

    @app.route('/health')
    def health():
        return jsonify({"status": "healthy"})
