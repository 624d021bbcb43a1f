"""
Ping Route

Reports the configured project and generation model.
"""

from flask import jsonify

from docanalyzer.routes import api_bp
from docanalyzer.services.registry import get_services


@api_bp.route('/ping', methods=['GET'])
def ping():
    services = get_services()
    return jsonify({
        "status": "ok",
        "project": services.project_id,
        "vertexModel": services.model_name,
    })
