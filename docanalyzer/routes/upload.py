"""
Upload Routes

Accepts a document and returns its text, summary, key terms and risk assessment.
"""

from flask import request, jsonify

from docanalyzer.errors import ClientInputError
from docanalyzer.routes import api_bp
from docanalyzer.services.registry import get_services
from docanalyzer.utils.logging_utils import get_logger

logger = get_logger(__name__)

NO_FILE_MESSAGE = "No file uploaded"


@api_bp.route('/upload', methods=['POST'])
def upload_and_analyze():
    """Upload & analyze a single document sent as multipart field `file`."""
    uploaded_file_storage = request.files.get("file")
    if uploaded_file_storage is None or not uploaded_file_storage.filename:
        logger.warning("No file in request")
        raise ClientInputError(NO_FILE_MESSAGE)

    logger.info(f"Received upload: {uploaded_file_storage.filename}")
    result = get_services().analyzer.analyze(uploaded_file_storage)
    logger.info("Analysis successful")
    return jsonify(result.to_dict()), 200
