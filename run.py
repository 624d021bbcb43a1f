#!/usr/bin/env python3
"""
Flask application entry point for the Legal Document Analyzer backend.
This file serves as the main entry point for both development and production.
"""

from dotenv import load_dotenv
load_dotenv()

from docanalyzer import create_app
import os

# Create Flask app using factory pattern
app = create_app(os.environ.get('APP_CONFIG', 'default'))

if __name__ == "__main__":
    port = int(os.environ.get('PORT', 5000))
    debug = os.environ.get('DEBUG', 'False').lower() == 'true'

    app.run(
        host='0.0.0.0',
        port=port,
        debug=debug,
        threaded=True,
        use_reloader=False
    )
