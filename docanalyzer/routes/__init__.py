"""
Routes Package

Registers the API blueprint and imports all route modules.
"""

from flask import Blueprint

# Create the API blueprint
api_bp = Blueprint('api', __name__, url_prefix='/api')

# Import all route modules to register their handlers
from . import upload
from . import ping
