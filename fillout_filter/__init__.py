"""
Filtered responses service for Fillout forms.

Structure:
- main.py: FastAPI application factory and error mapping
- config.py: environment-backed settings
- routes/: the filtered responses endpoint
- filters/: filter models, classifier, comparators, compiler and evaluator
- upstream/: Fillout API client
- validation/: query parameter checks and pagination helpers
"""

from .config import Settings
from .main import create_app

__all__ = [
    "Settings",
    "create_app",
]
