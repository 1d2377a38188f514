"""FastAPI endpoints for PDF text extraction.

Endpoints:
    - GET /health: Service health status
    - POST /extract/text: Cleaned full text of an uploaded PDF
    - POST /extract/pages: Logical pages of an uploaded PDF
    - POST /extract/chunks: Overlapping chunks of an uploaded PDF
"""

from pdfsegment.api.app import app, create_app

__all__ = ["app", "create_app"]
