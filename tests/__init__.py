"""Test package for pdfsegment.

Structure:
    - unit/: segmentation core, parser, config, and host operation tests
    - integration/: HTTP endpoint tests against the real FastAPI app

PDFs are generated in memory by the make_pdf fixture; no binary fixtures.
Leverages pytest with pytest-check for soft assertions.
"""
