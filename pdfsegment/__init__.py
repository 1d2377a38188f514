"""pdfsegment - text extraction and segmentation for document indexing.

Extracts plain text from PDF documents, strips page-number artifacts, and
partitions the result by logical page or into overlapping chunks ready for
embedding pipelines.

Components:
    - segmentation: artifact filter, page segmenter, overlapping chunker
    - parsing: PDF byte reading and text extraction
    - extraction: async host operations composing the two
    - api: HTTP endpoints for uploaded documents
    - models: Page, TextChunk and response schemas
"""

__version__ = "0.1.0"
