"""
webrag -- retrieval-augmented question answering over web documents.

Subpackages:
    configs       -> pydantic-settings configuration
    models        -> pydantic domain models (chunks, matches, query context)
    core          -> chunking, identity, ingestion, retrieval, generation
    boundary      -> adapters for fetcher, embeddings, vector store, LLM
    observability -> logging configuration and helpers
    application   -> service facade wiring everything together
"""

__version__ = "0.1.0"
