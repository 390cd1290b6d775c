"""
Core pipeline logic.

Chunking, identity, normalization, ingestion, retrieval and generation.
Depends on collaborators only through webrag.boundary.protocols.
"""
