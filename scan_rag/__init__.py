"""
Scan document ingestion and semantic retrieval service.

Chunks uploaded document text, embeds each chunk, stores chunk records
partitioned by scan, and ranks them against query vectors.
"""

__version__ = "0.1.0"
