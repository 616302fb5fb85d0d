"""
Search API endpoints.

Routes:
- POST /scans/{scan_id}/search - Rank a scan's chunks against a query
- GET /scans/{scan_id}/documents - List documents with chunk records

Dependencies: scan_rag.application, scan_rag.models
System role: Retrieval HTTP API
"""

from fastapi import APIRouter, Depends, HTTPException

from scan_rag.api.deps import (
    get_lifecycle_manager,
    get_retrieval_service,
    get_settings_dependency,
)
from scan_rag.application.lifecycle_manager import EmbeddingLifecycleManager
from scan_rag.application.retrieval_service import RetrievalService
from scan_rag.configs import Settings
from scan_rag.core.exceptions import ChunkStoreError
from scan_rag.models.search import (
    NO_RESULTS_MESSAGE,
    DocumentListResponse,
    SearchRequest,
    SearchResponse,
)

router = APIRouter(prefix="/scans", tags=["search"])


@router.post("/{scan_id}/search", response_model=SearchResponse)
async def search_scan(
    scan_id: str,
    request: SearchRequest,
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
    settings: Settings = Depends(get_settings_dependency),
) -> SearchResponse:
    """
    Retrieve the chunks of a scan most relevant to a query.

    Retrieval failures are not surfaced as errors: the response is empty
    and carries a "no relevant information" message.

    Args:
        scan_id: Scan scope
        request: Query text and optional top_k
        retrieval_service: Injected RetrievalService
        settings: Injected settings (top_k upper bound)

    Returns:
        SearchResponse: Ranked matches, highest score first
    """
    top_k = min(request.top_k or settings.retrieval.default_top_k, settings.retrieval.max_top_k)
    matches = await retrieval_service.retrieve_for_query(request.query, scan_id, top_k=top_k)
    return SearchResponse(
        scan_id=scan_id,
        matches=matches,
        message=None if matches else NO_RESULTS_MESSAGE,
    )


@router.get("/{scan_id}/documents", response_model=DocumentListResponse)
async def list_scan_documents(
    scan_id: str,
    manager: EmbeddingLifecycleManager = Depends(get_lifecycle_manager),
) -> DocumentListResponse:
    """
    List the documents of a scan with their chunk counts.

    Raises:
        HTTPException(503): Chunk store unavailable
    """
    try:
        documents = await manager.list_scan_documents(scan_id)
    except ChunkStoreError as e:
        raise HTTPException(status_code=503, detail=e.message)
    return DocumentListResponse(scan_id=scan_id, documents=documents, total=len(documents))
