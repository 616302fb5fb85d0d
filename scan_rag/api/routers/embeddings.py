"""
Embedding lifecycle API endpoints.

Routes:
- PUT /scans/{scan_id}/documents/{document_id}/embeddings - (Re)ingest a document
- DELETE /scans/{scan_id}/documents/{document_id}/embeddings - Remove a document's chunks in the scan
- DELETE /scans/{scan_id}/embeddings - Remove every chunk of a scan

Dependencies: scan_rag.application.lifecycle_manager, scan_rag.models
System role: Ingestion HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import JSONResponse

from scan_rag.api.deps import get_lifecycle_manager
from scan_rag.application.lifecycle_manager import EmbeddingLifecycleManager
from scan_rag.core.exceptions import ChunkStoreError
from scan_rag.models.ingestion import IngestDocumentRequest, IngestionResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scans", tags=["embeddings"])


@router.put(
    "/{scan_id}/documents/{document_id}/embeddings",
    response_model=IngestionResult,
)
async def ingest_document(
    scan_id: str,
    document_id: str,
    request: IngestDocumentRequest,
    manager: EmbeddingLifecycleManager = Depends(get_lifecycle_manager),
):
    """
    Replace a document's chunk records with freshly embedded chunks.

    Safe to call repeatedly: previous records of the document are deleted
    first, so the stored set always reflects the latest text.

    Args:
        scan_id: Owning scan
        document_id: Document to (re)ingest
        request: Scoping metadata and extracted text
        manager: Injected EmbeddingLifecycleManager

    Returns:
        IngestionResult: 200 when succeeded or skipped, 503 when failed
        (the body carries the user-facing retry message)
    """
    result = await manager.ingest(
        document_id=document_id,
        scan_id=scan_id,
        tenant_id=request.tenant_id,
        workspace_id=request.workspace_id,
        document_type=request.document_type,
        file_name=request.file_name,
        text=request.text,
    )
    if not result.succeeded:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=result.model_dump(mode="json"),
        )
    return result


@router.delete(
    "/{scan_id}/documents/{document_id}/embeddings",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_document_embeddings(
    scan_id: str,
    document_id: str,
    manager: EmbeddingLifecycleManager = Depends(get_lifecycle_manager),
) -> Response:
    """
    Delete a document's chunk records in this scan; other scans are untouched.

    Raises:
        HTTPException(503): Some records could not be deleted; retry
    """
    try:
        deleted = await manager.remove_document(document_id, scan_id=scan_id)
    except ChunkStoreError as e:
        raise HTTPException(status_code=503, detail=e.message)

    logger.info(
        f"{__name__}:delete_document_embeddings - Removed {deleted} chunk records",
        extra={"scan_id": scan_id, "document_id": document_id},
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{scan_id}/embeddings", status_code=status.HTTP_204_NO_CONTENT)
async def delete_scan_embeddings(
    scan_id: str,
    manager: EmbeddingLifecycleManager = Depends(get_lifecycle_manager),
) -> Response:
    """
    Delete every chunk record of a scan.

    Raises:
        HTTPException(503): Some records could not be deleted; retry
    """
    try:
        deleted = await manager.remove_scan(scan_id)
    except ChunkStoreError as e:
        raise HTTPException(status_code=503, detail=e.message)

    logger.info(
        f"{__name__}:delete_scan_embeddings - Removed {deleted} chunk records",
        extra={"scan_id": scan_id},
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
