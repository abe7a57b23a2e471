"""
Search Server - FastAPI application over the in-memory TF-IDF index

Endpoints:
- POST /v1/documents                      add a document
- GET  /v1/documents/count                number of documents
- GET  /v1/documents/by-index/{index}     id at insertion position
- POST /v1/search                         ranked top-5 search (optionally paged)
- POST /v1/documents/{doc_id}/match       matched query words for one document

The index lives in process memory and is lost on restart. Sync endpoints
run in FastAPI's threadpool, so all engine access goes through one lock:
ingestion never interleaves with a query.
"""

import logging
import threading
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import FastAPI, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .config import Settings, load_env_files
from .index import (
    DocumentStatus,
    InvalidInputError,
    OutOfRangeError,
    SearchServer,
    paginate,
    status_is,
)
from .logging_config import setup_logging

load_env_files()
settings = Settings.from_env()

logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"
APP_START_TIME = datetime.now(timezone.utc)

# Global engine + lock serializing writers against readers
search_server = SearchServer(settings.stop_words)
engine_lock = threading.RLock()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup"""
    setup_logging(
        log_file=settings.log_file,
        console_level=settings.console_level,
        file_level=logging.DEBUG  # Always DEBUG in file for troubleshooting
    )
    logger.info(f"Search server {APP_VERSION} started ({len(search_server.stop_words)} stop words)")
    yield
    logger.info(f"Shutting down with {search_server.get_document_count()} documents in memory")


app = FastAPI(
    title="Search Server API",
    description="In-memory full-text search with TF-IDF ranking",
    version=APP_VERSION,
    lifespan=lifespan,
)


# Request/Response models
class HealthResponse(BaseModel):
    status: str
    version: str
    started_at: str
    uptime_seconds: float
    document_count: int


class AddDocumentRequest(BaseModel):
    id: int = Field(..., description="Non-negative unique document id")
    text: str = Field(..., description="Space-delimited document text")
    status: str = Field(default="actual", description="actual | irrelevant | banned | removed")
    ratings: List[int] = Field(default_factory=list, description="Raw ratings; average truncated toward zero")


class AddDocumentResponse(BaseModel):
    document_id: int
    rating: int
    status: str
    document_count: int
    message: str


class DocumentCountResponse(BaseModel):
    count: int


class DocumentIdResponse(BaseModel):
    index: int
    document_id: int


class SearchRequest(BaseModel):
    query: str = Field(..., description="Query, e.g. 'curly -dog'")
    status: Optional[str] = Field(default=None, description="Only documents with this status (default: actual)")
    min_rating: Optional[int] = Field(default=None, description="Only documents with at least this average rating")
    page_size: Optional[int] = Field(default=None, ge=1, description="Results per page (default: SEARCH_PAGE_SIZE)")


class SearchResultItem(BaseModel):
    document_id: int
    relevance: float
    rating: int


class SearchResponse(BaseModel):
    query: str
    results: List[SearchResultItem]
    pages: List[List[SearchResultItem]]
    total: int


class MatchRequest(BaseModel):
    query: str


class MatchResponse(BaseModel):
    document_id: int
    matched_words: List[str]
    status: str


def build_predicate(document_status: DocumentStatus, min_rating: Optional[int] = None):
    """Status filter, optionally combined with a minimum rating"""
    by_status = status_is(document_status)
    if min_rating is None:
        return by_status

    def predicate(document_id: int, doc_status: DocumentStatus, rating: int) -> bool:
        return by_status(document_id, doc_status, rating) and rating >= min_rating

    return predicate


# Routes
@app.get("/", response_model=dict)
def root():
    """Root endpoint"""
    return {
        "service": "Search Server API",
        "version": APP_VERSION,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health", response_model=HealthResponse)
def health():
    """Health check endpoint"""
    uptime = (datetime.now(timezone.utc) - APP_START_TIME).total_seconds()

    with engine_lock:
        document_count = search_server.get_document_count()

    return HealthResponse(
        status="healthy",
        version=APP_VERSION,
        started_at=APP_START_TIME.isoformat(),
        uptime_seconds=round(uptime, 2),
        document_count=document_count,
    )


@app.post("/v1/documents", response_model=AddDocumentResponse, status_code=status.HTTP_201_CREATED)
def add_document(request: AddDocumentRequest):
    """
    Add a document to the index

    Example:
        POST /v1/documents
        {"id": 2, "text": "funny pet with curly hair", "status": "actual", "ratings": [1, 2, 3]}
    """
    try:
        document_status = DocumentStatus.parse(request.status)

        with engine_lock:
            search_server.add_document(request.id, request.text, document_status, request.ratings)
            record = search_server.get_document(request.id)
            document_count = search_server.get_document_count()

        logger.info(f"Added document {request.id} (status={document_status}, rating={record.rating})")

        return AddDocumentResponse(
            document_id=request.id,
            rating=record.rating,
            status=str(document_status),
            document_count=document_count,
            message=f"Document {request.id} added successfully",
        )

    except InvalidInputError as e:
        logger.warning(f"Rejected document {request.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@app.get("/v1/documents/count", response_model=DocumentCountResponse)
def get_document_count():
    """Number of indexed documents"""
    with engine_lock:
        return DocumentCountResponse(count=search_server.get_document_count())


@app.get("/v1/documents/by-index/{index}", response_model=DocumentIdResponse)
def get_document_id(index: int):
    """
    Document id at an insertion position

    Example:
        GET /v1/documents/by-index/0
    """
    try:
        with engine_lock:
            document_id = search_server.get_document_id(index)
        return DocumentIdResponse(index=index, document_id=document_id)

    except OutOfRangeError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@app.post("/v1/search", response_model=SearchResponse)
def search(request: SearchRequest):
    """
    Ranked search (top 5 by TF-IDF, ties broken by rating)

    Example:
        POST /v1/search
        {"query": "curly dog", "page_size": 2}
    """
    try:
        document_status = (
            DocumentStatus.parse(request.status) if request.status else DocumentStatus.ACTUAL
        )
        predicate = build_predicate(document_status, request.min_rating)

        with engine_lock:
            documents = search_server.find_top_documents(request.query, predicate)

        results = [
            SearchResultItem(document_id=doc.id, relevance=doc.relevance, rating=doc.rating)
            for doc in documents
        ]
        pages = [list(page) for page in paginate(results, request.page_size or settings.page_size)]

        logger.debug(f"Query {request.query!r}: {len(results)} results in {len(pages)} pages")

        return SearchResponse(
            query=request.query,
            results=results,
            pages=pages,
            total=len(results),
        )

    except InvalidInputError as e:
        logger.warning(f"Rejected query {request.query!r}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@app.post("/v1/documents/{doc_id}/match", response_model=MatchResponse)
def match_document(doc_id: int, request: MatchRequest):
    """
    Query words present in one document

    Matched words are empty when the document contains an excluded word.

    Example:
        POST /v1/documents/2/match
        {"query": "curly -dog"}
    """
    try:
        with engine_lock:
            if search_server.get_document(doc_id) is None:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail=f"Document {doc_id} not found",
                )
            matched_words, document_status = search_server.match_document(request.query, doc_id)

        return MatchResponse(
            document_id=doc_id,
            matched_words=matched_words,
            status=str(document_status),
        )

    except HTTPException:
        raise
    except InvalidInputError as e:
        logger.warning(f"Rejected match query {request.query!r}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler"""
    logger.exception(f"Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": str(exc),
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "search_server.main:app",
        host="0.0.0.0",
        port=settings.port,
    )
