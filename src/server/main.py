"""FastAPI application exposing search, page lookup and listing as JSON."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from opencode_docs.config import INDEX_VERSION, OPENCODE_DOCS_BASE_URL, OPENCODE_DOCS_INDEX
from opencode_docs.index_holder import IndexHolder
from opencode_docs.schemas import DocsIndex
from opencode_docs.search import get_page_by_path, search
from opencode_docs.utils.logging_config import get_logger
from server.models import ErrorResponse, ListResponse, PageListing, SearchHit, SearchResponse

logger = get_logger(__name__)

DEFAULT_SEARCH_LIMIT = 5


def create_app(holder: IndexHolder | None = None) -> FastAPI:
    """Create the API app serving the index held by ``holder``.

    Args:
        holder: Index owner. Defaults to one backed by ``OPENCODE_DOCS_INDEX``.
    """
    app = FastAPI(title="opencode-docs-mcp", version=INDEX_VERSION)
    app.state.holder = holder or IndexHolder(index_path=OPENCODE_DOCS_INDEX)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:  # noqa: ARG001
        message = "Not found" if exc.status_code == status.HTTP_404_NOT_FOUND else str(exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"error": message})

    async def current_index() -> DocsIndex | None:
        return await app.state.holder.get_index()

    def unavailable() -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=ErrorResponse(error="Documentation index not available").model_dump(exclude_none=True),
        )

    @app.get("/")
    async def info() -> dict:
        """Describe the service and its endpoints."""
        return {
            "name": "opencode-docs-mcp",
            "version": INDEX_VERSION,
            "description": "Search the OpenCode documentation",
            "endpoints": {
                "/search": "Search documentation (GET ?q=query&limit=5)",
                "/page": "Get page content (GET ?path=/docs/...)",
                "/list": "List all pages",
            },
            "mcp": {"note": "For full MCP protocol support, run: opencode-docs serve"},
            "docs": f"{OPENCODE_DOCS_BASE_URL}/",
        }

    @app.get("/search", response_model=SearchResponse, responses={400: {"model": ErrorResponse}})
    async def search_docs(q: str = "", limit: str | None = None) -> SearchResponse | JSONResponse:
        """Rank pages against ``q``.

        ``limit`` falls back to the default when it is missing, not an
        integer, or below one.
        """
        if not q:
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content=ErrorResponse(error="Missing query parameter: q").model_dump(exclude_none=True),
            )
        index = await current_index()
        if index is None:
            return unavailable()

        hits = [
            SearchHit(
                path=result.page.path,
                title=result.page.title,
                url=result.page.url,
                category=result.page.category,
                score=result.score,
                snippet=result.snippet,
            )
            for result in search(index, q, parse_limit(limit))
        ]
        logger.info("Search served", extra={"query": q, "count": len(hits)})
        return SearchResponse(query=q, results=hits, count=len(hits))

    @app.get("/page", responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}})
    async def get_page(path: str = "") -> JSONResponse:
        """Return one page with its wire field names."""
        if not path:
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content=ErrorResponse(error="Missing query parameter: path").model_dump(exclude_none=True),
            )
        index = await current_index()
        if index is None:
            return unavailable()

        page = get_page_by_path(index, path)
        if page is None:
            body = ErrorResponse(error="Page not found", available=[p.path for p in index.pages])
            return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=body.model_dump())
        return JSONResponse(content=page.model_dump(by_alias=True, mode="json"))

    @app.get("/list", response_model=ListResponse)
    async def list_pages() -> ListResponse | JSONResponse:
        """List every indexed page."""
        index = await current_index()
        if index is None:
            return unavailable()
        listings = [
            PageListing(path=page.path, title=page.title, url=page.url, category=page.category)
            for page in index.pages
        ]
        return ListResponse(pages=listings, count=len(listings))

    return app


def parse_limit(raw: str | None) -> int:
    """Parse the ``limit`` query parameter of ``/search``."""
    try:
        limit = int(raw) if raw is not None else DEFAULT_SEARCH_LIMIT
    except ValueError:
        return DEFAULT_SEARCH_LIMIT
    return limit if limit >= 1 else DEFAULT_SEARCH_LIMIT


app = create_app()
