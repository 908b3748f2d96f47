"""
Metadata scraper - FastAPI application.
Thin HTTP wrapper exposing the scraper as a REST endpoint.
"""
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from metascraper import __version__
from metascraper.config import config
from metascraper.errors import FetchError, FetchTimeoutError, ScraperError
from metascraper.layers.scraper import create_scraper
from metascraper.plugins import default_plugins
from metascraper.utils.logger import get_logger, set_trace_id


# Initialize FastAPI app
app = FastAPI(
    title="Metadata Scraper",
    description="Extracts title, description, OpenGraph, Twitter card and JSON-LD metadata",
    version=__version__,
    debug=config.DEBUG,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

scraper = create_scraper(default_plugins())

logger = get_logger("main")


# Request/Response models
class ScrapeRequest(BaseModel):
    """Request model for metadata extraction."""
    input: str  # URL or literal HTML
    options: Optional[Dict[str, Any]] = None


class ScrapeResponse(BaseModel):
    """Response model for metadata extraction."""
    metadata: Dict[str, Any]
    trace_id: str


def status_for_error(error: ScraperError) -> int:
    """Map a scraper failure to an HTTP status code."""
    if isinstance(error, FetchTimeoutError):
        return 504
    if isinstance(error, FetchError):
        return 502
    return 422


# API Routes
@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.post("/api/scrape", response_model=ScrapeResponse)
async def scrape_metadata(request: ScrapeRequest):
    """
    Extract metadata from a URL or an HTML document.

    Options use the same camelCase keys as the library
    (maxDescriptionLength, secureImages, timeout, ...).
    """
    trace_id = set_trace_id()
    is_html = not request.input.startswith("http")

    logger.info(
        "scrape_request",
        input_kind="html" if is_html else "url",
        url=None if is_html else request.input,
        trace_id=trace_id,
    )

    try:
        metadata = await scraper.scrape(request.input, request.options)
    except ScraperError as e:
        cause = e.cause or e.__cause__
        logger.error(
            "scrape_error",
            error=e.message,
            cause=str(cause) if cause else None,
            trace_id=trace_id,
        )
        detail = e.message if cause is None else f"{e.message}: {cause}"
        raise HTTPException(status_code=status_for_error(e), detail=detail)

    return ScrapeResponse(metadata=metadata.to_dict(), trace_id=trace_id)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
