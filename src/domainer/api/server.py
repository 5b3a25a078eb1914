"""
FastAPI server for URL decomposition.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse

from domainer.api.models import ParsedURLResponse
from domainer.config import get_config
from domainer.parsing import ParseError, ResolutionError, URLParser, get_parser

# Configure logging
logging.basicConfig(
    level=get_config().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for the FastAPI app.

    Loads the public suffix list on startup so the first request does not pay for it.
    """
    logger.info("Starting up: loading public suffix list...")
    get_parser()
    logger.info("Public suffix list loaded")

    yield

    logger.info("Shutting down...")


# Create FastAPI app
app = FastAPI(
    title="Domainer API",
    description="URL → protocol, credentials, subdomain, domain, TLD, port, path, query, fragment",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "Domainer API is running"}


@app.get("/v1/parse", response_model=ParsedURLResponse)
def parse(
    url: str = Query(..., description="URL or bare domain to decompose"),
    resolve: bool = Query(False, description="Resolve the hostname to an IP address"),
    parser: URLParser = Depends(get_parser),
) -> ParsedURLResponse:
    """
    Decompose a URL.

    Args:
        url: URL or bare domain (e.g., "https://www.example.co.uk/search?q=1")
        resolve: Also look up the hostname's address

    Returns:
        ParsedURLResponse with every component

    Raises:
        422: If the port is malformed or the host has no public suffix
        502: If resolution was requested and failed
    """
    try:
        if resolve:
            parsed = parser.parse_with_resolution(url)
        else:
            parsed = parser.parse(url)
    except ParseError as e:
        logger.warning(f"Parse failed at {e.stage}: {e}")
        raise HTTPException(status_code=422, detail=f"{e.stage}: {e}")
    except ResolutionError as e:
        logger.warning(f"Resolution failed: {e}")
        raise HTTPException(status_code=502, detail=f"{e.stage}: {e}")
    except Exception as e:
        logger.error(f"Error in parse: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")

    return ParsedURLResponse.from_parsed(parsed)


@app.exception_handler(500)
async def internal_error_handler(request, exc):
    """Custom 500 handler."""
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def main():
    """Run the server (for development)."""
    import uvicorn

    config = get_config()
    uvicorn.run(
        app,
        host=config.api.host,
        port=config.api.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
