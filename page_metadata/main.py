"""
Page Metadata Parser - FastAPI Application
HTTP entry point: posts HTML, returns the extracted metadata.
The service never fetches the page itself.
"""
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from page_metadata import __version__
from page_metadata.config import config
from page_metadata.adapters import parse_document
from page_metadata.engine import get_metadata
from page_metadata.rules import metadata_rules
from page_metadata.utils.logger import LayerLogger, get_logger, set_trace_id


# Initialize FastAPI app
app = FastAPI(
    title="Page Metadata Parser",
    description="Extracts link-preview metadata from HTML using prioritized rules",
    version=__version__,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

logger = get_logger("main")
service_logger = LayerLogger("main")


# Request/Response models
class MetadataRequest(BaseModel):
    """Request model for metadata extraction."""
    html: str
    url: Optional[str] = None
    fields: Optional[List[str]] = None  # subset of the default catalog


class MetadataResponse(BaseModel):
    """Response model for metadata extraction."""
    url: Optional[str]
    metadata: Dict[str, Any]
    trace_id: str


class RuleSummary(BaseModel):
    """One field of the default catalog."""
    field: str
    rule_count: int
    scored: bool


# API Routes
@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.get("/api/rules", response_model=List[RuleSummary])
async def list_rules():
    """List the fields of the default rule catalog."""
    return [
        RuleSummary(field=name, rule_count=len(ruleset.rules), scored=ruleset.scorer is not None)
        for name, ruleset in metadata_rules.items()
    ]


@app.post("/api/metadata", response_model=MetadataResponse)
def extract_metadata(request: MetadataRequest):
    """
    Extract metadata from posted HTML.

    Relative links are resolved against `url`, which also feeds the
    canonical URL and provider fallbacks.

    Declared sync: parsing and rule matching are CPU-bound, so FastAPI
    runs this handler in its threadpool and the event loop stays free.
    """
    trace_id = set_trace_id()

    logger.info(
        "metadata_request",
        url=request.url,
        html_length=len(request.html),
        fields=request.fields,
        trace_id=trace_id,
    )

    if len(request.html.encode("utf-8")) > config.MAX_HTML_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"HTML payload exceeds {config.MAX_HTML_BYTES} bytes",
        )

    rule_tree = metadata_rules
    if request.fields:
        unknown = [name for name in request.fields if name not in metadata_rules]
        if unknown:
            raise HTTPException(
                status_code=422,
                detail=f"Unknown metadata fields: {', '.join(unknown)}",
            )
        rule_tree = {name: metadata_rules[name] for name in request.fields}

    try:
        document = parse_document(request.html)
        metadata = get_metadata(document, request.url, rule_tree)
    except ValueError as e:
        logger.warning("metadata_request_invalid", error=str(e), url=request.url)
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        service_logger.log_error(str(e), error_type=type(e).__name__, url=request.url)
        raise HTTPException(status_code=500, detail=str(e))

    return MetadataResponse(url=request.url, metadata=metadata, trace_id=trace_id)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
