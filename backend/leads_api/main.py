"""FastAPI application for lead deduplication"""

from fastapi import Body, FastAPI, Query
from fastapi.responses import PlainTextResponse, Response
from typing import Any, Dict
import json
import logging

from leads_core.errors import LeadsError
from leads_core.processor import LeadProcessor
from leads_config.loader import ConfigLoader

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="Lead Deduplication API", version="1.0.0")


def get_processor() -> LeadProcessor:
    """Build a processor for a single request"""
    config = ConfigLoader.load_config()
    return LeadProcessor(diff_fields=config.get('diff_fields', 'all'))


@app.post("/api/process-leads", response_class=PlainTextResponse)
def process_leads(
    input: str = Query(..., description="Input JSON file path"),
    output: str = Query(..., description="Output JSON file path"),
):
    """
    Deduplicate a lead file and write the result

    Args:
        input: Path of the JSON file holding {"leads": [...]}
        output: Path the filtered leads are written to

    Returns:
        Success text, or the error message with status 500
    """
    try:
        get_processor().process_leads(input, output)
        return PlainTextResponse("Filtered leads have been written")
    except LeadsError as e:
        logger.error(f"Processing error: {e}")
        return PlainTextResponse(str(e), status_code=500)
    except Exception as e:
        logger.error(f"Processing error: {e}", exc_info=True)
        return PlainTextResponse(str(e), status_code=500)


@app.post("/api/dedupe")
def dedupe(document: Dict[str, Any] = Body(...)):
    """
    Deduplicate a lead document sent in the request body

    Returns:
        The filtered document, or the error message with status 500
    """
    try:
        payload = get_processor().process_document(json.dumps(document).encode('utf-8'))
        return Response(content=payload, media_type="application/json")
    except LeadsError as e:
        logger.error(f"Processing error: {e}")
        return PlainTextResponse(str(e), status_code=500)
    except Exception as e:
        logger.error(f"Processing error: {e}", exc_info=True)
        return PlainTextResponse(str(e), status_code=500)


@app.get("/health")
def health():
    """Health check endpoint"""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
