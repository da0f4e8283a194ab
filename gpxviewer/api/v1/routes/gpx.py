"""
GPX Render Routes

Endpoints turning GPX documents into render models.
"""

from fastapi import APIRouter, UploadFile, File, HTTPException, Query

from gpxviewer.config import settings
from gpxviewer.features.gpx import (
    GpxFetchError,
    GpxLoader,
    MalformedDocumentError,
    CorrelationMismatchError,
    RenderModelResponse,
    TrackRenderAdapter,
)

router = APIRouter()


@router.post("/render", response_model=RenderModelResponse)
async def render_upload(file: UploadFile = File(...)):
    """
    Upload a GPX file and get its render model.

    Returns simplified polylines, waypoint markers, telemetry and viewport.
    """
    # Validate file
    if not file.filename or not file.filename.lower().endswith('.gpx'):
        raise HTTPException(status_code=400, detail="Only .gpx files are allowed")

    # Read content
    content = await file.read()

    if len(content) == 0:
        raise HTTPException(status_code=400, detail="File is empty")

    if len(content) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large (max {settings.max_upload_bytes} bytes)"
        )

    try:
        document = GpxLoader(settings=settings).load_bytes(content)
        model = TrackRenderAdapter(settings=settings).render(document)
    except (MalformedDocumentError, CorrelationMismatchError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    return RenderModelResponse.model_validate(model)


@router.get("/render", response_model=RenderModelResponse)
async def render_url(url: str = Query(..., description="URL of a GPX document")):
    """
    Fetch a GPX document by URL and get its render model.

    The server itself performs the request and follows redirects, so it can
    reach any address the host can, internal ones included. Disabled unless
    GPXVIEWER_ALLOW_URL_FETCH is set.
    """
    if not settings.allow_url_fetch:
        raise HTTPException(status_code=403, detail="Fetching by URL is disabled")

    if not url.lower().startswith(("http://", "https://")):
        raise HTTPException(status_code=400, detail="Only http(s) URLs are allowed")

    try:
        model = await GpxLoader(settings=settings).render_url(url)
    except GpxFetchError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except (MalformedDocumentError, CorrelationMismatchError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    return RenderModelResponse.model_validate(model)
