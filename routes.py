from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from models import (
    AnalyzeResponse,
    InitResponse,
    LighthouseResponse,
    QuestionRequest,
    QuestionResponse,
    ScreenshotResponse,
    UrlRequest,
)
from dependencies import Services, get_services
from errors import BacklinksError, IndexNotReadyError, IndexingError
import logging

logger = logging.getLogger(__name__)

# Create router
router = APIRouter()


@router.get("/")
async def root():
    return {
        "service": "SEO Analyzer",
        "status": "running",
        "endpoints": {
            "analyze": "/analyze (POST)",
            "screenshot": "/screenshot (POST)",
            "lighthouse": "/lighthouse (POST)",
            "backlinks": "/backlinks (GET)",
            "init": "/init (GET, POST)",
            "rag_query": "/rag/query (POST)",
        },
    }


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_website(request: UrlRequest, services: Services = Depends(get_services)):
    """
    Analyzes a website's on-page SEO and returns recommendations.

    Loads the page once, captures a full-page screenshot, extracts title,
    meta description, headings, paragraphs, lists, links and images, and asks
    Claude for an improvement plan covering ten SEO focus areas.
    """
    url = str(request.url)
    try:
        screenshot, analysis = await services.page_analyzer.analyze(url)
    except Exception:
        logger.exception(f"Error analyzing website {url}")
        raise HTTPException(status_code=500, detail="Failed to analyze website")

    return AnalyzeResponse(screenshot=screenshot, seo_analysis=analysis)


@router.post("/screenshot", response_model=ScreenshotResponse)
async def screenshot_website(request: UrlRequest, services: Services = Depends(get_services)):
    url = str(request.url)
    try:
        screenshot = await services.page_analyzer.screenshot(url)
    except Exception:
        logger.exception(f"Error capturing screenshot of {url}")
        raise HTTPException(status_code=500, detail="Failed to capture screenshot")

    return ScreenshotResponse(screenshot=screenshot)


@router.post("/lighthouse", response_model=LighthouseResponse)
async def lighthouse_audit(request: UrlRequest, services: Services = Depends(get_services)):
    """
    Runs Lighthouse (performance, accessibility, best practices, SEO) and
    returns category scores, every audit, and Claude's feedback on the most
    critical issues.
    """
    url = str(request.url)
    try:
        report = await services.lighthouse.run(url)
        feedback = await services.composer.audit_recommendations(report.audits)
    except Exception:
        logger.exception(f"Error running Lighthouse and generating feedback for {url}")
        raise HTTPException(
            status_code=500,
            detail="Failed to run Lighthouse analysis and generate feedback",
        )

    return LighthouseResponse(
        lighthouse_results=report.categories,
        lighthouse_audits=report.audits,
        feedback=feedback,
    )


@router.get("/backlinks")
async def backlinks(target: Optional[str] = None, services: Services = Depends(get_services)):
    """Live backlinks for target from DataForSEO, passed through unchanged."""
    if services.backlinks is None:
        raise HTTPException(status_code=503, detail="Backlinks provider is not configured")

    try:
        return await services.backlinks.fetch_async(target or services.settings.BACKLINKS_TARGET)
    except BacklinksError as e:
        logger.exception("Error fetching backlinks")
        raise HTTPException(
            status_code=500,
            detail={"error": "Failed to fetch backlinks", "details": str(e)},
        )


@router.api_route("/init", methods=["GET", "POST"], response_model=InitResponse)
async def init_rag(services: Services = Depends(get_services)):
    """
    Builds (or rebuilds) the document index used by /rag/query.
    Concurrent calls are serialized; each one fully replaces the index.
    """
    try:
        chunks = await services.indexer.rebuild()
    except IndexingError:
        logger.exception("Error initializing document index")
        raise HTTPException(status_code=500, detail="Failed to initialize document index")

    return InitResponse(status=services.index_state.status.value, chunks=chunks)


@router.post("/rag/query", response_model=QuestionResponse)
async def rag_query(request: QuestionRequest, services: Services = Depends(get_services)):
    try:
        answer = await services.responder.answer(request.question)
    except IndexNotReadyError as e:
        raise HTTPException(status_code=503, detail=str(e))

    return QuestionResponse(answer=answer)


@router.get("/health")
async def health_check():
    return {"status": "healthy"}


@router.get("/status/detailed")
async def detailed_status_check(services: Services = Depends(get_services)):
    """
    Component status for monitoring: document index state and which
    external providers are configured.
    """
    settings = services.settings
    status_info = {
        "api": "healthy",
        "anthropic_api": "configured" if settings.ANTHROPIC_API_KEY else "missing",
        "backlinks_api": "configured" if services.backlinks is not None else "missing",
        "vector_store": settings.CHROMA_HOST or settings.CHROMA_PERSIST_DIR,
        "document_index": {
            "status": services.index_state.status.value,
            "chunks": services.index_state.chunk_count,
        },
    }

    if status_info["anthropic_api"] == "missing" or not services.index_state.is_ready:
        status_info["overall_status"] = "degraded"
    else:
        status_info["overall_status"] = "healthy"

    return status_info
