"""
FastAPI application for the Hockey SEO Opportunity Analyzer.
Provides the keyword analysis endpoint used by the team-site audit form.
"""
import uuid
import logging
from typing import Optional
from fastapi import APIRouter, FastAPI, Header, Request
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from hockey_seo import config
from hockey_seo.analyzer import InvalidAnalysisRequest, KeywordOpportunityAnalyzer, parse_analysis_request

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler()
    ]
)
logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

# Initialize FastAPI app
app = FastAPI(
    title="Hockey SEO Opportunity Analyzer",
    description="""
    Ranks a hockey team's search keywords by content opportunity.

    ## Features
    * Opportunity scoring per keyword
    * Content gap classification
    * Content and AI-search recommendations

    ## Usage
    1. POST a team name, league and keywords to `/analyze`
    2. Receive analyses sorted by opportunity, highest first

    Ranking, volume and competitor figures are simulated.
    """,
    version=config.API_VERSION
)

# Initialize analyzer
analyzer = KeywordOpportunityAnalyzer()

router = APIRouter()


@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    """Answer preflight requests and put permissive CORS headers on every response."""
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render routing errors with the same `{"error": ...}` body as the API errors."""
    if exc.status_code == 405:
        content = {"error": "Method not allowed"}
    else:
        content = {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


@router.post("/analyze")
async def analyze_keywords(
    request: Request,
    request_id: Optional[str] = Header(None)  # Keep request_id for logging
):
    """
    Analyze a team's keywords for SEO content opportunities.

    Expects a JSON body `{teamName, league?, keywords, email?}`. Only the first
    five keywords are analyzed; `totalKeywords` in the response still counts all
    of them.

    Returns:
        200 with the analysis, 400 for a missing team name or keywords list,
        500 with the error message if the analysis fails
    """
    # Generate request ID for tracing
    request_id = request_id or str(uuid.uuid4())

    try:
        try:
            payload = await request.json()
        except ValueError:
            payload = None

        analysis_request = parse_analysis_request(payload, max_keywords=analyzer.max_keywords)
        logger.info(f"[{request_id}] Received analysis request with {len(analysis_request.keywords)} keywords")

        result = analyzer.analyze(analysis_request, request_id=request_id)
        return JSONResponse(content=result.to_payload())

    except InvalidAnalysisRequest as e:
        error_msg = str(e)
        logger.error(f"[{request_id}] Invalid input: {error_msg}")
        return JSONResponse(status_code=400, content={"error": error_msg})

    except Exception as e:
        logger.error(f"[{request_id}] Analysis error: {str(e)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Analysis failed", "message": str(e)}
        )


# Served at /analyze and at the serverless-style /api/analyze
app.include_router(router)
app.include_router(router, prefix="/api")


@app.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns:
        Dict containing status of the API and the data source in use
    """
    return {
        "status": "healthy",
        "version": config.API_VERSION,
        "dataSource": {
            "name": analyzer.data_source.name,
            "isRealData": analyzer.data_source.is_real_data
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
