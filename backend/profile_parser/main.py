"""
LinkedIn Profile Parser - FastAPI application
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import structlog

from profile_parser.core.config import settings
from profile_parser.core.logging_config import configure_logging
from profile_parser.core.middleware import (
    CorrelationIDMiddleware,
    RequestLoggingMiddleware,
    error_response,
)
from profile_parser.core.exceptions import ProfileParserException
from profile_parser.profiles.router import router as profiles_router

configure_logging()
logger = structlog.get_logger()

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Structured data from exported LinkedIn profile PDFs",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)

# Added in reverse: the correlation id is bound before requests are logged
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(CorrelationIDMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ProfileParserException)
async def profile_parser_exception_handler(request: Request, exc: ProfileParserException):
    """Handle parser exceptions"""
    return error_response(exc)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/api/docs",
    }


app.include_router(profiles_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "profile_parser.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
