import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api import analyze_router, repos_router
from src.api.errors import register_error_handlers
from src.core.config import config
from src.core.utils.logging import configure_logging
from src.integrations.providers import get_provider

# --- Application Setup ---

configure_logging(config.logging)
logger = structlog.get_logger()

app = FastAPI(
    title="OpenSourceGuide",
    description="Find where to start contributing to any GitHub repository.",
    version="0.1.0",
)

# --- CORS Configuration ---

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors.origins,
    allow_credentials=config.cors.allow_credentials,
    allow_methods=["*"],
    allow_headers=config.cors.headers,
)

# --- Error Handling ---

register_error_handlers(app)

# --- Include Routers ---

app.include_router(analyze_router, prefix="/api")
app.include_router(repos_router, prefix="/api")

# --- Root Endpoint ---


@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the service is running."""
    return {"status": "ok", "message": "OpenSourceGuide API is running."}


# --- Application Lifecycle ---


@app.on_event("startup")
async def startup_event():
    """Report which upstream integrations are authenticated."""
    try:
        config.validate()
    except ValueError as e:
        logger.warning("configuration_incomplete", detail=str(e))

    try:
        llm = get_provider().describe()
    except ValueError as e:
        llm = {"provider": config.ai.provider, "error": str(e)}

    logger.info(
        "application_started",
        environment=config.environment,
        github_authenticated=config.github.authenticated,
        llm_active=config.ai.active,
        llm=llm,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("src.main:app", host="0.0.0.0", port=config.port, reload=config.debug)
