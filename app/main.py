from contextlib import asynccontextmanager
from fastapi import FastAPI, Request

from app.core.config import Settings, settings
from app.core.logger import log
from app.api.routes import router as api_router, internal_error_response
from app.domain.interfaces.agent import AgentClient
from app.infrastructure.agent.strands_client import StrandsAgentClient
from app.infrastructure.tools.registry import registry

def build_agent_client(config: Settings) -> AgentClient:
    """Creates the process-wide agent client with the default tools."""
    log.info(f"Registered tools: {registry.list_tools()}")
    return StrandsAgentClient.from_settings(config, registry)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan events: handled at startup and shutdown.
    The agent client is created once here; a failure aborts startup.
    """
    log.info("Starting up Agent Runtime Relay...")

    app.state.agent_client = build_agent_client(settings)

    log.info(f"AgentCore Runtime server listening on {settings.HOST}:{settings.PORT}")
    log.info("Endpoints:")
    log.info(f"  POST http://{settings.HOST}:{settings.PORT}/invocations")
    log.info(f"  GET  http://{settings.HOST}:{settings.PORT}/ping")

    yield

    log.info("Shutting down Agent Runtime Relay...")

app = FastAPI(
    title=settings.PROJECT_NAME,
    lifespan=lifespan
)

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    log.opt(exception=exc).error(f"Unhandled error on {request.url.path}")
    return internal_error_response()

app.include_router(api_router)

def run():
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=(settings.ENV == "development")
    )

if __name__ == "__main__":
    run()
