import json
import time
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from app.api.schemas import ErrorResponse, InvocationResponse, PingResponse
from app.api.dependencies import get_agent_client
from app.domain.interfaces.agent import AgentClient
from app.core.logger import log

router = APIRouter()

def internal_error_response() -> JSONResponse:
    return JSONResponse(status_code=500, content=ErrorResponse().model_dump())

@router.get("/ping", response_model=PingResponse)
async def ping():
    """
    Liveness probe for the agent runtime.
    Does not touch the agent client, so it cannot reflect agent outages.
    """
    log.log("HEALTH", "Ping received")
    return PingResponse(status="Healthy", time_of_last_update=int(time.time()))

@router.post(
    "/invocations",
    response_model=InvocationResponse,
    responses={500: {"model": ErrorResponse}}
)
async def invocations(
    request: Request,
    agent: AgentClient = Depends(get_agent_client)
):
    """
    Forwards the raw request body, whatever its content type, to the agent.
    """
    try:
        body = await request.body()
        prompt = body.decode("utf-8", errors="replace")
        log.info("Invocation received")
        log.info(f"Prompt: {prompt}")
        log.info("Invoking agent...")

        result = await agent.invoke(prompt)
        payload = result.to_payload()

        log.info("Agent response generated")
        log.info(f"Response type: {result.kind}")
        log.info(f"Response: {json.dumps(payload, default=str)}")

        return InvocationResponse(response=payload)

    except Exception as e:
        log.error("Error processing request")
        log.error(f"Error message: {e}")
        log.opt(exception=e).error("Error stack:")
        return internal_error_response()
