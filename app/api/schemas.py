from pydantic import BaseModel, Field
from typing import Any

class PingResponse(BaseModel):
    """
    Liveness probe payload expected by the agent runtime.
    """
    status: str = Field("Healthy", description="Always 'Healthy' while the process runs.")
    time_of_last_update: int = Field(..., description="Current time in unix seconds.")

class InvocationResponse(BaseModel):
    """
    API Response model. The agent result is passed through verbatim.
    """
    response: Any = Field(..., description="Text or structured result from the agent.")

class ErrorResponse(BaseModel):
    error: str = "Internal server error"
