from fastapi import Request
from app.domain.interfaces.agent import AgentClient

def get_agent_client(request: Request) -> AgentClient:
    """
    Dependency provider for the shared agent client built at startup.
    Allows for easy mocking during tests.
    """
    return request.app.state.agent_client
