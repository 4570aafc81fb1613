import asyncio
import pytest
from fastapi.testclient import TestClient
from app.main import app
from app.api.dependencies import get_agent_client
from app.domain.interfaces.agent import AgentClient
from app.domain.models import TextResult

class FakeAgentClient(AgentClient):
    """
    Stands in for the Bedrock-backed client so tests never leave the process.
    Echoes the prompt unless a result or an error is configured.
    """
    def __init__(self):
        self.prompts = []
        self.result = None
        self.error = None
        self.delay = 0.0

    async def invoke(self, prompt: str):
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        if self.result is not None:
            return self.result
        return TextResult(text=f"echo: {prompt}")

@pytest.fixture
def fake_agent():
    return FakeAgentClient()

@pytest.fixture
def client(fake_agent):
    """
    FastAPI Test Client with the agent client replaced by a fake.
    """
    # Prevent the lifespan from building a real Strands agent
    with pytest.MonkeyPatch.context() as m:
        m.setattr("app.main.build_agent_client", lambda config: fake_agent)
        app.dependency_overrides[get_agent_client] = lambda: fake_agent
        with TestClient(app) as c:
            yield c
        app.dependency_overrides.clear()

@pytest.fixture
def anyio_backend():
    return "asyncio"

@pytest.fixture
def log_lines():
    """
    Collects formatted log lines using the same format as the stdout sink.
    """
    from app.core.logger import LOG_FORMAT, log
    lines = []
    sink_id = log.add(lines.append, format=LOG_FORMAT, level="DEBUG", diagnose=False)
    yield lines
    log.remove(sink_id)
