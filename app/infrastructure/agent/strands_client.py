import dataclasses
import json
from typing import Any, Callable, Dict, List, Optional

from strands import Agent
from strands.models import BedrockModel

from app.core.config import Settings
from app.core.exceptions import AgentInvocationError
from app.core.logger import log
from app.domain.interfaces.agent import AgentClient
from app.domain.models import InvocationResult, StructuredResult, TextResult
from app.infrastructure.tools.registry import ToolRegistry

class StrandsAgentClient(AgentClient):
    """
    Agent client backed by the Strands Agents SDK and Amazon Bedrock.

    The Bedrock model and the tool list are built once and shared. A Strands
    Agent keeps the conversation on the instance and rejects concurrent calls,
    so every invocation gets its own Agent around the shared model.
    """

    def __init__(
        self,
        model: Any,
        tools: List[Any],
        system_prompt: Optional[str] = None,
        response_format: str = "structured",
        agent_factory: Optional[Callable[..., Any]] = None
    ):
        self.model = model
        self.tools = tools
        self.system_prompt = system_prompt
        self.response_format = response_format
        self._agent_factory = agent_factory or Agent

    @classmethod
    def from_settings(cls, settings: Settings, registry: ToolRegistry) -> "StrandsAgentClient":
        model_kwargs = {"region_name": settings.AWS_REGION}
        if settings.MODEL_ID:
            model_kwargs["model_id"] = settings.MODEL_ID

        log.info(f"Configuring Bedrock model in region {settings.AWS_REGION}")
        return cls(
            model=BedrockModel(**model_kwargs),
            tools=registry.get_agent_tools(),
            system_prompt=settings.SYSTEM_PROMPT,
            response_format=settings.RESPONSE_FORMAT
        )

    def _new_agent(self):
        return self._agent_factory(
            model=self.model,
            tools=self.tools,
            system_prompt=self.system_prompt,
            callback_handler=None  # keep streamed tokens out of stdout
        )

    async def invoke(self, prompt: str) -> InvocationResult:
        agent = self._new_agent()
        try:
            result = await agent.invoke_async(prompt)
        except Exception as e:
            raise AgentInvocationError(f"Agent invocation failed: {e}") from e

        return self.to_result(result)

    def to_result(self, result: Any) -> InvocationResult:
        """Maps a Strands AgentResult onto the relay's result union."""
        if self.response_format == "text":
            return TextResult(text=str(result))
        return StructuredResult(data=serialise_agent_result(result))

def serialise_agent_result(result: Any) -> Dict[str, Any]:
    """
    Turns every field of an AgentResult into JSON-safe data.
    Metrics collapse to their summary; values JSON cannot hold become strings.
    """
    if dataclasses.is_dataclass(result):
        data = {f.name: getattr(result, f.name) for f in dataclasses.fields(result)}
    else:
        data = {
            "stop_reason": getattr(result, "stop_reason", None),
            "message": getattr(result, "message", None)
        }

    metrics = data.get("metrics")
    if hasattr(metrics, "get_summary"):
        data["metrics"] = metrics.get_summary()

    structured_output = data.get("structured_output")
    if hasattr(structured_output, "model_dump"):
        data["structured_output"] = structured_output.model_dump(mode="json")

    return json.loads(json.dumps(data, default=str))
