from abc import ABC, abstractmethod
from typing import Dict, Any, Optional

from strands import tool as strands_tool

class BaseTool(ABC):
    """
    Abstract Base Class for all tools the agent may call.
    Enforces a strict contract for tool definition and execution.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The unique name of the function (e.g., 'get_timestamp')."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Description of what the tool does for the LLM."""
        pass

    @property
    def parameters(self) -> Optional[Dict[str, Any]]:
        """JSON Schema of the input, or None when the tool takes no input."""
        return None

    @abstractmethod
    def execute(self, **kwargs) -> str:
        """
        The actual implementation of the tool.
        Runs synchronously and returns the text handed back to the model.
        """
        pass

    def to_schema(self) -> Dict[str, Any]:
        """
        Returns the Bedrock tool specification for this tool.
        """
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": {
                "json": self.parameters or {"type": "object", "properties": {}}
            }
        }

    def to_agent_tool(self):
        """Wraps execute() as a Strands tool."""
        return strands_tool(
            self.execute,
            name=self.name,
            description=self.description,
            inputSchema=self.to_schema()["inputSchema"]
        )
