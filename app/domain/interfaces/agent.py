from abc import ABC, abstractmethod

from app.domain.models import InvocationResult

class AgentClient(ABC):
    """
    Abstract interface for the hosted agent.
    A single instance is shared by all requests, so implementations must
    not keep per-call state on the instance.
    """

    @abstractmethod
    async def invoke(self, prompt: str) -> InvocationResult:
        """
        Send a prompt to the agent and wait for its answer.

        Args:
            prompt: The user prompt, possibly empty

        Returns:
            A TextResult or StructuredResult

        Raises:
            AgentInvocationError: If the agent or its model endpoint fails
        """
        pass
