from pydantic import BaseModel, Field
from typing import Annotated, Any, Dict, Literal, Union

class TextResult(BaseModel):
    """
    Plain-text answer from the agent.
    """
    kind: Literal["text"] = "text"
    text: str

    def to_payload(self) -> str:
        return self.text

class StructuredResult(BaseModel):
    """
    Structured answer from the agent (stop reason, final message, ...).
    Serialised verbatim.
    """
    kind: Literal["structured"] = "structured"
    data: Dict[str, Any] = Field(default_factory=dict)

    def to_payload(self) -> Dict[str, Any]:
        return self.data

InvocationResult = Annotated[
    Union[TextResult, StructuredResult],
    Field(discriminator="kind")
]
