"""Response envelope shared by every tool."""

from typing import Any, Dict, List, Literal

from mcp.types import TextContent
from pydantic import BaseModel, Field


class TextPayload(BaseModel):
    """A single text content item."""

    type: Literal["text"] = "text"
    text: str = Field(..., description="Tool output")


class ToolResponse(BaseModel):
    """Uniform success envelope: ``{"content": [{"type": "text", "text": ...}]}``.

    Every tool returns one of these regardless of which branch produced the
    text, including in-band failure descriptions.
    """

    content: List[TextPayload] = Field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "ToolResponse":
        """Create a response holding one text item."""
        return cls(content=[TextPayload(text=text)])

    @property
    def text(self) -> str:
        """Concatenated text of all content items."""
        return "".join(item.text for item in self.content)

    def to_content(self) -> List[TextContent]:
        """Convert to MCP content items for the transport."""
        return [TextContent(type="text", text=item.text) for item in self.content]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return {"content": [{"type": item.type, "text": item.text} for item in self.content]}
