from typing import Literal

from mcp import types
from pydantic import BaseModel, Field


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class InvocationResult(BaseModel):
    content: list[TextContent] = Field(default_factory=list)
    is_error: bool = False

    @classmethod
    def text(cls, text: str) -> "InvocationResult":
        return cls(content=[TextContent(text=text)])

    @classmethod
    def error(cls, message: str) -> "InvocationResult":
        return cls(content=[TextContent(text=message)], is_error=True)

    def to_call_tool_result(self) -> types.CallToolResult:
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=item.text) for item in self.content],
            isError=self.is_error,
        )
