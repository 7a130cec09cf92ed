"""Message structures shared by the summary pipeline."""

from dataclasses import dataclass, field
from typing import Any, Literal, Optional, Union

Role = Literal["user", "assistant", "system"]

@dataclass(frozen=True)
class ContentPart:
    """Typed piece of a structured message body (text, image, ...)."""

    type: str
    text: Optional[str] = None
    image: Optional[str] = None

@dataclass(frozen=True)
class Message:
    """Chat turn as received from the front end.

    ``content`` is either plain text or an ordered list of content parts.
    ``annotations`` carries side-channel records such as summary checkpoints.
    """

    id: str
    role: Role
    content: Union[str, list[ContentPart]]
    annotations: list[Any] = field(default_factory=list)

@dataclass(frozen=True)
class ExtractedMessageMetadata:
    """Model/provider directives pulled out of a user message."""

    content: Union[str, list[ContentPart]]
    model: Optional[str] = None
    provider: Optional[str] = None

@dataclass(frozen=True)
class SummaryCheckpoint:
    """Annotation marking the message a summary was taken up to."""

    chat_id: Optional[str]
    summary: str = ""
    type: str = "chatSummary"

def extract_text_content(message: Message) -> str:
    """Return the plain text of a message, joining text parts when structured."""
    if isinstance(message.content, str):
        return message.content
    return "\n".join(part.text or "" for part in message.content if part.type == "text")
