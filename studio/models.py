from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

SummaryLength = Literal["short", "medium", "detailed"]


class Message(BaseModel):
    role: str
    content: str


class ChatRequest(BaseModel):
    model: str
    messages: list[Message]
    modalities: list[str] | None = None


class ImageUrl(BaseModel):
    url: str | None = None


class ImagePart(BaseModel):
    model_config = ConfigDict(extra="allow")

    image_url: ImageUrl | None = None


class ChoiceMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    content: str | None = None
    images: list[ImagePart] | None = None


class Choice(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: ChoiceMessage | None = None


class ChatResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    choices: list[Choice] = []

    def first_message(self) -> ChoiceMessage | None:
        if not self.choices:
            return None
        return self.choices[0].message


class SummarizeRequest(BaseModel):
    text: str
    length: SummaryLength = "medium"


class ImageRequest(BaseModel):
    prompt: str


class SummaryEnvelope(BaseModel):
    summary: str


class ImageEnvelope(BaseModel):
    image: str


class ErrorEnvelope(BaseModel):
    error: str
