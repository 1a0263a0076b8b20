from __future__ import annotations

from .models import ChatRequest, Message

SHORT_INSTRUCTIONS = (
    "Provide a concise summary in 2-3 sentences, "
    "capturing only the most essential points."
)
DETAILED_INSTRUCTIONS = (
    "Provide a comprehensive summary with multiple paragraphs, covering all key "
    "points, supporting details, and important nuances."
)
MEDIUM_INSTRUCTIONS = (
    "Provide a balanced summary in one paragraph, "
    "covering the main ideas and key supporting points."
)

IMAGE_MODALITIES = ["image", "text"]


def select_instructions(length: str | None) -> str:
    """Map a summary length selector to its instruction text; medium is the fallback."""
    if length == "short":
        return SHORT_INSTRUCTIONS
    if length == "detailed":
        return DETAILED_INSTRUCTIONS
    return MEDIUM_INSTRUCTIONS


def build_summary_request(text: str, length: str | None, model: str) -> ChatRequest:
    instructions = select_instructions(length)
    system = (
        f"You are an expert text summarizer. {instructions} "
        "Focus on accuracy and clarity."
    )
    user = f"Please summarize the following text:\n\n{text}"

    return ChatRequest(
        model=model,
        messages=[
            Message(role="system", content=system),
            Message(role="user", content=user),
        ],
    )


def build_image_request(prompt: str, model: str) -> ChatRequest:
    system = (
        "You are an image generation assistant. Produce a single high-quality "
        "image that faithfully depicts the user's description."
    )
    return ChatRequest(
        model=model,
        messages=[
            Message(role="system", content=system),
            Message(role="user", content=prompt),
        ],
        modalities=IMAGE_MODALITIES,
    )
