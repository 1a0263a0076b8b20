from __future__ import annotations

import base64
import os
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

app = FastAPI()

# 1x1 transparent PNG
_PIXEL_PNG = base64.b64encode(
    bytes.fromhex(
        "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
        "1f15c4890000000d49444154789c63000100000500010d0a2db40000000049454e44ae426082"
    )
).decode()


def _summarize_text(text: str, max_words: int = 20) -> str:
    words = text.split()
    snippet = " ".join(words[:max_words])
    return f"Summary: {snippet}{'...' if len(words) > max_words else ''}"


def _forced_status() -> int | None:
    value = os.getenv("MOCK_STATUS")
    return int(value) if value else None


@app.post("/v1/chat/completions")
async def chat_completions(request: Request):
    status = _forced_status()
    if status is not None and status >= 400:
        return JSONResponse({"error": {"message": f"mock status {status}"}}, status_code=status)

    body: dict[str, Any] = await request.json()
    messages = body.get("messages", [])

    if "image" in body.get("modalities", []):
        return {
            "choices": [
                {
                    "message": {
                        "role": "assistant",
                        "content": "Here is your image.",
                        "images": [
                            {
                                "type": "image_url",
                                "image_url": {"url": f"data:image/png;base64,{_PIXEL_PNG}"},
                            }
                        ],
                    }
                }
            ]
        }

    user_text = messages[-1].get("content", "") if messages else ""
    return {
        "choices": [
            {
                "message": {
                    "role": "assistant",
                    "content": _summarize_text(user_text),
                }
            }
        ]
    }
