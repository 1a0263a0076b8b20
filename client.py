from __future__ import annotations

import argparse
import base64
import json
import sys
import time
from pathlib import Path
from typing import Any

import httpx


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="AI studio client")
    parser.add_argument("--url", default="http://localhost:8000")
    parser.add_argument(
        "--timeout",
        type=float,
        default=120.0,
        help="Seconds to wait for the studio to answer.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print the request payload before sending.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    image = sub.add_parser("image", help="Generate an image from a prompt.")
    image.add_argument("prompt", help="Description of the image to generate.")
    image.add_argument(
        "--output",
        default=None,
        help="Where to save the image (defaults to ai-generated-<timestamp>.png).",
    )

    summarize = sub.add_parser("summarize", help="Summarize a text file or stdin.")
    summarize.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Text file to summarize; '-' reads stdin.",
    )
    summarize.add_argument(
        "--length",
        choices=["short", "medium", "detailed"],
        default="medium",
    )
    return parser.parse_args()


def _post(args: argparse.Namespace, path: str, payload: dict[str, Any]) -> dict[str, Any]:
    url = f"{args.url.rstrip('/')}{path}"
    if args.debug:
        print(f"[debug] url={url}")
        print(f"[debug] payload={json.dumps(payload, ensure_ascii=False)[:500]}")

    resp = httpx.post(url, json=payload, timeout=args.timeout)
    try:
        data = resp.json()
    except ValueError:
        data = {"error": resp.text}
    if resp.status_code >= 400:
        print(f"[error] {resp.status_code}: {data.get('error', data)}")
        raise SystemExit(1)
    return data


def _save_image(image: str, output: str | None) -> Path:
    path = Path(output or f"ai-generated-{int(time.time() * 1000)}.png")
    if image.startswith("data:"):
        _, _, encoded = image.partition(",")
        path.write_bytes(base64.b64decode(encoded))
    else:
        resp = httpx.get(image, timeout=60.0, follow_redirects=True)
        resp.raise_for_status()
        path.write_bytes(resp.content)
    return path


def _read_text(file: str) -> str:
    if file == "-":
        return sys.stdin.read()
    return Path(file).read_text(encoding="utf-8")


def main() -> None:
    args = _parse_args()

    if args.command == "image":
        if not args.prompt.strip():
            print("[error] prompt required")
            raise SystemExit(1)
        data = _post(args, "/generate-image", {"prompt": args.prompt})
        path = _save_image(data["image"], args.output)
        print(f"[info] image saved to {path}")
        return

    text = _read_text(args.file)
    if not text.strip():
        print("[error] text required")
        raise SystemExit(1)
    print(f"[info] summarizing {len(text)} characters ({args.length})")
    data = _post(args, "/summarize-text", {"text": text, "length": args.length})
    print(data["summary"])


if __name__ == "__main__":
    main()
