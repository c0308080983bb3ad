"""Lightweight REST client for the EVPlus API."""

from __future__ import annotations

import argparse
import json
import re
from pathlib import Path

import httpx


def _attachment_name(response: httpx.Response, fallback: str) -> str:
    disposition = response.headers.get("content-disposition", "")
    match = re.search(r"filename=([^;]+)", disposition)
    return match.group(1).strip() if match else fallback


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the EVPlus REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:3000")
    parser.add_argument("--league", default="nba", help="League key to request")
    parser.add_argument("--pdf", action="store_true", help="Download the PDF export instead of JSON")
    parser.add_argument("--output-dir", type=Path, default=Path("."), help="Directory for the downloaded PDF")
    parser.add_argument("--timeout", type=float, default=30.0, help="Client timeout in seconds")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url, timeout=args.timeout) as client:
        if args.pdf:
            resp = client.get("/api/generate-pdf", params={"league": args.league})
        else:
            resp = client.get("/api/props", params={"league": args.league})

        if resp.status_code == 500:
            raise SystemExit(f"server error: {resp.json().get('error', resp.text)}")
        resp.raise_for_status()

        if not args.pdf:
            props = resp.json()
            print(f"Received {len(props)} props")
            print(json.dumps(props[:5], indent=2))
            return

        target = args.output_dir / _attachment_name(resp, f"prizepicks_{args.league}.pdf")
        target.write_bytes(resp.content)
        print(f"PDF saved to {target}")


if __name__ == "__main__":
    main()
