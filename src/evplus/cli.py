"""Command-line interface for serving the API or pulling props once."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import Sequence

import uvicorn

from evplus.api import create_app, pdf_filename
from evplus.config import iter_leagues, load_settings
from evplus.errors import PropsError
from evplus.export import render_props_pdf
from evplus.ingest import fetch_props


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="EVPlus PrizePicks props backend")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=None, help="Bind address (default: EVPLUS_HOST or 0.0.0.0)")
    serve.add_argument("--port", type=int, default=None, help="Listen port (default: PORT or 3000)")
    serve.add_argument("--log-level", default="info", help="uvicorn log level")

    leagues = ", ".join(league.key for league in iter_leagues())
    props = subparsers.add_parser("props", help="Fetch props for one league and print them")
    props.add_argument("--league", default="nba", help=f"League key ({leagues})")
    props.add_argument(
        "--pdf",
        type=Path,
        nargs="?",
        const=Path("."),
        default=None,
        help="Write a PDF instead of JSON; a directory gets the dated default filename",
    )
    return parser.parse_args(argv)


def _serve(args: argparse.Namespace) -> None:
    settings = load_settings()
    host = args.host or settings.host
    port = args.port or settings.port
    uvicorn.run(create_app(settings), host=host, port=port, log_level=args.log_level)


def _props(args: argparse.Namespace) -> int:
    settings = load_settings()
    try:
        records = asyncio.run(fetch_props(args.league, settings=settings.upstream))
        if args.pdf is None:
            print(json.dumps([record.model_dump() for record in records], indent=2))
            return 0
        content = render_props_pdf(args.league, records)
    except PropsError as exc:
        print(f"error: {exc}")
        return 1

    target = args.pdf
    if target.is_dir():
        target = target / pdf_filename(args.league)
    target.write_bytes(content)
    print(f"Wrote {len(records)} props to {target}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args = _parse_args(argv)
    if args.command == "serve":
        _serve(args)
        return 0
    return _props(args)


if __name__ == "__main__":
    raise SystemExit(main())
