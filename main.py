"""
main.py: thin CLI entry point.

All command implementations live in thewell/cli/ submodules.

Commands:
  serve-api           Start the FastAPI guidance endpoint (uvicorn)
  ask                 Run one question through the pipeline and print the payload
"""

import argparse

from thewell.config import AppSettings


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="The Well guidance CLI")
    sub = p.add_subparsers(dest="command", required=True)

    p_api = sub.add_parser("serve-api")
    p_api.add_argument("--host", type=str, default=None)
    p_api.add_argument("--port", type=int, default=None)

    p_ask = sub.add_parser("ask")
    p_ask.add_argument("query", type=str)
    p_ask.add_argument("--mode-tag", type=str, default=None, help="e.g. /ask, /study, /pray")
    p_ask.add_argument("--static", action="store_true", help="answer from curated content only")

    return p


def main(argv: list[str] | None = None) -> None:
    settings = AppSettings()

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "serve-api":
        from thewell.cli.serve import cmd_serve_api
        cmd_serve_api(
            host=args.host or settings.server.host,
            port=args.port or settings.server.port,
            graceful_shutdown_seconds=settings.server.timeout_graceful_shutdown,
        )

    elif args.command == "ask":
        from thewell.cli.ask import cmd_ask
        cmd_ask(args.query, mode_tag=args.mode_tag, static=args.static, settings=settings)


if __name__ == "__main__":
    main()
