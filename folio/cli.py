from __future__ import annotations

import argparse
import subprocess
import sys


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="folio (no subcommand serves the portfolio page)")
    subparsers = parser.add_subparsers(dest="command", required=False)

    web_parser = subparsers.add_parser("web", help="Serve the portfolio page")
    web_parser.add_argument("--host", default=None)
    web_parser.add_argument("--port", type=int, default=None)
    web_parser.add_argument("--no-open", action="store_true")

    test_parser = subparsers.add_parser("test", help="Run all tests with pytest")
    test_parser.add_argument(
        "pytest_args",
        nargs=argparse.REMAINDER,
        help="Optional extra pytest args; use `--` before args (e.g. folio test -- -k theme)",
    )

    return parser


def run_tests(args: argparse.Namespace) -> int:
    cmd = [sys.executable, "-m", "pytest"]
    if args.pytest_args:
        cmd.extend(arg for arg in args.pytest_args if arg != "--")
    print("Running:", " ".join(cmd))
    return subprocess.call(cmd)


def run_web(args: argparse.Namespace) -> None:
    from folio.core.config import get_settings
    from folio.web_server import run_web_server

    settings = get_settings()
    host = getattr(args, "host", None) or settings.web_host
    port = getattr(args, "port", None) or settings.web_port
    run_web_server(host=host, port=port, no_open=bool(getattr(args, "no_open", False)))


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    if args.command in {None, "web"}:
        run_web(args)
        return

    if args.command == "test":
        raise SystemExit(run_tests(args))

    parser.print_help()


if __name__ == "__main__":
    main()
