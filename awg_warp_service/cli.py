#!/usr/bin/env python3
# awg_warp_service/cli.py
import argparse
import logging
import sys
from pathlib import Path

from .common.config import Settings
from .common.exceptions import AppError
from .common.utils import configure_logging
from .services.awg_config import DEFAULT_ENDPOINT
from .services.generator import generate_config


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="awg-warp",
        description="Issue AmneziaWG 1.5 configs backed by a fresh Cloudflare WARP registration.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen = subparsers.add_parser("generate", help="Register a device and write its config file.")
    _ = gen.add_argument("--endpoint", help=f"Peer endpoint override (default: {DEFAULT_ENDPOINT}).")
    target = gen.add_mutually_exclusive_group()
    _ = target.add_argument("--output-dir", type=Path, default=Path.cwd(), help="Directory for the .conf file.")
    _ = target.add_argument("--stdout", action="store_true", help="Print the config instead of writing a file.")

    serve = subparsers.add_parser("serve", help="Run the HTTP service.")
    _ = serve.add_argument("--host", help="Bind address (default: HOST or 127.0.0.1).")
    _ = serve.add_argument("--port", type=int, help="Bind port (default: PORT or 8000).")
    return parser


def _run_generate(args: argparse.Namespace) -> None:
    rendered = generate_config(args.endpoint)
    if args.stdout:
        print(rendered.text)
        return

    output_dir: Path = args.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)
    config_path = output_dir / rendered.file_name
    _ = config_path.write_text(rendered.text + "\n", encoding="utf-8")
    logging.info(f"Config written to {config_path}")


def _run_serve(args: argparse.Namespace, settings: Settings) -> None:
    # Imported lazily so `generate` works without the web stack loaded.
    from .server import create_app

    app = create_app(settings)
    app.run(host=args.host or settings.host, port=args.port or settings.port)


def main(argv: list[str] | None = None) -> None:
    """Sets up logging and dispatches the chosen sub-command."""
    args = _build_parser().parse_args(argv)

    try:
        settings = Settings.from_env()
        configure_logging(settings.log_level)
        if args.command == "generate":
            _run_generate(args)
        else:
            _run_serve(args, settings)
    except AppError as e:
        logging.critical(f"awg-warp {args.command} failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
