"""CLI entrypoints for install-bridge commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .badge import generate_badge
from .config import (
    BADGE_FILENAME,
    ConfigError,
    create_template,
    load_config,
    resolve_config_path,
    write_badge,
    write_config,
)
from .detect import detect_os
from .logging import configure_logging, get_logger
from .snippets import DEFAULT_BADGE_PATH, generate_snippets

logger = get_logger("cli")


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_log_file_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "--log-file",
        type=Path,
        default=argparse.SUPPRESS if suppress_default else None,
        help="Also write log output to this file.",
    )


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Project root or path to install-bridge.json (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="install-bridge",
        description="Generate portable install badges for repositories.",
    )
    _add_verbose_option(parser)
    _add_log_file_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser(
        "init",
        help="Write a template install-bridge.json.",
    )
    _add_verbose_option(init_parser, suppress_default=True)
    _add_log_file_option(init_parser, suppress_default=True)
    _add_path_argument(init_parser)
    init_parser.add_argument(
        "--name",
        default="MyApp",
        help="Application name used in the template (defaults to MyApp).",
    )
    init_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing install-bridge.json.",
    )

    validate_parser = subparsers.add_parser(
        "validate",
        help="Check install-bridge.json for errors.",
    )
    _add_verbose_option(validate_parser, suppress_default=True)
    _add_log_file_option(validate_parser, suppress_default=True)
    _add_path_argument(validate_parser)

    badge_parser = subparsers.add_parser(
        "badge",
        help="Render the SVG install badge and print embed snippets.",
    )
    _add_verbose_option(badge_parser, suppress_default=True)
    _add_log_file_option(badge_parser, suppress_default=True)
    _add_path_argument(badge_parser)
    badge_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help=f"Badge file to write (defaults to {BADGE_FILENAME} next to the config).",
    )

    snippets_parser = subparsers.add_parser(
        "snippets",
        help="Print Markdown and HTML embed snippets.",
    )
    _add_verbose_option(snippets_parser, suppress_default=True)
    _add_log_file_option(snippets_parser, suppress_default=True)
    _add_path_argument(snippets_parser)
    snippets_parser.add_argument(
        "--badge-path",
        default=DEFAULT_BADGE_PATH,
        help="Image path or URL referenced by the snippets.",
    )
    snippets_parser.add_argument(
        "--url",
        default=None,
        help="Link target (defaults to the homepage, then the first installer).",
    )

    detect_parser = subparsers.add_parser(
        "detect",
        help="Print the platform detected from a User-Agent string.",
    )
    _add_verbose_option(detect_parser, suppress_default=True)
    _add_log_file_option(detect_parser, suppress_default=True)
    detect_parser.add_argument("user_agent", help="User-Agent header value.")

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP badge and redirect service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    _add_log_file_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default=None, help="Interface to bind (defaults to $HOST or 0.0.0.0).")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to bind (defaults to $PORT or 3000).")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for install-bridge commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger.debug("Running %s", args.command)

    if args.command == "init":
        config = create_template(args.name)
        try:
            config_file = write_config(Path(args.path), config, force=bool(args.force))
        except FileExistsError as exc:
            parser.exit(1, f"{exc}\n")
        print(f"Config created at {_relativize(config_file)}")
    elif args.command == "validate":
        config = _load_or_exit(parser, resolve_config_path(Path(args.path)))
        print(f"Config is valid ({len(config['installers'])} installer(s))")
    elif args.command == "badge":
        config_file = resolve_config_path(Path(args.path))
        config = _load_or_exit(parser, config_file)
        output = Path(args.output) if args.output else config_file.parent / BADGE_FILENAME
        badge_file = write_badge(output, generate_badge(config))
        logger.debug("Wrote %d bytes to %s", badge_file.stat().st_size, badge_file)
        print(f"Badge written to {_relativize(badge_file)}")
        snippets = generate_snippets(config, f"./{badge_file.name}")
        _print_snippets(snippets.markdown, snippets.html)
    elif args.command == "snippets":
        config = _load_or_exit(parser, resolve_config_path(Path(args.path)))
        snippets = generate_snippets(config, args.badge_path, args.url)
        _print_snippets(snippets.markdown, snippets.html)
    elif args.command == "detect":
        print(detect_os(args.user_agent))
    elif args.command == "serve":  # pragma: no cover - integration path
        from .service import ServiceSettings, run_service

        settings = ServiceSettings.from_env()
        if args.host:
            settings.host = args.host
        if args.port:
            settings.port = args.port
        run_service(settings)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _load_or_exit(parser: argparse.ArgumentParser, config_file: Path) -> dict:
    try:
        return load_config(config_file)
    except FileNotFoundError as exc:
        parser.exit(1, f"{exc}\nRun `install-bridge init` to create one.\n")
    except ConfigError as exc:
        details = "".join(f"  - {error}\n" for error in exc.errors)
        parser.exit(1, f"{_relativize(config_file)} is invalid:\n{details}")


def _print_snippets(markdown: str, html: str) -> None:
    print("\nMarkdown:\n")
    print(markdown)
    print("\nHTML:\n")
    print(html)


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
