"""CLI entrypoints for docmanifest commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .catalog import MANIFEST
from .config import ConfigError, DocManifestConfig, load_config
from .integrity import IntegrityChecker
from .loader import load_manifest
from .logging import configure_logging, get_logger
from .manifest import CategoryManifest, ConfigurationError
from .navigation import NavigationBuilder

_LOGGER = get_logger("cli")


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


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docmanifest",
        description="Inspect and verify the documentation category manifest.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .docmanifest.yml or the directory holding it (defaults to current directory).",
    )
    parser.add_argument(
        "--manifest",
        default=None,
        help="Load categories from a YAML or JSON document instead of the built-in catalog.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List categories in navigation order.")
    _add_verbose_option(list_parser, suppress_default=True)

    show_parser = subparsers.add_parser("show", help="Show the files of one category.")
    _add_verbose_option(show_parser, suppress_default=True)
    show_parser.add_argument("name", help="Exact category display name.")

    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Print the path of a file within a category.",
    )
    _add_verbose_option(resolve_parser, suppress_default=True)
    resolve_parser.add_argument("name", help="Exact category display name.")
    resolve_parser.add_argument("file", help="Markdown filename listed by the category.")

    verify_parser = subparsers.add_parser(
        "verify",
        help="Check that every manifest entry exists under the content root.",
    )
    _add_verbose_option(verify_parser, suppress_default=True)
    verify_parser.add_argument(
        "--content-root",
        default=None,
        help="Directory holding category folders (overrides content_root in config).",
    )

    nav_parser = subparsers.add_parser("nav", help="Render the navigation sidebar.")
    _add_verbose_option(nav_parser, suppress_default=True)
    nav_parser.add_argument(
        "--format",
        choices=("markdown", "json"),
        default="markdown",
        help="Output format for the sidebar.",
    )

    serve_parser = subparsers.add_parser("serve", help="Run the read-only HTTP service.")
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default=None, help="Bind address.")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docmanifest commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)

    try:
        config = load_config(Path(args.config))
        manifest = _select_manifest(args, config)
    except (ConfigError, ConfigurationError) as exc:
        parser.exit(1, f"docmanifest: {exc}\n")

    if args.command == "list":
        for name, category in manifest.list():
            print(f"{name}\t{category.path}\t{len(category.files)}")
    elif args.command == "show":
        category = manifest.get(args.name)
        if category is None:
            parser.exit(1, f"Category not found: {args.name}\n")
        print(f"{category.display_name} ({category.path})")
        for filename in category.files:
            print(f"  {filename}")
    elif args.command == "resolve":
        resolved = manifest.resolve_path(args.name, args.file)
        if resolved is None:
            parser.exit(1, f"File not found: {args.name} / {args.file}\n")
        print(resolved)
    elif args.command == "verify":
        content_root = _content_root(args, config)
        issues = IntegrityChecker(content_root).check(manifest)
        if issues:
            for issue in issues:
                print(f"{issue.path}: {issue.detail}")
            parser.exit(1, f"{len(issues)} manifest entries missing under {content_root}\n")
        print(f"All {len(manifest.resolve_all())} files present under {content_root}")
    elif args.command == "nav":
        builder = NavigationBuilder(
            config.navigation.templates_dir,
            title=config.navigation.title,
            link_prefix=config.navigation.link_prefix,
        )
        if args.format == "json":
            print(json.dumps(builder.build_tree(manifest), indent=2))
        else:
            sys.stdout.write(builder.render(manifest))
    elif args.command == "serve":  # pragma: no cover - integration path
        from .service import run_service

        builder = NavigationBuilder(
            config.navigation.templates_dir,
            title=config.navigation.title,
            link_prefix=config.navigation.link_prefix,
        )
        run_service(
            host=args.host or config.service.host,
            port=args.port or config.service.port,
            manifest=manifest,
            navigation=builder,
        )
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _select_manifest(args: argparse.Namespace, config: DocManifestConfig) -> CategoryManifest:
    if args.manifest:
        return load_manifest(Path(args.manifest))
    if config.manifest is not None:
        _LOGGER.debug("Using manifest from config: %s", config.manifest)
        return load_manifest(config.manifest)
    return MANIFEST


def _content_root(args: argparse.Namespace, config: DocManifestConfig) -> Path:
    if args.content_root:
        return Path(args.content_root)
    if config.content_root is not None:
        return config.content_root
    return Path.cwd()


if __name__ == "__main__":
    main(sys.argv[1:])
