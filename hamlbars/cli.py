from __future__ import annotations

import argparse
import logging
import os
import sys

from .config import CompilerConfig, load_config
from .jinja import create_environment
from .template import compile_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hamlbars", description="Compile hamlbars templates to JavaScript.")
    parser.add_argument("files", type=str, nargs="+", help="Template source files")
    parser.add_argument("-c", "--config", type=str, default=None, help="Path to YAML config file")
    parser.add_argument("-p", "--profile", choices=["handlebars", "ember"], default=None, help="Client-side runtime")
    parser.add_argument("-t", "--templates-root", type=str, default=None, help="Prefix for registered names")
    parser.add_argument("-r", "--root", type=str, default=None, help="Directory logical paths are relative to")
    parser.add_argument("--closures", action="store_true", help="Wrap each statement in a closure")
    parser.add_argument("-o", "--output", type=str, default="-", help="Output file path or '-' for stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def logical_path(path: str, root: str | None) -> str | None:
    """Path relative to 'root' without its extension, slash-separated."""
    if root is None:
        return None
    relative = os.path.relpath(path, root)
    return os.path.splitext(relative)[0].replace(os.sep, "/")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    cfg: CompilerConfig = load_config(args.config) if args.config else CompilerConfig()
    if args.profile:
        cfg.render_templates_for(args.profile)
    if args.templates_root is not None:
        cfg.templates_root = args.templates_root
    if args.closures:
        cfg.closures = True
    env = create_environment(cfg)

    if args.output == "-":
        dst = sys.stdout
    else:
        dst = open(args.output, "w", encoding="utf-8")

    try:
        for path in args.files:
            dst.write(compile_file(path, logical_path(path, args.root), config=cfg, environment=env))
        return 0
    finally:
        if dst is not sys.stdout:
            dst.close()


if __name__ == "__main__":
    raise SystemExit(main())
