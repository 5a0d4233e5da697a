from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Iterable, List, Optional, TextIO

from dotenv import load_dotenv

from .config import DEFAULT_CONFIG_PATH, load_app_config, resolve_flags
from .flags import NormalizationFlags
from .pipeline import must_normalize_url_string, normalize_url_string
from .urls import URLParseError

logger = logging.getLogger("urlcanon")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="urlcanon", description="Normalize URLs into a canonical form")
    parser.add_argument("urls", nargs="*", help="URLs to normalize (read from stdin when omitted)")
    parser.add_argument("--flags", help="Comma-separated flag names, e.g. usually_safe,remove_www")
    parser.add_argument("--config", help=f"YAML config path (default {DEFAULT_CONFIG_PATH})")
    parser.add_argument("--strict", action="store_true", help="Abort on the first malformed URL")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every applied transform")
    return parser


def read_urls(stream: TextIO) -> List[str]:
    return [line.strip() for line in stream if line.strip()]


def select_flags(flag_names: Optional[str], config_path: Optional[str]) -> NormalizationFlags:
    if flag_names:
        return NormalizationFlags.from_names(flag_names.split(","))
    path = config_path or os.getenv("URLCANON_CONFIG") or None
    return resolve_flags(load_app_config(path))


def normalize_all(urls: Iterable[str], flags: NormalizationFlags, *, strict: bool, out: TextIO) -> int:
    failures = 0
    for url in urls:
        if strict:
            print(must_normalize_url_string(url, flags), file=out)
            continue
        try:
            print(normalize_url_string(url, flags), file=out)
        except URLParseError as exc:
            failures += 1
            logger.warning("Skipping malformed URL: %s", exc)
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        flags = select_flags(args.flags, args.config)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    urls = args.urls or read_urls(sys.stdin)
    if not urls:
        print("No URLs given.", file=sys.stderr)
        return 0

    failures = normalize_all(urls, flags, strict=args.strict, out=sys.stdout)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
