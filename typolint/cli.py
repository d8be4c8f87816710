"""Command-line interface for typolint."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from fnmatch import fnmatch
from pathlib import Path
from typing import TextIO

from tqdm import tqdm

from typolint.config import ConfigError, load_config, options_from_config
from typolint.diagnostics import StreamSink
from typolint.lint import SpellcheckOptions, check_file
from typolint.spelling import PySpellCheckerOracle

logger = logging.getLogger(__name__)

EXIT_CLEAN = 0
EXIT_FINDINGS = 1
EXIT_USAGE = 2


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    paths: tuple[Path, ...]
    options: SpellcheckOptions
    progress: bool
    log_level: int


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="typolint",
        description="Find misspelled words in Python comments, strings and identifiers",
    )
    p.add_argument("paths", nargs="*", help="Files or directories to check (default: .)")
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: typolint.toml or [tool.typolint] in ./pyproject.toml)",
    )
    p.add_argument("--language", help="Dictionary language (default: en)")
    p.add_argument(
        "--known-word",
        action="append",
        default=[],
        metavar="WORD",
        help="Extra word to accept (repeatable)",
    )
    p.add_argument("--min-word-length", type=int, metavar="N", help="Ignore words shorter than N")
    p.add_argument("--marker", help="Suppression marker (default: spellcheck:disable:this)")
    p.add_argument(
        "--include",
        action="append",
        default=[],
        metavar="GLOB",
        help="File name glob used when walking directories (repeatable, default: *.py)",
    )
    p.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="GLOB",
        help="Path glob to skip (repeatable)",
    )
    p.add_argument("--no-comments", action="store_true", help="Do not check comments")
    p.add_argument("--no-tokens", action="store_true", help="Do not check strings and identifiers")
    p.add_argument("--progress", action="store_true", help="Show a progress bar on stderr")
    verbosity = p.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="count", default=0, help="More logging (repeatable)")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    return p


def resolve_options(args: argparse.Namespace, search_dir: Path | None = None) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, search_dir if search_dir is not None else Path("."))
    options = options_from_config(config)

    changes: dict[str, object] = {}
    if args.language is not None:
        changes["language"] = args.language
    if args.known_word:
        changes["known_words"] = (*options.known_words, *args.known_word)
    if args.min_word_length is not None:
        changes["min_word_length"] = args.min_word_length
    if args.marker is not None:
        changes["suppression_marker"] = args.marker
    if args.include:
        changes["include"] = tuple(args.include)
    if args.exclude:
        changes["exclude"] = (*options.exclude, *args.exclude)
    if args.no_comments:
        changes["check_comments"] = False
    if args.no_tokens:
        changes["check_tokens"] = False

    if args.quiet:
        log_level = logging.ERROR
    elif args.verbose >= 2:
        log_level = logging.DEBUG
    elif args.verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.WARNING

    return CliOptions(
        paths=tuple(Path(raw) for raw in args.paths) or (Path("."),),
        options=dataclasses.replace(options, **changes),
        progress=args.progress,
        log_level=log_level,
    )


def collect_files(paths: Iterable[Path], options: SpellcheckOptions) -> list[Path]:
    """Expand directories into matching files; explicit files are always kept.

    Hidden directories (`.git`, `.venv`, ...) are skipped while walking.
    """
    files: list[Path] = []
    for path in paths:
        if path.is_file():
            files.append(path)
            continue
        if not path.is_dir():
            raise FileNotFoundError(f"no such file or directory: {path}")
        for candidate in sorted(path.rglob("*")):
            relative = candidate.relative_to(path)
            if any(part.startswith(".") for part in relative.parts[:-1]):
                continue
            if not candidate.is_file():
                continue
            if not any(fnmatch(candidate.name, pattern) for pattern in options.include):
                continue
            if _is_excluded(relative, options.exclude):
                continue
            files.append(candidate)
    return files


def _is_excluded(relative: Path, patterns: Sequence[str]) -> bool:
    posix = relative.as_posix()
    return any(fnmatch(posix, pattern) or fnmatch(relative.name, pattern) for pattern in patterns)


def main(argv: list[str] | None = None, stdout: TextIO | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    out = stdout if stdout is not None else sys.stdout
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cli = resolve_options(args)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    logging.basicConfig(
        level=cli.log_level,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        files = collect_files(cli.paths, cli.options)
    except FileNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    try:
        oracle = PySpellCheckerOracle(
            cli.options.language,
            known_words=cli.options.known_words,
            min_word_length=cli.options.min_word_length,
        )
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    sink = StreamSink(out)
    iterator = tqdm(files, desc="typolint", unit="file") if cli.progress else files
    for path in iterator:
        logger.debug("checking %s", path)
        check_file(path, oracle=oracle, options=cli.options, sink=sink)

    logger.info("checked %d file(s), %d diagnostic(s)", len(files), sink.count)
    return EXIT_FINDINGS if sink.count else EXIT_CLEAN
