#!/usr/bin/env python3
"""
Command-line front end for adding content entries.

Usage:
    chuk-mcp-copy-cli add --domain nav "Dashboard, Settings, Profile"
    chuk-mcp-copy-cli add nav.dashboard nav.settings --auto-approve
    chuk-mcp-copy-cli add --input words.txt --auto-approve
    chuk-mcp-copy-cli add --domain legal "Privacy Policy" --dry-run
    chuk-mcp-copy-cli apply --domain nav --name dashboard --content dashboard.yaml
"""

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from chuk_mcp_copy.batch import BatchRunner, ResolvedEntry, parse_names, resolve_entry
from chuk_mcp_copy.constants import TONES, TYPES, SuccessMessages
from chuk_mcp_copy.errors import CopyTokensError
from chuk_mcp_copy.generation import ContentGenerator
from chuk_mcp_copy.models.content import ContentMatrix, load_content_file
from chuk_mcp_copy.models.token import PreviewResult
from chuk_mcp_copy.store import TokenRepository

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

COLUMN_WIDTH = 20


def format_content_table(content: ContentMatrix) -> str:
    """Render the matrix as a fixed-width table, one row per type."""
    header = f"  {'Type'.ljust(14)} " + " ".join(t.full.capitalize().ljust(COLUMN_WIDTH) for t in TONES)
    lines = [header.rstrip(), "  " + "─" * (15 + (COLUMN_WIDTH + 1) * len(TONES))]

    for type_def in TYPES:
        cells = []
        for tone in TONES:
            value = content.get(tone.full, type_def.full)
            if len(value) > COLUMN_WIDTH - 2:
                value = value[: COLUMN_WIDTH - 3] + "…"
            cells.append(value.ljust(COLUMN_WIDTH))
        lines.append(f"  {type_def.full.ljust(14)} " + " ".join(cells))

    return "\n".join(lines)


async def prompt_approval(
    entry: ResolvedEntry, content: ContentMatrix, preview: PreviewResult
) -> bool:
    """Print the matrix and ask on stdin."""
    print(f"\n── {entry.path} ──")
    print(format_content_table(content))
    print(f"\n  Will write {preview.total_tokens} tokens across {len(preview.files)} files.")
    answer = await asyncio.to_thread(input, "  Apply these tokens? (y/N) ")
    return answer.strip().lower() == "y"


def _tokens_dir(args: argparse.Namespace) -> Path:
    if args.tokens_dir:
        return Path(args.tokens_dir)
    return Path(os.getenv("COPY_TOKENS_DIR", Path.cwd() / "tokens"))


async def run_add(args: argparse.Namespace) -> int:
    raw_names = parse_names(args.names, Path(args.input) if args.input else None)
    if not raw_names:
        logger.error("No content entries specified.")
        return 1

    try:
        entries = [resolve_entry(raw, args.domain) for raw in raw_names]
    except CopyTokensError as e:
        logger.error(str(e))
        return 1

    repository = TokenRepository(_tokens_dir(args))
    runner = BatchRunner(
        ContentGenerator(),
        repository,
        approve=None if args.auto_approve else prompt_approval,
    )

    summary = await runner.run(entries, dry_run=args.dry_run)

    for outcome in summary.outcomes:
        if outcome.result is not None:
            template = SuccessMessages.ENTRY_DRY_RUN if args.dry_run else SuccessMessages.ENTRY_APPLIED
            message = template.format(
                tokens=outcome.result.total_tokens, files=len(outcome.result.files_modified)
            )
            print(f"  {outcome.entry.path}: {message}")
        elif outcome.error:
            print(f"  {outcome.entry.path}: Error: {outcome.error}")
        else:
            print(f"  {outcome.entry.path}: Skipped.")

    print("── Summary ──")
    print(f"  {summary}")
    return 0 if summary.failed == 0 else 1


async def run_apply(args: argparse.Namespace) -> int:
    try:
        content = load_content_file(Path(args.content))
        repository = TokenRepository(_tokens_dir(args))
        result = await repository.apply(args.domain, args.name, content, dry_run=args.dry_run)
    except (CopyTokensError, ValidationError, json.JSONDecodeError, yaml.YAMLError, OSError) as e:
        logger.error(str(e))
        return 1

    print(json.dumps(result.to_wire(), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate and apply multi-tone copy to design token files"
    )
    parser.add_argument("--tokens-dir", help="Directory holding the 13 token files")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    add = subparsers.add_parser("add", help="Generate content and apply tokens to all 13 files")
    add.add_argument("names", nargs="*", help="Names, comma-separated or dot notation")
    add.add_argument("--domain", help='Content domain (e.g., "nav", "legal")')
    add.add_argument("--input", help="Read names from a file (one per line)")
    add.add_argument("--auto-approve", action="store_true", help="Skip approval prompts")
    add.add_argument("--dry-run", action="store_true", help="Preview without writing files")

    apply = subparsers.add_parser("apply", help="Apply a hand-written content file")
    apply.add_argument("--domain", required=True, help="Content domain")
    apply.add_argument("--name", required=True, help="Entry name")
    apply.add_argument("--content", required=True, help="YAML or JSON content matrix")
    apply.add_argument("--dry-run", action="store_true", help="Check and count only")

    return parser


def main() -> None:
    """Main entry point."""
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.command == "add":
        sys.exit(asyncio.run(run_add(args)))
    sys.exit(asyncio.run(run_apply(args)))


if __name__ == "__main__":
    main()
