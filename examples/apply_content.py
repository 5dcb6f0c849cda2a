#!/usr/bin/env python3
"""
Example: Applying a hand-written content matrix.

Loads examples/dashboard.content.yaml, previews the 13 token files,
applies it into a temporary token directory, then shows that a second
apply is rejected and that every Tone token resolves to its text.

Usage:
    python examples/apply_content.py
"""

import asyncio
import tempfile
from pathlib import Path

from chuk_mcp_copy.constants import ALL_TOKEN_FILES, LANGUAGE_FILE, TONES, TYPES
from chuk_mcp_copy.errors import DuplicateEntryError
from chuk_mcp_copy.models import load_content_file
from chuk_mcp_copy.store import TokenRepository
from chuk_mcp_copy.tokens import resolve_reference


async def main() -> None:
    """Demonstrate the apply flow."""
    print("CHUK Copy Token Demo")
    print("=" * 40)
    print()

    content = load_content_file(Path(__file__).parent / "dashboard.content.yaml")

    with tempfile.TemporaryDirectory() as tmp:
        repository = TokenRepository(Path(tmp))

        preview = repository.preview("nav", "dashboard", content)
        print(f"Preview: {preview.total_tokens} tokens across {len(preview.files)} files")
        for file in preview.files:
            print(f"  {file.file:<32} {file.layer.value:<9} {file.token_count}")
        print()

        result = await repository.apply("nav", "dashboard", content)
        print(f"Applied: {result.total_tokens} tokens")

        try:
            await repository.apply("nav", "dashboard", content)
        except DuplicateEntryError as e:
            print(f"Second apply rejected: {e}")
        print()

        documents = await repository.store.read_all(ALL_TOKEN_FILES)
        title = TYPES[0]
        print(f"Tone selector resolved through {title.file}:")
        for tone in TONES:
            value = resolve_reference(
                documents,
                "nav.dashboard.tone--dashboard",
                [tone.file, title.file, LANGUAGE_FILE],
            )
            print(f"  {tone.full:<8} -> {value}")

        validation = await repository.validate()
        print()
        print(validation)


if __name__ == "__main__":
    asyncio.run(main())
