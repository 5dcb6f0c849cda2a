"""
Token Repository - applies content entries to the 13-file token set.

Orchestrates the builder, the merge engine and the store:
duplicate gate -> build all trees -> read all -> merge -> write all.
Nothing is written for an entry until every earlier step has succeeded.
"""

from __future__ import annotations

import asyncio
import logging
import re
from pathlib import Path
from typing import Any

from chuk_mcp_copy.constants import (
    ALL_TOKEN_FILES,
    LANGUAGE_FILE,
    SuccessMessages,
)
from chuk_mcp_copy.core.paths import count_tokens, flatten_tokens, get_nested, iter_tokens, split_path
from chuk_mcp_copy.errors import DuplicateEntryError
from chuk_mcp_copy.models.content import ContentMatrix
from chuk_mcp_copy.models.token import (
    ApplyResult,
    FileModification,
    PreviewFile,
    PreviewResult,
    TokenInfo,
)
from chuk_mcp_copy.store.token_store import TokenStore
from chuk_mcp_copy.tokens.builder import TokenMatrixBuilder
from chuk_mcp_copy.tokens.merge import deep_merge, entry_exists
from chuk_mcp_copy.tokens.validator import ValidationResult, layer_of, validate_token_set

logger = logging.getLogger(__name__)

_LANGUAGE_KEY = re.compile(r"^lang--(\w+)--(\w+)--(.+)$")


class TokenRepository:
    """
    Manages content entries across the token file set.

    Apply operations are serialized within the process. Concurrent
    writers from other processes are not coordinated.
    """

    def __init__(
        self,
        tokens_dir: Path,
        store: TokenStore | None = None,
        builder: TokenMatrixBuilder | None = None,
    ):
        """
        Initialize the repository.

        Args:
            tokens_dir: Directory holding the 13 token files
            store: Optional store (default: TokenStore over tokens_dir)
            builder: Optional builder (default: random reference keys)
        """
        self.tokens_dir = tokens_dir
        self.store = store or TokenStore(tokens_dir)
        self.builder = builder or TokenMatrixBuilder()
        self._lock = asyncio.Lock()

    async def entry_exists(self, domain: str, name: str) -> bool:
        """Check the Language document for `domain.name`."""
        language = await self.store.read(LANGUAGE_FILE)
        return entry_exists(language, domain, name)

    def build_entry(
        self, domain: str, name: str, content: ContentMatrix
    ) -> dict[str, dict[str, Any]]:
        """Build the trees for all 13 files, keyed by file name."""
        return self.builder.build_all(domain, name, content)

    def preview(self, domain: str, name: str, content: ContentMatrix) -> PreviewResult:
        """
        Show what an apply would write, without touching any file.

        Args:
            domain: Dot-separated domain
            name: Entry name
            content: The generated copy

        Returns:
            PreviewResult with flattened tokens per file
        """
        files = []
        for file, tree in self.build_entry(domain, name, content).items():
            tokens = flatten_tokens(tree)
            files.append(
                PreviewFile(
                    file=file,
                    layer=layer_of(file),
                    token_count=len(tokens),
                    tokens=tokens,
                )
            )

        return PreviewResult(files=files, total_tokens=sum(f.token_count for f in files))

    async def apply(
        self,
        domain: str,
        name: str,
        content: ContentMatrix,
        dry_run: bool = False,
    ) -> ApplyResult:
        """
        Apply one content entry to all 13 token files.

        Args:
            domain: Dot-separated domain
            name: Entry name
            content: The generated copy
            dry_run: Check and count only, write nothing

        Returns:
            ApplyResult with per-file token counts

        Raises:
            DuplicateEntryError: If `domain.name` already exists
            MalformedDocumentError: If any token file cannot be parsed
        """
        async with self._lock:
            if await self.entry_exists(domain, name):
                raise DuplicateEntryError(domain, name)

            trees = self.build_entry(domain, name, content)
            modifications = [
                FileModification(file=file, tokens_added=count_tokens(tree))
                for file, tree in trees.items()
            ]
            result = ApplyResult(
                files_modified=modifications,
                total_tokens=sum(m.tokens_added for m in modifications),
                dry_run=dry_run,
            )

            if dry_run:
                logger.info(
                    f"{domain}.{name}: "
                    + SuccessMessages.ENTRY_DRY_RUN.format(
                        tokens=result.total_tokens, files=len(modifications)
                    )
                )
                return result

            # Read everything first so a malformed file aborts before any write
            documents = await self.store.read_all(list(trees))
            merged = {file: deep_merge(documents[file], tree) for file, tree in trees.items()}

            for file, document in merged.items():
                path = await self.store.write(file, document)
                logger.debug(f"Wrote {path}")

            logger.info(
                f"{domain}.{name}: "
                + SuccessMessages.ENTRY_APPLIED.format(
                    tokens=result.total_tokens, files=len(modifications)
                )
            )
            return result

    async def list_entries(
        self,
        domain: str | None = None,
        tone: str | None = None,
        type_abbr: str | None = None,
    ) -> dict[str, list[TokenInfo]]:
        """
        List Language-layer tokens grouped by `domain.name`.

        Args:
            domain: Optional domain to search under
            tone: Optional tone abbreviation filter
            type_abbr: Optional type abbreviation filter

        Returns:
            Mapping of entry path to its tokens
        """
        language = await self.store.read(LANGUAGE_FILE)

        root: Any = language
        if domain:
            root = get_nested(language, split_path(domain))
            if root is None:
                return {}

        entries: dict[str, list[TokenInfo]] = {}
        for path, token in iter_tokens(root, domain or ""):
            key = path.rsplit(".", 1)[-1]
            match = _LANGUAGE_KEY.match(key)
            if not match:
                continue

            token_tone, token_type, _ = match.groups()
            if tone and token_tone != tone:
                continue
            if type_abbr and token_type != type_abbr:
                continue

            # Drop the tone group and token key to get domain.name
            group = ".".join(path.split(".")[:-2])
            entries.setdefault(group, []).append(
                TokenInfo(
                    path=path,
                    value=str(token.get("$value")),
                    tone=token_tone,
                    type=token_type,
                )
            )

        return entries

    async def validate(self) -> ValidationResult:
        """Check reference integrity across all 13 files."""
        documents = await self.store.read_all(ALL_TOKEN_FILES)
        return validate_token_set(documents)
