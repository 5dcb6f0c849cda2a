"""
Token Store - reads and writes the JSON token documents.

Documents are always read in full and rewritten in full. Key order is
preserved as encountered and files end with a trailing newline.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from chuk_mcp_copy.errors import MalformedDocumentError

logger = logging.getLogger(__name__)


class TokenStore:
    """
    File persistence for token documents in one directory.

    All I/O operations are async-ready.
    """

    def __init__(self, tokens_dir: Path):
        """
        Initialize the store.

        Args:
            tokens_dir: Directory holding the token files
        """
        self.tokens_dir = tokens_dir

    def path_for(self, file: str) -> Path:
        return self.tokens_dir / file

    async def read(self, file: str) -> dict[str, Any]:
        """
        Read and parse a token document.

        A file that does not exist yet reads as an empty document.

        Args:
            file: Token file name (e.g., 'Language.English.tokens.json')

        Returns:
            The parsed document

        Raises:
            MalformedDocumentError: If the file is not a UTF-8 encoded JSON object
        """
        path = self.path_for(file)
        if not path.exists():
            logger.debug(f"Token file {file} not found, starting empty")
            return {}

        try:
            data = json.loads(path.read_bytes().decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise MalformedDocumentError(file, str(e)) from e

        if not isinstance(data, dict):
            raise MalformedDocumentError(file, f"expected a JSON object, got {type(data).__name__}")

        return data

    async def write(self, file: str, document: dict[str, Any]) -> Path:
        """
        Serialize a token document, replacing the file.

        The document is written to a hidden sibling file first and then
        moved over the target.

        Args:
            file: Token file name
            document: Document to write

        Returns:
            Path to the written file
        """
        self.tokens_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(file)
        tmp_path = path.with_name(f".{file}.tmp")

        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(json.dumps(document, indent=2, ensure_ascii=False))
            f.write("\n")

        # os.replace is atomic within a directory
        os.replace(tmp_path, path)

        return path

    async def read_all(self, files: list[str]) -> dict[str, dict[str, Any]]:
        """Read several documents, keyed by file name."""
        return {file: await self.read(file) for file in files}
