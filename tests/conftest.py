"""
Pytest configuration and shared fixtures.
"""

import itertools
import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest

from chuk_mcp_copy.models import ContentMatrix
from chuk_mcp_copy.store import TokenRepository
from chuk_mcp_copy.tokens import TokenMatrixBuilder

TONE_NAMES = ["neutral", "formal", "playful", "minimal", "witty", "quirky"]
TYPE_NAMES = ["title", "subtitle", "description", "caption", "abbreviation", "emoji"]


def make_content_dict(label: str = "Dashboard") -> dict[str, dict[str, str]]:
    """A full 6 x 6 matrix where every cell is unique and traceable."""
    return {
        tone: {type_name: f"{label} {tone} {type_name}" for type_name in TYPE_NAMES}
        for tone in TONE_NAMES
    }


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for token files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def content_dict() -> dict[str, dict[str, str]]:
    return make_content_dict()


@pytest.fixture
def content(content_dict: dict[str, dict[str, str]]) -> ContentMatrix:
    """A valid content matrix."""
    return ContentMatrix.model_validate(content_dict)


@pytest.fixture
def key_factory() -> Callable[[], str]:
    """Deterministic reference keys: ref-0000, ref-0001, ..."""
    counter = itertools.count()
    return lambda: f"ref-{next(counter):04d}"


@pytest.fixture
def builder(key_factory: Callable[[], str]) -> TokenMatrixBuilder:
    return TokenMatrixBuilder(reference_key_factory=key_factory)


@pytest.fixture
def repository(temp_dir: Path, builder: TokenMatrixBuilder) -> TokenRepository:
    return TokenRepository(temp_dir, builder=builder)


@pytest.fixture
def content_factory() -> Callable[[str], ContentMatrix]:
    """Build a valid matrix whose cells start with the given label."""
    return lambda label: ContentMatrix.model_validate(make_content_dict(label))
