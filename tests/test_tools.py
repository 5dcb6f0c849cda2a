"""
Tests for MCP tools.

Tests the MCP tool implementations for content generation, previews,
and the token file set.
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_copy.generation import ContentGenerator
from chuk_mcp_copy.store import TokenRepository


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


class FakeMessages:
    def __init__(self, text: str):
        self.text = text

    async def create(self, **kwargs):
        block = type("Block", (), {"type": "text", "text": self.text})()
        return type("Response", (), {"content": [block]})()


class FakeClient:
    def __init__(self, text: str):
        self.messages = FakeMessages(text)


@pytest.fixture
def token_tools(repository: TokenRepository):
    from chuk_mcp_copy.tools.tokens import register_token_tools

    return register_token_tools(MockMCPServer("test"), repository)


class TestContentTools:
    """Tests for content tools."""

    @pytest.mark.asyncio
    async def test_generate_content(self, repository: TokenRepository, content_dict: dict) -> None:
        """Generate content tool."""
        from chuk_mcp_copy.tools.content import register_content_tools

        generator = ContentGenerator(client=FakeClient(json.dumps(content_dict)))
        tools = register_content_tools(MockMCPServer("test"), generator, repository)

        result = await tools["copy_generate_content"](
            domain="nav", name="dashboard", neutral_title="Dashboard"
        )
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["content"] == content_dict

    @pytest.mark.asyncio
    async def test_generate_content_failure(self, repository: TokenRepository) -> None:
        """Generation failures are returned as errors."""
        from chuk_mcp_copy.tools.content import register_content_tools

        generator = ContentGenerator(client=FakeClient("not json"))
        tools = register_content_tools(MockMCPServer("test"), generator, repository)

        result = await tools["copy_generate_content"](
            domain="nav", name="dashboard", neutral_title="Dashboard"
        )
        data = json.loads(result)
        assert data["status"] == "error"
        assert "2 attempts" in data["message"]

    @pytest.mark.asyncio
    async def test_preview_tokens(self, repository: TokenRepository, content_dict: dict) -> None:
        """Preview tool."""
        from chuk_mcp_copy.tools.content import register_content_tools

        generator = ContentGenerator(client=FakeClient(""))
        tools = register_content_tools(MockMCPServer("test"), generator, repository)

        result = await tools["copy_preview_tokens"](
            domain="nav", name="dashboard", content=content_dict
        )
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["totalTokens"] == 78
        assert len(data["files"]) == 13
        assert data["files"][0]["tokenCount"] == 36

    @pytest.mark.asyncio
    async def test_preview_invalid_content(self, repository: TokenRepository) -> None:
        from chuk_mcp_copy.tools.content import register_content_tools

        generator = ContentGenerator(client=FakeClient(""))
        tools = register_content_tools(MockMCPServer("test"), generator, repository)

        result = await tools["copy_preview_tokens"](
            domain="nav", name="dashboard", content={"neutral": {}}
        )
        assert json.loads(result)["status"] == "error"


class TestTokenTools:
    """Tests for token tools."""

    @pytest.mark.asyncio
    async def test_apply_tokens(self, token_tools, content_dict: dict, temp_dir: Path) -> None:
        """Apply tool writes all 13 files."""
        result = await token_tools["copy_apply_tokens"](
            domain="nav", name="dashboard", content=content_dict
        )
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["totalTokens"] == 78
        assert len(data["filesModified"]) == 13
        assert len(list(temp_dir.glob("*.tokens.json"))) == 13

    @pytest.mark.asyncio
    async def test_apply_duplicate(self, token_tools, content_dict: dict) -> None:
        """Second apply of the same entry is rejected."""
        await token_tools["copy_apply_tokens"](domain="nav", name="dashboard", content=content_dict)
        result = await token_tools["copy_apply_tokens"](
            domain="nav", name="dashboard", content=content_dict
        )
        data = json.loads(result)
        assert data["status"] == "error"
        assert "nav.dashboard" in data["message"]

    @pytest.mark.asyncio
    async def test_apply_dry_run(self, token_tools, content_dict: dict, temp_dir: Path) -> None:
        result = await token_tools["copy_apply_tokens"](
            domain="nav", name="dashboard", content=content_dict, dry_run=True
        )
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["dryRun"] is True
        assert data["totalTokens"] == 78
        assert list(temp_dir.iterdir()) == []

    @pytest.mark.asyncio
    async def test_check_entry(self, token_tools, content_dict: dict) -> None:
        before = json.loads(await token_tools["copy_check_entry"](domain="nav", name="dashboard"))
        assert before["exists"] is False

        await token_tools["copy_apply_tokens"](domain="nav", name="dashboard", content=content_dict)

        after = json.loads(await token_tools["copy_check_entry"](domain="nav", name="dashboard"))
        assert after["exists"] is True

    @pytest.mark.asyncio
    async def test_list_tokens(self, token_tools, content_dict: dict) -> None:
        await token_tools["copy_apply_tokens"](domain="nav", name="dashboard", content=content_dict)

        result = await token_tools["copy_list_tokens"](tone="neut", type="title")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["entries"]["nav.dashboard"] == [
            {
                "path": "nav.dashboard.neutral.lang--neut--title--dashboard",
                "value": "Dashboard neutral title",
                "tone": "neut",
                "type": "title",
            }
        ]

    @pytest.mark.asyncio
    async def test_validate_tokens(self, token_tools, content_dict: dict) -> None:
        await token_tools["copy_apply_tokens"](domain="nav", name="dashboard", content=content_dict)

        data = json.loads(await token_tools["copy_validate_tokens"]())
        assert data["status"] == "success"
        assert data["valid"] is True
        assert data["errors"] == []

    @pytest.mark.asyncio
    async def test_malformed_file_reported(self, token_tools, temp_dir: Path) -> None:
        (temp_dir / "Language.English.tokens.json").write_text("{", encoding="utf-8")

        data = json.loads(await token_tools["copy_check_entry"](domain="nav", name="dashboard"))
        assert data["status"] == "error"
        assert "Malformed" in data["message"]
