"""Tests for the MCP tool layer."""

import asyncio
import os

import pytest

from obsidian_notes import config as config_module
from obsidian_notes.__main__ import main
from obsidian_notes.data_models import NotesConfiguration
from obsidian_notes.exceptions import WriteDisabledError
from obsidian_notes.models import ReadNotesInput, SearchNotesInput, UpdateNoteInput, WriteNoteInput
from obsidian_notes.server import mcp
from obsidian_notes.tools import note_tools, search_tools, vault_tools

from conftest import write_file

pytestmark = pytest.mark.skipif(os.sep != "/", reason="POSIX path semantics")


@pytest.fixture
def installed(config, monkeypatch):
    """Install ``config`` as the server configuration for one test."""
    monkeypatch.setattr(config_module, "_CONFIGURATION", config)
    return config


def tool_names(server):
    return {tool.name for tool in asyncio.run(server.list_tools())}


def test_all_tools_are_registered():
    assert {
        "read_notes",
        "search_notes",
        "list_allowed_directories",
        "write_note",
        "update_note",
    } <= tool_names(mcp)


def test_write_tools_report_disabled_writing(vault, monkeypatch):
    read_only = NotesConfiguration.from_paths([vault], enable_write=False)
    monkeypatch.setattr(config_module, "_CONFIGURATION", read_only)

    with pytest.raises(WriteDisabledError, match="--enable-write"):
        asyncio.run(note_tools.write_note(WriteNoteInput(path="new.md", content="x")))
    with pytest.raises(WriteDisabledError):
        asyncio.run(note_tools.update_note(UpdateNoteInput(path="new.md", content="x")))
    assert not (vault / "new.md").exists()


def test_read_notes_payload(vault, installed):
    write_file(vault, "ok.md", "hello")

    payload = asyncio.run(note_tools.read_notes(ReadNotesInput(paths=["ok.md", "../x.md"])))

    assert payload["read"] == 1
    assert payload["failed"] == 1
    assert payload["notes"][0] == {"path": "ok.md", "content": "hello"}
    assert payload["notes"][1]["path"] == "../x.md"
    assert "Access denied" in payload["notes"][1]["error"]


def test_search_notes_payload(vault, installed):
    write_file(vault, "Projects/alpha.md")

    payload = asyncio.run(search_tools.search_notes(SearchNotesInput(query="alpha")))

    assert payload == {
        "query": "alpha",
        "matches": ["Projects/alpha.md"],
        "total": 1,
        "truncated": False,
        "omitted": 0,
    }


def test_write_and_update_round_trip(vault, installed):
    asyncio.run(note_tools.write_note(WriteNoteInput(path="log.md", content="line1")))
    payload = asyncio.run(
        note_tools.update_note(UpdateNoteInput(path="log.md", content="line2", mode="append"))
    )

    assert payload == {"path": "log.md", "status": "appended"}
    assert (vault / "log.md").read_text(encoding="utf-8") == "line1\nline2"


def test_list_allowed_directories(vault, installed):
    payload = asyncio.run(vault_tools.list_allowed_directories())
    assert payload["vaults"] == [str(vault)]
    assert payload["write_enabled"] is True


def test_main_rejects_missing_vault(tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 1
    assert "Vault directory not found" in capsys.readouterr().err
