import asyncio
import os
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from obsidian_notes.core.note_operations import (
    UpdateMode,
    combine_content,
    read_notes,
    update_note,
    write_note,
)
from obsidian_notes.core.search_operations import search_notes
from obsidian_notes.data_models import NotesConfiguration
from obsidian_notes.exceptions import (
    ErrorKind,
    ExtensionRequiredError,
    HiddenPathDeniedError,
    InvalidArgumentError,
    NoteNotFoundError,
    ParentMissingError,
    WriteDisabledError,
)


@unittest.skipIf(os.sep != "/", "POSIX path semantics")
class NoteOperationTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = TemporaryDirectory()
        self.vault_path = Path(self.tmpdir.name).resolve() / "vault"
        self.vault_path.mkdir()
        self.config = NotesConfiguration.from_paths([self.vault_path], enable_write=True)
        self.read_only = NotesConfiguration.from_paths([self.vault_path], enable_write=False)

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def _write_note(self, relative: str, content: str) -> Path:
        note_path = self.vault_path / relative
        note_path.parent.mkdir(parents=True, exist_ok=True)
        note_path.write_text(content, encoding="utf-8")
        return note_path

    def _read_note(self, relative: str) -> str:
        return (self.vault_path / relative).read_text(encoding="utf-8")


class ReadNotesTests(NoteOperationTestCase):
    def test_valid_and_denied_paths_share_one_batch(self) -> None:
        self._write_note("ok.md", "hello")
        self._write_note(".hidden/secret.md", "nope")

        results = asyncio.run(read_notes(["ok.md", ".hidden/secret.md"], self.config))

        self.assertEqual(len(results), 2)
        self.assertTrue(results[0].ok)
        self.assertEqual(results[0].content, "hello")
        self.assertFalse(results[1].ok)
        self.assertIsNone(results[1].content)
        self.assertIn("hidden", results[1].error)

    def test_results_keep_request_order(self) -> None:
        for name in ("c", "a", "b"):
            self._write_note(f"{name}.md", name)

        results = asyncio.run(read_notes(["c.md", "a.md", "b.md"], self.config))

        self.assertEqual([result.path for result in results], ["c.md", "a.md", "b.md"])
        self.assertEqual([result.content for result in results], ["c", "a", "b"])

    def test_missing_note_is_reported_inline(self) -> None:
        results = asyncio.run(read_notes(["missing.md"], self.config))
        self.assertIn("Note not found", results[0].error)

    def test_path_outside_vault_is_reported_inline(self) -> None:
        outside = Path(self.tmpdir.name).resolve() / "outside.md"
        outside.write_text("secret", encoding="utf-8")

        results = asyncio.run(read_notes([str(outside)], self.config))

        self.assertIn("outside allowed directories", results[0].error)

    def test_absolute_path_inside_vault(self) -> None:
        note = self._write_note("Daily/today.md", "today")
        results = asyncio.run(read_notes([str(note)], self.config))
        self.assertEqual(results[0].content, "today")

    def test_reading_a_folder_is_an_inline_error(self) -> None:
        (self.vault_path / "folder.md").mkdir()
        results = asyncio.run(read_notes(["folder.md"], self.config))
        self.assertFalse(results[0].ok)

    def test_symlink_loop_does_not_abort_the_batch(self) -> None:
        self._write_note("ok.md", "hello")
        (self.vault_path / "loop.md").symlink_to("loop.md")

        results = asyncio.run(read_notes(["ok.md", "loop.md"], self.config))

        self.assertEqual(results[0].content, "hello")
        self.assertFalse(results[1].ok)
        self.assertIn("symlink loop", results[1].error)

    def test_nul_byte_does_not_abort_the_batch(self) -> None:
        self._write_note("ok.md", "hello")

        results = asyncio.run(read_notes(["ok.md", "bad\x00.md"], self.config))

        self.assertEqual(results[0].content, "hello")
        self.assertFalse(results[1].ok)
        self.assertIn("NUL byte", results[1].error)

    def test_read_is_allowed_when_writing_is_disabled(self) -> None:
        self._write_note("ok.md", "hello")
        results = asyncio.run(read_notes(["ok.md"], self.read_only))
        self.assertEqual(results[0].as_payload(), {"path": "ok.md", "content": "hello"})


class WriteNoteTests(NoteOperationTestCase):
    def test_creates_new_note(self) -> None:
        result = asyncio.run(write_note("new.md", "# New", self.config))
        self.assertEqual(result, {"path": "new.md", "status": "written"})
        self.assertEqual(self._read_note("new.md"), "# New")

    def test_overwrites_existing_note(self) -> None:
        self._write_note("note.md", "old")
        asyncio.run(write_note("note.md", "new", self.config))
        self.assertEqual(self._read_note("note.md"), "new")

    def test_requires_markdown_extension(self) -> None:
        with self.assertRaises(ExtensionRequiredError) as ctx:
            asyncio.run(write_note("notes.txt", "text", self.config))
        self.assertEqual(ctx.exception.kind, ErrorKind.EXTENSION_REQUIRED)
        self.assertFalse((self.vault_path / "notes.txt").exists())

    def test_missing_folder_without_create_directories(self) -> None:
        with self.assertRaises(ParentMissingError):
            asyncio.run(write_note("Inbox/2025/idea.md", "idea", self.config))
        self.assertFalse((self.vault_path / "Inbox").exists())

    def test_create_directories(self) -> None:
        asyncio.run(
            write_note("Inbox/2025/idea.md", "idea", self.config, create_directories=True)
        )
        self.assertEqual(self._read_note("Inbox/2025/idea.md"), "idea")

    def test_hidden_path_is_denied(self) -> None:
        with self.assertRaises(HiddenPathDeniedError):
            asyncio.run(write_note(".obsidian/evil.md", "x", self.config, create_directories=True))
        self.assertFalse((self.vault_path / ".obsidian").exists())

    def test_disabled_before_any_validation(self) -> None:
        """Write gating wins over extension and path checks."""
        with self.assertRaises(WriteDisabledError) as ctx:
            asyncio.run(write_note(".hidden/notes.txt", "x", self.read_only))
        self.assertEqual(ctx.exception.kind, ErrorKind.WRITE_DISABLED)
        self.assertIn("--enable-write", str(ctx.exception))


class UpdateNoteTests(NoteOperationTestCase):
    def test_append(self) -> None:
        self._write_note("log.md", "line1")
        result = asyncio.run(update_note("log.md", "line2", self.config, mode="append"))
        self.assertEqual(result["status"], "appended")
        self.assertEqual(self._read_note("log.md"), "line1\nline2")

    def test_prepend(self) -> None:
        self._write_note("log.md", "line1")
        result = asyncio.run(update_note("log.md", "line2", self.config, mode=UpdateMode.PREPEND))
        self.assertEqual(result["status"], "prepended")
        self.assertEqual(self._read_note("log.md"), "line2\nline1")

    def test_replace(self) -> None:
        self._write_note("log.md", "line1")
        result = asyncio.run(update_note("log.md", "line2", self.config))
        self.assertEqual(result, {"path": "log.md", "status": "replaced"})
        self.assertEqual(self._read_note("log.md"), "line2")

    def test_replace_creates_missing_note(self) -> None:
        asyncio.run(update_note("fresh.md", "content", self.config, mode="replace"))
        self.assertEqual(self._read_note("fresh.md"), "content")

    def test_append_to_missing_note_fails(self) -> None:
        with self.assertRaises(NoteNotFoundError) as ctx:
            asyncio.run(update_note("missing.md", "x", self.config, mode="append"))
        self.assertEqual(ctx.exception.kind, ErrorKind.NOT_FOUND)
        self.assertFalse((self.vault_path / "missing.md").exists())

    def test_prepend_to_missing_note_fails(self) -> None:
        with self.assertRaises(NoteNotFoundError):
            asyncio.run(update_note("missing.md", "x", self.config, mode="prepend"))

    def test_unknown_mode(self) -> None:
        self._write_note("log.md", "line1")
        with self.assertRaises(InvalidArgumentError):
            asyncio.run(update_note("log.md", "x", self.config, mode="merge"))
        self.assertEqual(self._read_note("log.md"), "line1")

    def test_requires_markdown_extension(self) -> None:
        with self.assertRaises(ExtensionRequiredError):
            asyncio.run(update_note("log.txt", "x", self.config))

    def test_disabled_before_any_validation(self) -> None:
        self._write_note("log.md", "line1")
        with self.assertRaises(WriteDisabledError):
            asyncio.run(update_note("log.md", "x", self.read_only, mode="append"))
        self.assertEqual(self._read_note("log.md"), "line1")


class MultipleVaultTests(NoteOperationTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.second_path = Path(self.tmpdir.name).resolve() / "second"
        (self.second_path / "sub").mkdir(parents=True)
        (self.second_path / "sub" / "two.md").write_text("two", encoding="utf-8")
        self.config = NotesConfiguration.from_paths(
            [self.vault_path, self.second_path], enable_write=True
        )

    def test_search_hit_from_second_vault_reads_back(self) -> None:
        hits = asyncio.run(search_notes("two", self.config))
        self.assertEqual(list(hits.matches), ["sub/two.md"])

        results = asyncio.run(read_notes(list(hits.matches), self.config))

        self.assertEqual(results[0].content, "two")

    def test_update_targets_the_vault_holding_the_note(self) -> None:
        asyncio.run(update_note("sub/two.md", "more", self.config, mode="append"))
        self.assertEqual(
            (self.second_path / "sub" / "two.md").read_text(encoding="utf-8"), "two\nmore"
        )
        self.assertFalse((self.vault_path / "sub").exists())

    def test_new_notes_go_to_the_primary_vault(self) -> None:
        asyncio.run(write_note("fresh.md", "new", self.config))
        self.assertEqual(self._read_note("fresh.md"), "new")
        self.assertFalse((self.second_path / "fresh.md").exists())


class CombineContentTests(unittest.TestCase):
    def test_modes(self) -> None:
        self.assertEqual(combine_content("a", "b", UpdateMode.APPEND), "a\nb")
        self.assertEqual(combine_content("a", "b", UpdateMode.PREPEND), "b\na")
        self.assertEqual(combine_content("a", "b", UpdateMode.REPLACE), "b")

    def test_separator_is_always_inserted(self) -> None:
        self.assertEqual(combine_content("a\n", "b", UpdateMode.APPEND), "a\n\nb")
        self.assertEqual(combine_content("", "b", UpdateMode.APPEND), "\nb")


if __name__ == "__main__":
    unittest.main()
