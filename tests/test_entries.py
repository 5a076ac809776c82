"""Directory listing order and failure tests.

Listing runs against real temporary directories so the directory/file
classification comes from the filesystem itself.
"""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from dirpick.entries import Entry, index_of_path, list_entries
from dirpick.errors import ListError


class ListEntriesTests(unittest.TestCase):
    def test_directories_precede_files_and_each_group_is_path_sorted(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "beta").mkdir()
            (root / "alpha").mkdir()
            (root / "readme.txt").write_text("hi\n", encoding="utf-8")
            (root / "Zeta.md").write_text("", encoding="utf-8")
            (root / ".hidden").mkdir()

            entries = list_entries(root)

        self.assertEqual(
            [(entry.name, entry.is_dir) for entry in entries],
            [
                (".hidden", True),
                ("alpha", True),
                ("beta", True),
                ("Zeta.md", False),
                ("readme.txt", False),
            ],
        )
        seen_file = False
        for entry in entries:
            if not entry.is_dir:
                seen_file = True
            self.assertFalse(seen_file and entry.is_dir)

    def test_entry_paths_are_children_of_listed_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "sub").mkdir()
            entries = list_entries(root)
        self.assertEqual(entries, (Entry(path=root / "sub", is_dir=True),))

    def test_symlink_to_directory_counts_as_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "real").mkdir()
            os.symlink(root / "real", root / "link")
            (root / "file").write_text("", encoding="utf-8")
            os.symlink(root / "file", root / "file_link")

            by_name = {entry.name: entry.is_dir for entry in list_entries(root)}

        self.assertTrue(by_name["link"])
        self.assertFalse(by_name["file_link"])

    def test_empty_directory_lists_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(list_entries(Path(tmp)), ())

    def test_missing_directory_raises_list_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "gone"
            with self.assertRaises(ListError) as ctx:
                list_entries(missing)
        self.assertEqual(ctx.exception.path, missing)
        self.assertIsInstance(ctx.exception.__cause__, OSError)

    def test_listing_a_file_raises_list_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "plain.txt"
            target.write_text("x", encoding="utf-8")
            with self.assertRaises(ListError):
                list_entries(target)

    def test_index_of_path_finds_exact_match_only(self) -> None:
        entries = (
            Entry(Path("/a/a0"), True),
            Entry(Path("/a/b"), True),
        )
        self.assertEqual(index_of_path(entries, Path("/a/b")), 1)
        self.assertIsNone(index_of_path(entries, Path("/a/c")))


if __name__ == "__main__":
    unittest.main()
