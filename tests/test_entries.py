import os
import unittest

from embedfile.entries import EmbeddedBundle, EmbeddedEntry, display_name, read_bundle, read_entry
from embedfile.errors import InputReadError
from tests.c_tables import TempDirMixin


class DisplayNameTest(unittest.TestCase):
    def test_strips_directories(self):
        self.assertEqual(display_name("shaders/quad/quad.vert"), "quad.vert")

    def test_plain_name_unchanged(self):
        self.assertEqual(display_name("a.txt"), "a.txt")

    def test_preserve_paths(self):
        self.assertEqual(display_name("sub/b.txt", preserve_paths=True), "sub/b.txt")

    def test_native_separator(self):
        path = os.path.join("dir", "nested", "file.bin")
        self.assertEqual(display_name(path), "file.bin")


class ReadEntryTest(TempDirMixin, unittest.TestCase):
    def test_single_read_gives_content_and_length(self):
        self.write_file("sub/b.txt", b"!")
        entry = read_entry("sub/b.txt")
        self.assertEqual(entry.name, "b.txt")
        self.assertEqual(entry.path, "sub/b.txt")
        self.assertEqual(entry.data, b"!")
        self.assertEqual(entry.length, 1)

    def test_binary_content_kept(self):
        payload = bytes(range(256)) * 3
        self.write_file("blob.bin", payload)
        self.assertEqual(read_entry("blob.bin").data, payload)

    def test_missing_file(self):
        with self.assertRaises(InputReadError) as ctx:
            read_entry("missing.txt")
        self.assertEqual(ctx.exception.path, "missing.txt")
        self.assertIn("missing.txt", str(ctx.exception))

    def test_directory_is_not_readable(self):
        os.makedirs("assets")
        with self.assertRaises(InputReadError):
            read_entry("assets")

    def test_read_bundle_keeps_order(self):
        self.write_file("a.txt", b"hi")
        self.write_file("sub/b.txt", b"!")
        bundle = read_bundle(["sub/b.txt", "a.txt"])
        self.assertEqual(bundle.names, ["b.txt", "a.txt"])
        self.assertEqual([e.length for e in bundle], [1, 2])


class EmbeddedBundleTest(unittest.TestCase):
    def setUp(self):
        self.bundle = EmbeddedBundle([
            EmbeddedEntry("a.txt", "a.txt", b"hi"),
            EmbeddedEntry("sub/b.txt", "b.txt", b"!"),
        ])

    def test_lookup(self):
        self.assertEqual(self.bundle.lookup("a.txt"), (b"hi", 2))
        self.assertEqual(self.bundle.lookup("b.txt"), (b"!", 1))

    def test_lookup_missing(self):
        self.assertIsNone(self.bundle.lookup("sub/b.txt"))
        self.assertIsNone(self.bundle.lookup(""))

    def test_mapping_is_read_only(self):
        with self.assertRaises(TypeError):
            self.bundle.by_name["c.txt"] = None

    def test_duplicate_names_first_wins(self):
        with self.assertLogs("embedfile", level="WARNING") as logs:
            bundle = EmbeddedBundle([
                EmbeddedEntry("x/a.txt", "a.txt", b"first"),
                EmbeddedEntry("y/a.txt", "a.txt", b"second"),
            ])
        self.assertEqual(len(bundle), 2)
        self.assertEqual(bundle.lookup("a.txt"), (b"first", 5))
        self.assertIn("y/a.txt", logs.output[0])


if __name__ == "__main__":
    unittest.main()
