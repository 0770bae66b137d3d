import io
import unittest

import blessed

from screen.errors import StaleWriterError, UpdateError
from screen.screenbuffer import ScreenBuffer


class BufferWriterTest(unittest.TestCase):
    def setUp(self):
        self.stream = io.BytesIO()
        self.screen = ScreenBuffer(blessed.Terminal(stream=self.stream))

    def test_raw_bytes_bypass_formatting(self):
        writer = self.screen.writer()
        self.assertEqual(writer.write(b"\x1b[1m%s"), 6)
        self.screen.update()
        self.assertEqual(self.stream.getvalue(), b"\x1b[1m%s")

    def test_writer_interleaves_with_print(self):
        writer = self.screen.writer()
        self.screen.print("a")
        writer.write(b"b")
        self.screen.print("c")
        self.assertEqual(self.screen.pending, b"abc")

    def test_writer_is_stale_after_update(self):
        writer = self.screen.writer()
        self.assertFalse(writer.stale)
        self.assertTrue(writer.writable())

        self.screen.update()
        self.assertTrue(writer.stale)
        self.assertFalse(writer.writable())
        with self.assertRaises(StaleWriterError):
            writer.write(b"lost")
        self.assertEqual(self.screen.pending, b"")

    def test_new_writer_after_update(self):
        self.screen.writer().write(b"1")
        self.screen.update()
        self.screen.writer().write(b"2")
        self.screen.update()
        self.assertEqual(self.stream.getvalue(), b"12")

    def test_writer_survives_failed_update(self):
        writer = self.screen.writer()
        writer.write(b"kept")
        self.stream.close()
        with self.assertRaises(UpdateError):
            self.screen.update()
        self.assertFalse(writer.stale)
        writer.write(b"+more")
        self.assertEqual(self.screen.pending, b"kept+more")
