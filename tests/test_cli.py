import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

from bbhtml.__main__ import main


class TestCommandLine(unittest.TestCase):
    def setUp(self):
        handle, self.path = tempfile.mkstemp(suffix=".bbcode")
        with os.fdopen(handle, "w", encoding="utf-8") as f:
            f.write("[b]<hi>[/b]\n[youtube]id[/youtube]")

    def tearDown(self):
        os.remove(self.path)

    def run_main(self, *args):
        out = io.StringIO()
        err = io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            status = main([*args, self.path])
        return status, out.getvalue(), err.getvalue()

    def test_renders_file(self):
        status, out, _ = self.run_main()
        assert status == 0
        assert out.startswith("<strong>&lt;hi&gt;</strong><br/>\n<iframe")

    def test_flags(self):
        status, out, _ = self.run_main("--no-escape", "--no-lines", "--ignore", "b", "--youtube-width", "10")
        assert status == 0
        assert out.startswith("<hi>\n<iframe")
        assert 'width="10"' in out

    def test_raw(self):
        status, out, _ = self.run_main("--raw")
        assert status == 0
        assert out == "<hi>\nid"

    def test_strict_failure(self):
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("x[/b]")
        status, out, err = self.run_main("--strict")
        assert status == 1
        assert out == ""
        assert "unmatched-closing-tag" in err


if __name__ == "__main__":
    unittest.main()
