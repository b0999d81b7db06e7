"""
Tests for input sources.
"""

import io

import pytest

from ..session.input_source import InputSource, InteractiveInputSource, ScriptedInputSource


class TestScriptedInputSource:
    """Tests for scripted replay."""

    def test_replays_in_order_then_ends(self):
        source = ScriptedInputSource(["0,0", "", "q"])

        assert source.read() == "0,0"
        assert source.read() == ""
        assert source.remaining == 1
        assert source.read() == "q"
        assert source.read() is None
        assert source.read() is None

    def test_empty_script(self):
        assert ScriptedInputSource([]).read() is None

    def test_copies_the_script(self):
        """Later changes to the caller's list do not leak in."""
        moves = ["0,0"]
        source = ScriptedInputSource(moves)
        moves.append("1,1")

        assert source.read() == "0,0"
        assert source.read() is None

    def test_from_file(self, tmp_path):
        path = tmp_path / "moves.txt"
        path.write_text("0,0\n1,1\nq\n", encoding="utf-8")

        source = ScriptedInputSource.from_file(path)

        assert source.lines == ["0,0", "1,1", "q"]

    def test_is_an_input_source(self):
        assert isinstance(ScriptedInputSource([]), InputSource)


class TestInteractiveInputSource:
    """Tests for stream-backed input."""

    def test_reads_lines(self):
        source = InteractiveInputSource(io.StringIO("1,2\n\nq\n"))

        assert source.read() == "1,2\n"
        assert source.read() == "\n"
        assert source.read() == "q\n"

    def test_end_of_stream_is_none(self):
        source = InteractiveInputSource(io.StringIO("q"))

        assert source.read() == "q"
        assert source.read() is None

    def test_closed_stream_is_none(self):
        stream = io.StringIO("1,1\n")
        stream.close()

        assert InteractiveInputSource(stream).read() is None

    def test_defaults_to_stdin(self, monkeypatch):
        fake_stdin = io.StringIO("2,2\n")
        monkeypatch.setattr("sys.stdin", fake_stdin)

        assert InteractiveInputSource().read() == "2,2\n"

    def test_abstract_base_cannot_be_built(self):
        with pytest.raises(TypeError):
            InputSource()
