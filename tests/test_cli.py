"""Tests for the sitefs CLI."""

import os
import sys
from os.path import join
from unittest.mock import MagicMock, PropertyMock, patch

import pytest

from sitefs.cli import main
from sitefs.cli._watch import _print_event, _wait_until_closed


@pytest.fixture(autouse=True)
def _no_log_config():
    # -v would install a root handler bound to the runner's stderr
    with patch("sitefs.cli._helpers.logging.basicConfig"):
        yield


def lines(result):
    return result.output.strip().splitlines()


# ---------------------------------------------------------------------------
# ls
# ---------------------------------------------------------------------------

class TestLs:
    def test_visible_only(self, runner, dummy_tree, visible_files):
        result = runner.invoke(main, ["ls", str(dummy_tree)])
        assert result.exit_code == 0, result.output
        assert set(lines(result)) == visible_files

    def test_all(self, runner, dummy_tree, dummy_files):
        result = runner.invoke(main, ["ls", "-a", str(dummy_tree)])
        assert result.exit_code == 0, result.output
        assert sorted(lines(result)) == sorted(dummy_files)

    def test_ignore_pattern(self, runner, dummy_tree):
        result = runner.invoke(main, ["ls", "--ignore-pattern", r"\.js$", str(dummy_tree)])
        assert result.exit_code == 0, result.output
        assert set(lines(result)) == {"e.txt", join("folder", "h.txt")}

    def test_ignore_pattern_from_env(self, runner, dummy_tree):
        result = runner.invoke(main, ["ls", str(dummy_tree)], env={"SITEFS_IGNORE_PATTERN": r"\.txt$"})
        assert result.exit_code == 0, result.output
        assert set(lines(result)) == {"f.js", join("folder", "i.js")}

    def test_invalid_pattern(self, runner, dummy_tree):
        result = runner.invoke(main, ["ls", "--ignore-pattern", "(", str(dummy_tree)])
        assert result.exit_code != 0
        assert "Invalid --ignore-pattern" in result.output

    def test_exclude(self, runner, dummy_tree):
        result = runner.invoke(main, ["ls", "--exclude", "folder", str(dummy_tree)])
        assert result.exit_code == 0, result.output
        assert set(lines(result)) == {"e.txt", "f.js"}

    def test_missing_path(self, runner, tmp_path):
        result = runner.invoke(main, ["ls", str(tmp_path / "nope")])
        assert result.exit_code != 0
        assert "No such file or directory" in result.output

    def test_verbose_count(self, runner, dummy_tree):
        result = runner.invoke(main, ["-v", "ls", str(dummy_tree)])
        assert result.exit_code == 0, result.output
        assert "4 file(s)" in result.output


# ---------------------------------------------------------------------------
# cp / empty / rm
# ---------------------------------------------------------------------------

class TestCp:
    def test_copies_visible(self, runner, dummy_tree, tmp_path, visible_files):
        dest = tmp_path / "out"
        result = runner.invoke(main, ["cp", str(dummy_tree), str(dest)])
        assert result.exit_code == 0, result.output
        assert set(lines(result)) == visible_files
        assert (dest / "folder" / "h.txt").read_text() == "h"
        assert not (dest / ".g").exists()

    def test_missing_src(self, runner, tmp_path):
        result = runner.invoke(main, ["cp", str(tmp_path / "nope"), str(tmp_path / "out")])
        assert result.exit_code != 0


class TestEmpty:
    def test_exclude_kept(self, runner, dummy_tree):
        result = runner.invoke(main, ["empty", "--exclude", "e.txt", str(dummy_tree)])
        assert result.exit_code == 0, result.output
        assert set(lines(result)) == {"f.js", join("folder", "h.txt"), join("folder", "i.js")}
        assert (dummy_tree / "e.txt").exists()
        assert (dummy_tree / "folder" / ".j").exists()
        assert (dummy_tree / ".hidden" / "a.txt").exists()

    def test_all_removes_everything(self, runner, dummy_tree):
        result = runner.invoke(main, ["empty", "-a", str(dummy_tree)])
        assert result.exit_code == 0, result.output
        assert os.listdir(dummy_tree) == []


class TestRm:
    def test_removes_tree(self, runner, dummy_tree):
        result = runner.invoke(main, ["-v", "rm", str(dummy_tree)])
        assert result.exit_code == 0, result.output
        assert not dummy_tree.exists()
        assert "Removed" in result.output

    def test_missing(self, runner, tmp_path):
        result = runner.invoke(main, ["rm", str(tmp_path / "nope")])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# cat / unused
# ---------------------------------------------------------------------------

class TestCat:
    def test_normalized(self, runner, tmp_path):
        target = tmp_path / "a.txt"
        target.write_bytes(b"\xef\xbb\xbfone\r\ntwo\r\n")
        result = runner.invoke(main, ["cat", str(target)])
        assert result.exit_code == 0, result.output
        assert result.output == "one\ntwo\n"

    def test_raw(self, runner, tmp_path):
        target = tmp_path / "a.txt"
        target.write_bytes(b"one\r\n")
        result = runner.invoke(main, ["cat", "--raw", str(target)])
        assert result.exit_code == 0, result.output
        assert result.stdout_bytes == b"one\r\n"

    def test_missing(self, runner, tmp_path):
        result = runner.invoke(main, ["cat", str(tmp_path / "nope.txt")])
        assert result.exit_code == 1
        assert "nope.txt" in result.output


class TestUnused:
    def test_collision(self, runner, tmp_path):
        (tmp_path / "foo.txt").write_text("")
        (tmp_path / "foo-1.txt").write_text("")
        result = runner.invoke(main, ["unused", str(tmp_path / "foo.txt")])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == str(tmp_path / "foo-2.txt")

    def test_free(self, runner, tmp_path):
        result = runner.invoke(main, ["unused", str(tmp_path / "bar.md")])
        assert result.output.strip() == str(tmp_path / "bar.md")


# ---------------------------------------------------------------------------
# watch
# ---------------------------------------------------------------------------

class TestWatchCommand:
    def test_interrupt_stops(self, runner, tmp_path):
        watcher = MagicMock()
        with patch("sitefs.cli._watch.watch_sync", return_value=watcher) as mock_watch, \
             patch("sitefs.cli._watch._wait_until_closed", side_effect=KeyboardInterrupt):
            result = runner.invoke(main, ["watch", "--debounce", "200", str(tmp_path)])
        assert result.exit_code == 0, result.output
        assert f"Watching {tmp_path} (debounce 200ms)" in result.output
        assert "Stopped watching." in result.output
        mock_watch.assert_called_once_with([str(tmp_path)], debounce=200, ignore_hidden=False)
        registered = [c.args[0] for c in watcher.on.call_args_list]
        assert registered == ["add", "change", "unlink", "error"]
        watcher.close.assert_called()

    def test_debounce_from_env(self, runner, tmp_path):
        watcher = MagicMock()
        with patch("sitefs.cli._watch.watch_sync", return_value=watcher) as mock_watch, \
             patch("sitefs.cli._watch._wait_until_closed"):
            result = runner.invoke(main, ["watch", "--ignore-hidden", str(tmp_path)],
                                   env={"SITEFS_DEBOUNCE": "75"})
        assert result.exit_code == 0, result.output
        mock_watch.assert_called_once_with([str(tmp_path)], debounce=75, ignore_hidden=True)

    def test_error_listener_closes(self, runner, tmp_path):
        watcher = MagicMock()
        with patch("sitefs.cli._watch.watch_sync", return_value=watcher), \
             patch("sitefs.cli._watch._wait_until_closed"):
            runner.invoke(main, ["watch", str(tmp_path)])
        on_error = dict(c.args for c in watcher.on.call_args_list)["error"]
        watcher.close.reset_mock()
        on_error(OSError("gone"))
        watcher.close.assert_called_once()

    def test_startup_failure(self, runner, tmp_path):
        missing = str(tmp_path / "nope")
        err = FileNotFoundError(2, "No such file or directory", missing)
        with patch("sitefs.cli._watch.watch_sync", side_effect=err):
            result = runner.invoke(main, ["watch", missing])
        assert result.exit_code == 1
        assert f"No such file or directory: {missing}" in result.output

    def test_requires_path(self, runner):
        result = runner.invoke(main, ["watch"])
        assert result.exit_code == 2

    def test_print_event(self, capsys):
        _print_event("add")("/site/a.txt")
        out = capsys.readouterr().out
        assert out.startswith("[")
        assert out.rstrip().endswith("add\t/site/a.txt")

    def test_wait_until_closed(self):
        watcher = MagicMock()
        closed = PropertyMock(side_effect=[False, False, True])
        type(watcher).closed = closed
        _wait_until_closed(watcher, poll=0.001)
        assert closed.call_count == 3


# ---------------------------------------------------------------------------
# console script
# ---------------------------------------------------------------------------

class TestEntryPoint:
    def test_missing_click(self, capsys):
        from sitefs import _cli_entry
        with patch.dict(sys.modules, {"click": None}):
            for name in [m for m in sys.modules if m == "sitefs.cli" or m.startswith("sitefs.cli.")]:
                del sys.modules[name]
            with pytest.raises(SystemExit) as excinfo:
                _cli_entry.main()
        assert excinfo.value.code == 1
        assert 'pip install "sitefs[cli]"' in capsys.readouterr().err

    def test_runs_group(self):
        from sitefs import _cli_entry
        with patch("sitefs.cli.main") as cli_main:
            _cli_entry.main()
        cli_main.assert_called_once_with()
