# test_process.py
#
# Runs the terminator in a real Python process and checks the exit status
# and the bytes written to stderr.
#
# Tests:
# - main thread: status and message reach the parent process
# - main thread: no message means empty stderr and status 1
# - worker thread: the whole process ends, code after join never runs
# - worker thread: unwrap_or_die on None ends the process
# - ANSI escape sequences pass through a pipe unchanged
# - non-ASCII text is written as UTF-8

import os
import subprocess
import sys
import textwrap

import pytest


def _run(source: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-c", textwrap.dedent(source)],
        capture_output=True,
        env={**os.environ, "PYTHONIOENCODING": "utf-8"},
        timeout=30,
    )


# ---------------------------------------------------------------------------
# Main thread
# ---------------------------------------------------------------------------

class TestMainThread:
    @pytest.mark.parametrize("code", [0, 3, 42])
    def test_status_and_message(self, code):
        proc = _run(f"""
            from die import terminate_with_code_and_message
            terminate_with_code_and_message({code}, "boom")
            print("unreachable")
        """)
        assert proc.returncode == code
        assert proc.stdout == b""
        assert proc.stderr == b"boom\n"

    def test_bare_terminate(self):
        proc = _run("""
            from die import terminate
            terminate()
        """)
        assert proc.returncode == 1
        assert proc.stderr == b""

    def test_formatted(self):
        proc = _run("""
            from die import terminate_formatted
            terminate_formatted("argument {} must be {}", "-e", 1, code=4)
        """)
        assert proc.returncode == 4
        assert proc.stderr == b"argument -e must be 1\n"


# ---------------------------------------------------------------------------
# Worker thread
# ---------------------------------------------------------------------------

class TestWorkerThread:
    def test_unwrap_none_ends_process(self):
        proc = _run("""
            import threading
            from die import unwrap_or_die

            t = threading.Thread(target=unwrap_or_die, args=(None, "missing"))
            t.start()
            t.join()
            print("still running")
        """)
        assert proc.returncode == 1
        assert proc.stdout == b""
        assert proc.stderr == b"missing\n"

    def test_custom_code(self):
        proc = _run("""
            import threading
            from die import Err, unwrap_or_die_with_code

            t = threading.Thread(target=unwrap_or_die_with_code, args=(Err("x"), "boom", 7))
            t.start()
            t.join()
            print("still running")
        """)
        assert proc.returncode == 7
        assert proc.stdout == b""
        assert proc.stderr == b"boom\n"

    def test_pending_stdout_is_flushed(self):
        proc = _run("""
            import sys
            import threading
            from die import terminate_with_message_and_code

            sys.stdout.write("partial")
            t = threading.Thread(target=terminate_with_message_and_code, args=("bye", 2))
            t.start()
            t.join()
        """)
        assert proc.returncode == 2
        assert proc.stdout == b"partial"
        assert proc.stderr == b"bye\n"


# ---------------------------------------------------------------------------
# Message bytes
# ---------------------------------------------------------------------------

class TestMessageBytes:
    def test_ansi_escapes_kept(self):
        proc = _run(r"""
            from die import terminate_with_message
            terminate_with_message("\x1b[31mred\x1b[0m")
        """)
        assert proc.returncode == 1
        assert proc.stderr == b"\x1b[31mred\x1b[0m\n"

    def test_unicode(self):
        proc = _run("""
            from die import terminate_with_message
            terminate_with_message("caf\\u00e9 \\u2192 closed")
        """)
        assert proc.returncode == 1
        assert proc.stderr == "café → closed\n".encode("utf-8")
