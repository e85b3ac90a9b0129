import os
import sys

from er.process import spawn_process
from er.reaper import Reaper


class Session:
    """
    State that outlives a single input line.

    The working directory belongs to the operating system; the session only
    holds the functions used to read and change it, so tests can swap them.
    """

    def __init__(self, stdout=None, stderr=None, environ=None,
                 getcwd=os.getcwd, chdir=os.chdir, spawn=None, reaper=None):
        self._stdout = stdout
        self._stderr = stderr
        self.environ = environ if environ is not None else os.environ
        self.getcwd = getcwd
        self.chdir = chdir
        self.spawn = spawn if spawn is not None else spawn_process
        self.reaper = reaper if reaper is not None else Reaper()

    @property
    def stdout(self):
        # looked up per call so a replaced sys.stdout is honoured
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self):
        return self._stderr if self._stderr is not None else sys.stderr

    @property
    def search_path(self):
        return self.environ.get("PATH", os.defpath)

    def cwd(self):
        """Current working directory, or "" if it cannot be read"""
        try:
            return self.getcwd()
        except OSError:
            return ""

    def report(self, message):
        """Print one error line to the interactive error stream"""
        self.stdout.flush()
        print(message, file=self.stderr, flush=True)
