import os
import sys
import tempfile

from loguru import logger

from er.config import HISTORY_FILE, MAX_HISTORY

try:
    import readline
except ImportError:
    import pyreadline3 as readline


class History:
    """Command history kept in readline and persisted to a file"""

    def __init__(self, path=HISTORY_FILE, max_length=MAX_HISTORY):
        self.path = path
        self.max_length = max_length
        # Never overwrite a file that exists but could not be read
        self.can_save = True

    def load(self):
        # add() is the only way lines get in, so blank lines stay out
        if hasattr(readline, "set_auto_history"):
            readline.set_auto_history(False)
        readline.set_history_length(self.max_length)
        if not os.path.exists(self.path):
            return
        try:
            readline.read_history_file(self.path)
            logger.debug("loaded {} history entries from {}",
                         readline.get_current_history_length(), self.path)
        except OSError as e:
            self.can_save = False
            print(f"Warning: Could not read history. Saving history is disabled "
                  f"for this session: {e}", file=sys.stderr)

    def add(self, line):
        line = line.rstrip("\r\n")
        if line.strip():
            readline.add_history(line)

    def save(self):
        """Write history next to the target, then move it into place"""
        if not self.can_save:
            return
        directory = os.path.dirname(os.path.abspath(self.path))
        temp_path = None
        try:
            fd, temp_path = tempfile.mkstemp(prefix=".er_history", dir=directory)
            os.close(fd)
            readline.set_history_length(self.max_length)
            readline.write_history_file(temp_path)
            os.replace(temp_path, self.path)
            logger.debug("saved history to {}", self.path)
        except OSError as e:
            print(f"Warning: Could not save history: {e}", file=sys.stderr)
            if temp_path and os.path.exists(temp_path):
                os.remove(temp_path)

    def entries(self):
        hlen = readline.get_current_history_length()
        return [readline.get_history_item(i) for i in range(1, hlen + 1)]
