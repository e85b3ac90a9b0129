import os

PROGRAM_NAME = "er"
VERSION = "0.2.0"

# Stage separator; a literal " | " cannot be escaped inside an argument
PIPE_SEPARATOR = " | "

# `cd` with no argument
DEFAULT_CD_TARGET = "/"

BUILTINS = ("cd", "echo", "exit")

# Appended to bare command names before the PATH search on Windows
EXE_SUFFIX = ".exe" if os.name == "nt" else ""


def env_number(name, default, kind=int):
    """Numeric setting from the environment, `default` if unset or unparsable"""
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return kind(value)
    except ValueError:
        return default


HISTORY_FILE = os.path.expanduser(os.getenv("ER_HISTORY_FILE", "~/.er_history"))
MAX_HISTORY = env_number("ER_MAX_HISTORY", 1000)

LOG_LEVEL = os.getenv("ER_LOG_LEVEL", "WARNING").upper()

# Seconds `exit` waits for unfinished pipeline stages before terminating them
EXIT_REAP_TIMEOUT = env_number("ER_EXIT_REAP_TIMEOUT", 3.0, float)
