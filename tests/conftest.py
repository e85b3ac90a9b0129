import io

import pytest
from loguru import logger

from er.session import Session


@pytest.fixture(autouse=True)
def _quiet_logger():
    logger.remove()
    yield


class FakePipe:
    def __init__(self, owner):
        self.owner = owner
        self.closed = False

    def close(self):
        self.closed = True


class FakeProcess:
    def __init__(self, name, args, stdin, piped):
        self.name = name
        self.args = args
        self.stdin = stdin
        self.piped = piped
        self.pid = 1000
        self.stdout = FakePipe(self) if piped else None
        self.waited = False

    def wait(self, timeout=None):
        self.waited = True
        return 0


class FakeSpawner:
    """Records spawn requests; names in `missing` fail like unknown programs"""

    def __init__(self, missing=()):
        self.missing = set(missing)
        self.spawned = []

    def __call__(self, name, args, stdin=None, piped=False, search_path=None):
        if name in self.missing:
            raise FileNotFoundError(2, "No such file or directory")
        proc = FakeProcess(name, args, stdin, piped)
        proc.pid += len(self.spawned)
        self.spawned.append(proc)
        return proc


class FakeReaper:
    def __init__(self):
        self.pending = []
        self.polls = 0
        self.drained = False

    def track(self, handles):
        self.pending.extend(handles)

    def poll(self):
        self.polls += 1

    def drain(self, timeout):
        self.drained = True
        self.pending = []
        return 0


class FakeFilesystem:
    """Working directory that lives in memory"""

    def __init__(self, cwd="/home/user", existing=("/", "/home/user", "/tmp")):
        self.current = cwd
        self.existing = set(existing)
        self.calls = []

    def getcwd(self):
        return self.current

    def chdir(self, path):
        self.calls.append(path)
        if path == ".":
            return
        if path not in self.existing:
            raise FileNotFoundError(2, "No such file or directory", path)
        self.current = path


@pytest.fixture
def spawner():
    return FakeSpawner(missing={"no-such-program"})


@pytest.fixture
def filesystem():
    return FakeFilesystem()


@pytest.fixture
def session(spawner, filesystem):
    return Session(
        stdout=io.StringIO(),
        stderr=io.StringIO(),
        environ={"PATH": "/usr/bin:/bin"},
        getcwd=filesystem.getcwd,
        chdir=filesystem.chdir,
        spawn=spawner,
        reaper=FakeReaper(),
    )
