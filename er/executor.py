from collections import namedtuple
from enum import Enum

from loguru import logger

from er.builtin import execute_builtin, is_builtin
from er.config import PROGRAM_NAME


class Outcome(Enum):
    CONTINUE = "continue"
    QUIT = "quit"


# carried: read end of this stage's output pipe, handed to the next stage
# handle: process started for this stage, if any
StepResult = namedtuple("StepResult", ["carried", "handle", "quit"])


def discard(carried):
    """Close a pipe end nobody is going to read"""
    if carried is not None:
        carried.close()
    return None


def run_stage(stage, carried, is_last, session):
    """
    Execute one stage, given the output of the stage before it.
    Returns: StepResult
    """
    if stage is None:
        return StepResult(discard(carried), None, False)

    if is_builtin(stage.name):
        discard(carried)
        keep_going = execute_builtin(stage, session)
        return StepResult(None, None, not keep_going)

    # Keep built-in output ahead of anything the child writes
    session.stdout.flush()
    try:
        handle = session.spawn(
            stage.name,
            stage.args,
            stdin=carried,
            piped=not is_last,
            search_path=session.search_path,
        )
    except OSError as e:
        session.report(f"{PROGRAM_NAME}: {stage.name}: {e.strerror or e}")
        return StepResult(discard(carried), None, False)

    # The child holds its own copy now
    discard(carried)
    return StepResult(None if is_last else handle.stdout, handle, False)


def wait_final(handle, session):
    try:
        status = handle.wait()
    except KeyboardInterrupt:
        print(file=session.stdout)
        logger.debug("interrupted while waiting for pid={}", handle.pid)
        session.reaper.track([handle])
        return
    logger.debug("pid={} exited with {}", handle.pid, status)


def run_pipeline(stages, session):
    """
    Execute parsed stages left to right, piping each external stage into
    the next one, and wait for the last stage.
    Returns: Outcome.QUIT once `exit` is reached, Outcome.CONTINUE otherwise
    """
    carried = None
    started = []
    step = None
    last = len(stages) - 1

    for index, stage in enumerate(stages):
        step = run_stage(stage, carried, index == last, session)
        carried = step.carried
        if step.handle is not None:
            started.append(step.handle)
        if step.quit:
            session.reaper.track(started)
            return Outcome.QUIT

    final = step.handle if step is not None else None
    if final is not None:
        started.pop()
        wait_final(final, session)

    session.reaper.track(started)
    session.reaper.poll()
    return Outcome.CONTINUE
