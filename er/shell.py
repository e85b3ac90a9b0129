from loguru import logger

from er.config import EXIT_REAP_TIMEOUT, PROGRAM_NAME, VERSION
from er.executor import Outcome, run_pipeline
from er.parser import parse_line


def prompt(session):
    """Current directory followed by >"""
    return f"{session.cwd()}>"


def banner():
    return f"{PROGRAM_NAME} - executable runner v{VERSION}\n"


def run_line(line, session):
    """Split and execute one line of input"""
    stages = parse_line(line)
    if not stages:
        return Outcome.CONTINUE
    logger.debug("pipeline of {} stage(s): {!r}", len(stages), line)
    return run_pipeline(stages, session)


def main_loop(session, history=None, read_line=input):
    """
    Prompt, read and execute lines until `exit` or end of input.
    Returns: number of leftover stages that had to be terminated on exit
    """
    print(banner(), file=session.stdout, flush=True)
    try:
        while True:
            try:
                line = read_line(prompt(session))
            except EOFError:
                print(file=session.stdout)
                break
            except KeyboardInterrupt:
                print(file=session.stdout)
                continue

            if history is not None:
                history.add(line)

            if run_line(line, session) is Outcome.QUIT:
                break
    finally:
        terminated = session.reaper.drain(EXIT_REAP_TIMEOUT)
        if terminated:
            logger.debug("terminated {} unfinished stage(s) on exit", terminated)
    return terminated
