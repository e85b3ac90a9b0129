from collections import namedtuple

from er.config import PIPE_SEPARATOR

Stage = namedtuple("Stage", ["name", "args"])


def parse_stage(fragment):
    """
    Tokenize one pipeline fragment on runs of whitespace.
    Returns: Stage, or None when the fragment holds no tokens
    """
    tokens = fragment.split()
    if not tokens:
        return None
    return Stage(tokens[0], tuple(tokens[1:]))


def parse_line(line):
    """
    Split a raw input line into pipeline stages.
    Returns: list of Stage, with None in place of every empty stage

    Only the line terminator is removed before splitting, so a leading or
    trailing separator yields an empty stage instead of a command named "|".
    """
    line = line.rstrip("\r\n")
    if not line.strip():
        return []
    return [parse_stage(fragment) for fragment in line.split(PIPE_SEPARATOR)]
