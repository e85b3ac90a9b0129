from er.config import BUILTINS, DEFAULT_CD_TARGET


def builtin_cd(args, session):
    """Change directory, to / when no directory is given"""
    path = args[0] if args else DEFAULT_CD_TARGET
    try:
        session.chdir(path)
        return True
    except OSError as e:
        session.report(f"cd: {e.strerror or e}: {path}")
        return False


def builtin_echo(args, session):
    """Print the arguments separated by single spaces"""
    session.stdout.write(" ".join(args) + "\n")
    session.stdout.flush()
    return True


def is_builtin(name):
    return name in BUILTINS


def execute_builtin(stage, session):
    """
    Run a built-in stage in-process.
    Returns: False if the stage asked the shell to exit, True otherwise
    """
    if stage.name == "cd":
        builtin_cd(stage.args, session)
    elif stage.name == "echo":
        builtin_echo(stage.args, session)
    elif stage.name == "exit":
        return False
    return True
