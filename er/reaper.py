import psutil
from loguru import logger


class Reaper:
    """
    Pipeline stages that were started but never waited on.

    Only the last stage of a pipeline is waited for; the earlier ones usually
    exit on their own once their reader is gone. They are collected here so
    they do not linger as zombies, and so `exit` can finish them off.
    """

    def __init__(self):
        self.pending = []

    def track(self, handles):
        self.pending.extend(handles)

    def poll(self):
        """Reap whatever already finished, without blocking"""
        if not self.pending:
            return
        gone, alive = psutil.wait_procs(self.pending, timeout=0)
        for proc in gone:
            logger.debug("reaped pid={} status={}", proc.pid, proc.returncode)
        self.pending = alive

    def drain(self, timeout):
        """
        Wait up to `timeout` seconds for every pending stage, then
        terminate the ones still running.
        Returns: number of stages that had to be terminated
        """
        if not self.pending:
            return 0
        _, alive = psutil.wait_procs(self.pending, timeout=timeout)
        for proc in alive:
            try:
                proc.terminate()
                logger.debug("terminated pid={}", proc.pid)
            except psutil.NoSuchProcess:
                pass
        if alive:
            _, stubborn = psutil.wait_procs(alive, timeout=timeout)
            for proc in stubborn:
                try:
                    proc.kill()
                except psutil.NoSuchProcess:
                    pass
        self.pending = []
        return len(alive)
