import logging
import shutil
import subprocess

from kube_mirror.errors import CommandError

logger = logging.getLogger(__name__)


class CommandClient:
    def __init__(self, timeout: float | None = None):
        self.timeout: float | None = timeout

    def look_path(self, name: str) -> str | None:
        return shutil.which(name)

    def run(self, name: str, *args: str) -> str:
        cmd = [name, *args]
        logger.debug(f"Running {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                check=False,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise CommandError(cmd, None, f"{name} is not installed") from e
        except subprocess.TimeoutExpired as e:
            raise CommandError(cmd, None, f"timed out after {self.timeout}s") from e
        if result.returncode != 0:
            raise CommandError(cmd, result.returncode, result.stdout or "")
        return result.stdout or ""
