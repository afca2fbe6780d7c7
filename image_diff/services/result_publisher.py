import logging
import subprocess
from typing import List, Sequence

from ..errors import ConfigError, ExportError

logger = logging.getLogger(__name__)


class ResultPublisher:
    """
    Exposes a named result value to whatever runs the step.
    """

    def publish(self, key: str, value: str) -> None:
        raise NotImplementedError


class NoopPublisher(ResultPublisher):
    """For runs outside Bitrise: just log the value."""

    def publish(self, key: str, value: str) -> None:
        logger.info(f"{key}={value}")


class EnvmanPublisher(ResultPublisher):
    """
    Exports through `bitrise envman add`, so later steps of the workflow
    can read the value as an environment variable.
    """

    def __init__(self, command: Sequence[str] = ("bitrise", "envman", "add")):
        self.command = list(command)

    def build_command(self, key: str, value: str) -> List[str]:
        return self.command + ["--key", key, "--value", value]

    def publish(self, key: str, value: str) -> None:
        cmd = self.build_command(key, value)
        try:
            proc = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True)
        except OSError as e:
            raise ExportError(f"Failed to expose output with envman, error: {e}") from e

        if proc.returncode != 0:
            raise ExportError(
                f"Failed to expose output with envman, exit code: {proc.returncode} | output: {proc.stdout}"
            )
        logger.info(f"Exported {key}")


PUBLISHERS = {
    "envman": EnvmanPublisher,
    "none": NoopPublisher,
}


def create_publisher(name: str) -> ResultPublisher:
    try:
        return PUBLISHERS[name]()
    except KeyError:
        raise ConfigError(
            f"Unknown publisher {name!r}, expected one of: {', '.join(sorted(PUBLISHERS))}"
        ) from None
