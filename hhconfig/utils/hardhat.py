import os
import socket
import subprocess

from urllib.parse import urlparse
from .logger import logger
from .custom_exceptions import HardhatError


class Hardhat:
    NPX = "npx"

    def command(self, config_path: str, task_args: list[str]) -> list[str]:
        return [self.NPX, "hardhat", "--config", config_path, *task_args]

    def run(self, config_path: str, task_args: list[str], cwd: str | None = None) -> int:
        """Run a Hardhat task against `config_path` and return its exit code."""
        if not os.path.isfile(config_path):
            raise HardhatError(
                f"Failed to find Hardhat config by path '{config_path}'"
            )
        if not task_args:
            raise HardhatError("No Hardhat task given")

        hardhat_cmd = self.command(config_path, task_args)
        logger.info(f'Running Hardhat: "{" ".join(hardhat_cmd)}"')

        try:
            return_code = subprocess.call(hardhat_cmd, cwd=cwd)
        except FileNotFoundError:
            raise HardhatError(f"'{self.NPX}' is not installed or not in PATH")

        if return_code == 0:
            logger.okay("Hardhat finished")
        else:
            logger.error("Hardhat exited with code", return_code)
        return return_code

    def node(self, config_path: str, local_rpc_url: str, cwd: str | None = None) -> int:
        """
        Run `hardhat node` bound to the host and port of `local_rpc_url`.

        The node forks whatever the config's `hardhat` network forks.
        """
        parsed_url = urlparse(local_rpc_url)
        if not parsed_url.port or not parsed_url.hostname:
            raise HardhatError(f"Invalid local RPC URL: '{local_rpc_url}'")

        if self._is_port_in_use_(parsed_url):
            raise HardhatError(f"{parsed_url.netloc} is busy")

        return self.run(
            config_path,
            [
                "node",
                "--hostname",
                parsed_url.hostname,
                "--port",
                str(parsed_url.port),
            ],
            cwd=cwd,
        )

    def _is_port_in_use_(self, parsed_url) -> bool:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            return s.connect_ex((parsed_url.hostname, parsed_url.port)) == 0


hardhat = Hardhat()
