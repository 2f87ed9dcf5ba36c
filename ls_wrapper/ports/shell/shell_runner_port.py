"""
Shell runner port interface defining the contract for running shell commands.
"""

from abc import ABC, abstractmethod

from ls_wrapper.entities.translation import ShellOutput


class ShellRunnerPort(ABC):
    """Port interface for running a shell program to completion."""

    @abstractmethod
    def run(self, command: list[str]) -> ShellOutput:
        """
        Run a program and wait for it to finish.

        Args:
            command: Program followed by its arguments, e.g. ['cmd.exe', '/C', 'dir']

        Returns:
            Captured stdout, stderr and exit code

        Raises:
            ExecutionError: If the program cannot be started
        """
        pass
