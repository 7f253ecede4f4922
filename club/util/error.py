"""Errors raised by the utility layer."""


class UtilError(Exception):
    """Base utility error."""


class ConfigurationError(UtilError):
    """The process was started with settings it cannot run with."""

    def __init__(self, setting: str, problem: str) -> None:
        self.setting = setting
        self.problem = problem
        super().__init__(f"{setting} {problem}")
