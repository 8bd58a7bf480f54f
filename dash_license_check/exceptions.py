"""Custom exceptions for dash-license-check."""

from typing import Any, Sequence

from dash_license_check.constants import EXIT_FAILURE, EXIT_SCANNER_INTERNAL_ERROR


class LicenseCheckError(Exception):
    """Base exception for all dash-license-check errors.

    Attributes:
        exit_code: Process exit code the CLI terminates with.
    """

    exit_code = EXIT_FAILURE


class ConfigurationError(LicenseCheckError):
    """Exception raised when a configuration file cannot be used."""

    pass


class InputFileError(LicenseCheckError):
    """Exception raised when the dependency manifest does not exist."""

    pass


class NetworkError(LicenseCheckError):
    """Exception raised when downloading the scanner fails."""

    pass


class ProcessLaunchError(LicenseCheckError):
    """Exception raised when an external command cannot be started."""

    def __init__(self, message: str, command: str) -> None:
        super().__init__(message)
        self.command = command


class ScanError(LicenseCheckError):
    """Exception raised when the scan produced no usable results."""

    pass


class ScannerInternalError(ScanError):
    """Exception raised when dash-licenses reports an internal error."""

    exit_code = EXIT_SCANNER_INTERNAL_ERROR


class ExclusionsFormatError(LicenseCheckError):
    """Exception raised when the exclusions file has an invalid format."""

    pass


class UnhandledDependenciesError(LicenseCheckError):
    """Exception raised when restricted dependencies are not excluded.

    Attributes:
        entries: The unhandled restricted summary entries.
    """

    def __init__(self, message: str, entries: Sequence[Any] = ()) -> None:
        super().__init__(message)
        self.entries = list(entries)
