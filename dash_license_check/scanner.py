"""Scanner module: fetching and running dash-licenses."""
from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Mapping, Optional

import httpx

from dash_license_check.constants import (
    DASH_LICENSES_DOWNLOAD_URL,
    DASH_LICENSES_JAR_NAME,
    EXIT_SCANNER_INTERNAL_ERROR,
    JAR_PATH_ENV_VAR,
    TOKEN_ENV_VAR,
)
from dash_license_check.exceptions import NetworkError, ScannerInternalError
from dash_license_check.models.config import EffectiveConfig
from dash_license_check.models.process import ProcessStatus
from dash_license_check.output.reporter import Reporter
from dash_license_check.process import error_from_status, run_process

JAVA_BIN = "java"
DOWNLOAD_TIMEOUT = 60.0


def default_jar_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Location of the dash-licenses jar.

    Args:
        environ: Environment to read; defaults to os.environ.

    Returns:
        The path from DASH_LICENSES_JAR if set, otherwise a per-user
        cache location.
    """
    env = os.environ if environ is None else environ
    override = env.get(JAR_PATH_ENV_VAR)
    if override:
        return Path(override).expanduser().resolve()
    return Path.home() / ".cache" / "dash-license-check" / DASH_LICENSES_JAR_NAME


def download_file(
    url: str, destination: Path, client: Optional[httpx.Client] = None
) -> None:
    """Download a URL to a file, following redirects.

    The body is streamed to a sibling ``.part`` file that replaces the
    destination only once the download is complete.

    Args:
        url: URL to fetch.
        destination: File to create.
        client: Optional httpx.Client to use. If not provided,
            a new client will be created.

    Raises:
        NetworkError: If the request fails or the file cannot be written.
    """
    partial = destination.with_name(destination.name + ".part")

    def do_download(c: httpx.Client) -> None:
        try:
            with c.stream(
                "GET",
                url,
                follow_redirects=True,
                timeout=httpx.Timeout(DOWNLOAD_TIMEOUT),
            ) as response:
                response.raise_for_status()
                with partial.open("wb") as f:
                    for chunk in response.iter_bytes():
                        f.write(chunk)
            partial.replace(destination)
        except httpx.HTTPStatusError as e:
            raise NetworkError(
                f"Failed to download {url}: HTTP {e.response.status_code}"
            ) from e
        except httpx.RequestError as e:
            raise NetworkError(f"Failed to download {url}: {e}") from e
        except OSError as e:
            raise NetworkError(f"Failed to save {destination}: {e}") from e
        finally:
            partial.unlink(missing_ok=True)

    if client:
        do_download(client)
        return

    with httpx.Client() as new_client:
        do_download(new_client)


def ensure_scanner_jar(
    jar_path: Path,
    reporter: Reporter,
    client: Optional[httpx.Client] = None,
    url: str = DASH_LICENSES_DOWNLOAD_URL,
) -> Path:
    """Download dash-licenses unless the jar is already present.

    Args:
        jar_path: Where the jar is expected.
        reporter: Where to print progress.
        client: Optional httpx.Client used for the download.
        url: Download location of the jar.

    Returns:
        The jar path.

    Raises:
        NetworkError: If the jar is missing and cannot be downloaded.
    """
    if jar_path.exists():
        return jar_path

    reporter.info("Fetching dash-licenses...")
    try:
        jar_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise NetworkError(f"Cannot create {jar_path.parent}: {e}") from e
    download_file(url, jar_path, client=client)
    return jar_path


def backup_summary(summary_path: Path, reporter: Reporter) -> Optional[Path]:
    """Rename a previous summary file to ``<summary>.old``.

    An existing backup is overwritten.

    Returns:
        The backup path, or None if there was no previous summary.
    """
    if not summary_path.exists():
        return None
    reporter.info("Backing up previous summary...")
    backup = summary_path.with_name(summary_path.name + ".old")
    summary_path.replace(backup)
    return backup


def resolve_review_mode(
    config: EffectiveConfig,
    reporter: Reporter,
    environ: Optional[Mapping[str, str]] = None,
) -> bool:
    """Decide whether dash-licenses can run in "review" mode.

    Review mode needs an Eclipse Foundation Gitlab Personal Access Token in
    the DASH_TOKEN environment variable (dash-licenses reads it directly; it
    is only tested for presence here) and a project name.

    Args:
        config: Effective configuration.
        reporter: Where to print why review mode is turned off.
        environ: Environment to inspect; defaults to os.environ.

    Returns:
        True if review mode was requested and can be used.
    """
    if not config.review:
        return False

    env = os.environ if environ is None else environ
    if TOKEN_ENV_VAR not in env:
        reporter.warn(
            "Please setup an Eclipse Foundation Gitlab Personal Access Token "
            'to run the license check in "review" mode'
        )
        reporter.warn(f'It should be set in an environment variable named "{TOKEN_ENV_VAR}"')
        reporter.warn("Proceeding in normal mode since the PAT is not currently set")
        return False

    if not config.project:
        reporter.warn(
            "Please provide a valid Eclipse Foundation project name to run "
            'the license check in "review" mode'
        )
        reporter.warn('You can pass it using the "--project=" CLI parameter')
        reporter.warn("Proceeding in normal (non-review) mode since no project is set")
        return False

    return True


def build_scanner_args(
    config: EffectiveConfig,
    jar_path: Path,
    summary_path: Path,
    review: bool,
) -> list[str]:
    """Build the java arguments that launch dash-licenses.

    The project name, when set, makes results more precise (project
    specific "works with" approvals are taken into account).
    """
    args = [
        "-jar",
        str(jar_path),
        config.input_file,
        "-batch",
        str(config.batch),
        "-timeout",
        str(config.timeout),
        "-summary",
        str(summary_path),
    ]
    if config.project:
        args += ["-project", config.project]
        if review:
            args.append("-review")
    return args


def run_scanner(args: list[str], reporter: Reporter) -> ProcessStatus:
    """Run dash-licenses and check how it terminated.

    Failures other than an internal error are reported as warnings: the
    summary may still be usable.

    Args:
        args: Arguments for the java executable.
        reporter: Where to print failures.

    Returns:
        The process status.

    Raises:
        ProcessLaunchError: If java cannot be launched.
        ScannerInternalError: If dash-licenses reported an internal error.
    """
    reporter.info("Running dash-licenses...")
    status = run_process(JAVA_BIN, args, stdin=subprocess.DEVNULL)

    message = error_from_status(status)
    if message is None:
        return status
    if status.returncode == EXIT_SCANNER_INTERNAL_ERROR:
        reporter.error(message)
        raise ScannerInternalError(
            "Detected an internal error in dash-licenses - run inconclusive"
        )
    reporter.warn(message)
    return status
