"""Fallback delivery by shelling out to the curl binary."""

from __future__ import annotations

import logging
import os
import re
import shlex
import subprocess
from typing import Iterable, List, Mapping, Optional

from errors import SubprocessError

logger = logging.getLogger(__name__)

TOOL_NAME = "curl"
PATH_OVERRIDE_ENV = "SLACKHOOK_PATH"
FALLBACK_PATH = os.pathsep.join(
    ("/opt/local/bin", "/usr/local/bin", "/usr/bin", "/bin", "/usr/sbin", "/sbin")
)
VERSION_PATTERN = re.compile(r"^curl \d+")
DEFAULT_TIMEOUT = 15


def search_dirs(env: Optional[Mapping[str, str]] = None) -> List[str]:
    """Return the directories to search, deduplicated in first-seen order."""
    env = os.environ if env is None else env
    raw = env.get(PATH_OVERRIDE_ENV) or env.get("PATH") or FALLBACK_PATH
    dirs: List[str] = []
    for entry in raw.split(os.pathsep):
        if entry and entry not in dirs:
            dirs.append(entry)
    return dirs


def _is_executable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


def _answers_version_query(tool: str) -> bool:
    try:
        result = subprocess.run(
            [tool, "-V"],
            capture_output=True,
            text=True,
            timeout=DEFAULT_TIMEOUT,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired):
        # Not on the search path either; the caller reports "not found".
        return False
    lines = result.stdout.splitlines()
    return bool(lines) and VERSION_PATTERN.match(lines[0]) is not None


def find_curl_bin(dirs: Optional[Iterable[str]] = None, *, tool: str = TOOL_NAME) -> Optional[str]:
    """
    Locate the curl binary.

    Looks in each search directory first and returns the resolved absolute
    path of the first match. Failing that, asks ``curl -V`` unqualified and
    returns the bare tool name when the banner looks like curl's.
    """
    for directory in search_dirs() if dirs is None else dirs:
        candidate = os.path.join(directory, tool)
        if _is_executable(candidate):
            return os.path.realpath(candidate)

    if _answers_version_query(tool):
        return tool
    return None


def build_command(curl_bin: str, json_payload: str, webhook: str) -> List[str]:
    # --data-urlencode makes curl URL-encode the JSON, unlike the native requests path.
    return [curl_bin, "-X", "POST", "--data-urlencode", "payload=" + json_payload, webhook]


def post_with_curl_bin(
    json_payload: str,
    webhook: str,
    *,
    curl_bin: str = TOOL_NAME,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Run curl to POST the payload and return whatever it printed.

    The exit status is not checked.
    """
    command = build_command(curl_bin, json_payload, webhook)
    logger.debug("Running %s", shlex.join(command))
    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        raise SubprocessError(f"Could not run {curl_bin}: {exc}", details={"curl_bin": curl_bin}) from exc
    return result.stdout
