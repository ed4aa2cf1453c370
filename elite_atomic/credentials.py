"""
API token acquisition.

The token is read either from a file given on the command line or from one
line of stdin. It is trimmed and handed straight to the API client; it is
never logged or written anywhere.
"""

import logging
import sys
from pathlib import Path
from typing import TextIO

from elite_atomic.errors import CredentialReadError

logger = logging.getLogger(__name__)

PROMPT_HINT = (
    "(Note: if you don't want to enter your API token every time, save it to a "
    "file and pass the filepath as first argument to the program.)"
)


def read_token_file(path: Path) -> str:
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CredentialReadError(f"Unable to read file {path}: {e}") from e

    logger.debug("Read API token from %s", path)

    return content


def prompt_for_token(stdin: TextIO | None = None, stdout: TextIO | None = None) -> str:
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout

    print(PROMPT_HINT, file=stdout)
    print("API token:", file=stdout, flush=True)

    try:
        return stdin.readline()
    except (OSError, ValueError) as e:
        raise CredentialReadError(f"Unable to read token from stdin: {e}") from e


def read_token(
    path: Path | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> str:
    """
    Read the API token from `path` if given, otherwise prompt on stdin.

    :return: token with surrounding whitespace removed
    :raises CredentialReadError: when the source is unreadable or the token is empty
    """
    if path is not None:
        raw = read_token_file(path)
    else:
        raw = prompt_for_token(stdin, stdout)

    token = raw.strip()
    if not token:
        raise CredentialReadError("API token is empty")

    return token
