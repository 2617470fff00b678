"""Environment utilities for resolving secret files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import MutableMapping, Optional

from consul_health.shared.logging import get_logger

logger = get_logger(__name__)

SECRET_FILE_SUFFIX = "_FILE"


def load_secret_file_variables(
    environ: Optional[MutableMapping[str, str]] = None,
) -> None:
    """
    Resolve environment variables that follow Docker secret conventions.

    ``CONSUL_HTTP_TOKEN_FILE=/run/secrets/consul`` exposes the file
    contents as ``CONSUL_HTTP_TOKEN`` unless that variable is already set.
    Unreadable files are logged and skipped.
    """

    env = os.environ if environ is None else environ

    for key, file_path in list(env.items()):
        if not key.endswith(SECRET_FILE_SUFFIX) or not file_path:
            continue
        target_key = key[: -len(SECRET_FILE_SUFFIX)]
        if env.get(target_key):
            continue
        try:
            env[target_key] = Path(file_path).read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                "env.secret_file.load_failed",
                key=key,
                path=file_path,
                error=str(exc),
            )


load_secret_file_variables()
