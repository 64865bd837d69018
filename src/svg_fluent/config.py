"""Settings for loading svg files.

:author: Shay Hill
:created: 2025-10-20
"""

from __future__ import annotations

import dataclasses

# 10 MiB. Larger files are rejected before they are read.
_MAX_FILE_BYTES = 10 * 1024 * 1024


@dataclasses.dataclass(frozen=True)
class AssemblerConfig:
    """How SvgAssembler reads files and reacts to sanitizer failures.

    :param max_file_bytes: refuse to read files larger than this. None for no limit.
    :param encoding: text encoding of svg files
    :param raise_on_sanitizer_error: if the sanitizer raises (malformed markup,
        entity declarations), raise a SanitizationError. The default, False, logs a
        warning and renders an empty string.
    """

    max_file_bytes: int | None = _MAX_FILE_BYTES
    encoding: str = "utf-8"
    raise_on_sanitizer_error: bool = False


DEFAULT_CONFIG = AssemblerConfig()
