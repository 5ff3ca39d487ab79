# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 Darkmine Pty Ltd

# This file is part of gefparse.

# gefparse is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# gefparse is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with gefparse.  If not, see <https://www.gnu.org/licenses/>.


"""Split GEF text into its header map and raw data block.

A GEF file is a block of ``#KEYWORD= value, value, ...`` lines terminated
by ``#EOH=``, followed by the measurement data. Repeated keywords (one
COLUMNINFO line per column, one MEASUREMENTVAR per variable) become one row
each in the header map, in file order.
"""

import logging
from collections import namedtuple

from gefparse.errors import TokenizerError

logger = logging.getLogger(__name__)

RawGef = namedtuple("RawGef", ["headers", "data"])

END_OF_HEADER = "EOH"

# Keywords whose value is a single separator character that may itself be a comma
_SEPARATOR_KEYWORDS = {"COLUMNSEPARATOR", "RECORDSEPARATOR"}


def decode_gef_bytes(data, encoding="utf-8", fallback_encoding="cp1252"):
    """Decode raw file bytes, tolerating the Windows-1252 bytes common in older GEF files.

    Tries ``encoding`` first, then ``fallback_encoding``; if both fail the
    primary encoding is used with replacement characters so the parse can
    still proceed.
    """
    if isinstance(data, str):
        return data
    try:
        return data.decode(encoding)
    except UnicodeDecodeError:
        pass
    if fallback_encoding:
        try:
            text = data.decode(fallback_encoding)
            logger.info("Decoded GEF content as %s after %s failed", fallback_encoding, encoding)
            return text
        except UnicodeDecodeError:
            pass
    logger.warning("GEF content is not valid %s; undecodable bytes were replaced", encoding)
    return data.decode(encoding, errors="replace")


def _split_header_line(line):
    body = line[1:]
    key, sep, value = body.partition("=")
    key = key.strip().upper()
    if not sep:
        return key, []
    if key in _SEPARATOR_KEYWORDS:
        return key, [value.strip() or value]
    return key, [token.strip() for token in value.split(",")]


def tokenize(text):
    """Return a :class:`RawGef` with the header map and data block of ``text``."""
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = text.splitlines()

    headers = {}
    data_start = None
    for index, line in enumerate(lines):
        stripped = line.strip()
        if not stripped:
            continue
        if not stripped.startswith("#"):
            # Data without a closing #EOH line
            data_start = index
            break
        key, tokens = _split_header_line(stripped)
        if key == END_OF_HEADER:
            data_start = index + 1
            break
        if not key:
            continue
        headers.setdefault(key, []).append(tokens)

    if not headers:
        raise TokenizerError("No GEF header lines found")
    if data_start is None:
        logger.debug("GEF text has no #EOH marker and no data block")
        data_start = len(lines)

    return RawGef(headers=headers, data="\n".join(lines[data_start:]))
