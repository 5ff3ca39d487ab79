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


"""Top-level GEF parsing.

``parse_gef`` runs one file through the pipeline: tokenize, parse headers,
detect the report type, decode the data block (CPT rows with depth
correction, or BORE layers and specimens), then build warnings and
processed metadata. Only unsupported report types and tokenizer failures
raise; everything else is reported as warnings on the result.
"""

import logging
from collections.abc import Mapping
from pathlib import Path

from gefparse.config import ParseConfig
from gefparse.datamodel import FileType
from gefparse.errors import GefError, TokenizerError

from .axes import detect_chart_axes
from .bore import parse_bore_data, parse_bore_specimens
from .cpt import parse_cpt_data, parse_pre_excavation_layers
from .depth import add_computed_depth_columns
from .detect import detect_file_type, detect_headers_extension
from .headers import parse_headers
from .metadata import process_metadata
from .model import GefBoreData, GefCptData
from .tokenizer import decode_gef_bytes, tokenize
from .validate import generate_warnings, merge_warnings, with_filename

logger = logging.getLogger(__name__)


def _unpack(raw):
    if isinstance(raw, Mapping):
        headers, data = raw.get("headers"), raw.get("data")
    else:
        headers, data = raw.headers, raw.data
    if headers is None:
        raise TokenizerError("Tokenizer returned no headers")
    headers = {str(key).strip().upper(): [list(row) for row in rows] for key, rows in headers.items()}
    return headers, data or ""


def _report_code(raw_headers):
    rows = raw_headers.get("REPORTCODE") or []
    if rows and rows[0] and rows[0][0]:
        return rows[0][0]
    return None


def parse_gef(text, filename="", tokenizer=None, projector=None, config=None):
    """Parse GEF text into a :class:`GefCptData` or :class:`GefBoreData`.

    ``tokenizer`` and ``projector`` default to :func:`gefparse.gef.tokenizer.tokenize`
    and :func:`gefparse.coordinates.project`.
    """
    config = config or ParseConfig()
    tokenizer = tokenizer or tokenize
    try:
        raw = tokenizer(text)
    except GefError:
        raise
    except Exception as exc:
        raise TokenizerError(f"Could not tokenize {filename or 'GEF text'}: {exc}") from exc
    raw_headers, data_block = _unpack(raw)

    file_type = detect_file_type(_report_code(raw_headers))
    headers, header_warnings = parse_headers(raw_headers, config.default_coordinate_system)
    header_warnings = with_filename(header_warnings, filename)
    logger.debug("Parsing %s as %s", filename, file_type.value)

    if file_type is FileType.BORE:
        layers, headers = parse_bore_data(data_block, headers)
        specimens = parse_bore_specimens(headers)
        warnings = merge_warnings(
            header_warnings,
            generate_warnings(filename, headers, raw_headers, file_type=file_type, config=config),
        )
        processed = process_metadata(filename, file_type, headers, config=config, projector=projector)
        return GefBoreData(layers, headers, specimens=specimens, warnings=warnings, processed=processed)

    rows = parse_cpt_data(data_block, headers)
    data = add_computed_depth_columns(rows, headers.column_info, headers.z_id, headers.measurement_var)
    warnings = merge_warnings(
        header_warnings,
        generate_warnings(filename, headers, raw_headers, data=data, file_type=file_type, config=config),
    )
    processed = process_metadata(
        filename,
        file_type,
        headers,
        config=config,
        projector=projector,
        extension=detect_headers_extension(headers),
    )
    return GefCptData(
        data,
        headers,
        chart_axes=detect_chart_axes(headers.column_info, data, headers.z_id),
        pre_excavation_layers=parse_pre_excavation_layers(headers),
        warnings=warnings,
        processed=processed,
    )


def parse_gef_bytes(content, filename="", tokenizer=None, projector=None, config=None):
    """Decode raw bytes (UTF-8, falling back to Windows-1252) and parse them."""
    config = config or ParseConfig()
    text = decode_gef_bytes(content, config.encoding, config.fallback_encoding)
    return parse_gef(text, filename, tokenizer=tokenizer, projector=projector, config=config)


def parse_gef_file(path, tokenizer=None, projector=None, config=None):
    path = Path(path)
    return parse_gef_bytes(path.read_bytes(), path.name, tokenizer=tokenizer, projector=projector, config=config)


def try_parse_gef(text, filename="", **kwargs):
    """Like :func:`parse_gef` but returns ``(result, None)`` or ``(None, error)``.

    Only :class:`gefparse.errors.GefError` is captured, so one failing file
    in a batch never stops the others.
    """
    try:
        if isinstance(text, (bytes, bytearray)):
            return parse_gef_bytes(bytes(text), filename, **kwargs), None
        return parse_gef(text, filename, **kwargs), None
    except GefError as exc:
        logger.warning("Could not parse %s: %s", filename, exc)
        return None, exc
