# Copyright (C) 2026 Darkmine Pty Ltd
# SPDX-License-Identifier: GPL-3.0-or-later

from importlib.metadata import version, PackageNotFoundError

from .config import ParseConfig
from .datamodel import Extension, FileType
from .errors import GefError, ReprojectionError, TokenizerError, UnsupportedFileType
from .gef.parse import parse_gef, parse_gef_bytes, parse_gef_file, try_parse_gef

try:
    __version__ = version("gefparse")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
	"Extension",
	"FileType",
	"GefError",
	"ParseConfig",
	"ReprojectionError",
	"TokenizerError",
	"UnsupportedFileType",
	"parse_gef",
	"parse_gef_bytes",
	"parse_gef_file",
	"try_parse_gef",
]
