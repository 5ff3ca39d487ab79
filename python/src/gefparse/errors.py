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


"""Exception classes raised by gefparse."""


class GefError(Exception):
    """Base class for errors that stop the parse of a single GEF file."""
    pass


class TokenizerError(GefError):
    """Raised when the text cannot be split into a GEF header and data block."""
    pass


class UnsupportedFileType(GefError):
    """Raised for report types gefparse does not interpret (dissipation, sieve)."""

    def __init__(self, reason, report_code=None):
        self.reason = reason
        self.report_code = report_code
        message = reason if report_code is None else f"{reason}: {report_code}"
        super().__init__(message)


class ReprojectionError(GefError):
    """Raised by a projector when a coordinate cannot be transformed."""
    pass
