#
# SPDX-FileCopyrightText: 2023 John Samuel <johnsamuelwrites@gmail.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
#


class ConversionError(Exception):
    """Base class for every error that aborts a conversion run."""


class ConfigurationError(ConversionError):
    """Raised when the command line does not describe a usable run."""


class InputError(ConversionError):
    """Raised when an input source cannot be read or decoded."""


class EmptyInputError(InputError):
    """Raised when a primary input produced no data."""


class TocError(ConversionError):
    """Raised when the heading structure cannot be turned into a table of contents."""


class OutputError(ConversionError):
    """Raised when the destination cannot be opened or written to."""
