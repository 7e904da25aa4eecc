"""Shared helpers: logging setup and id generation."""

# Court Rotation
# Copyright (C) 2025  Court Rotation developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import sys
import uuid

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _configure_root() -> None:
    global _configured
    if _configured:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger("courtrotation")
    root.addHandler(handler)
    root.setLevel(logging.WARNING)
    _configured = True


def setup_logger(name: str) -> logging.Logger:
    """Return the module logger for ``name``.

    All package loggers hang off the ``courtrotation`` logger, which gets a
    single stderr handler the first time any logger is requested.
    """
    _configure_root()
    return logging.getLogger(name)


def set_log_level(level: int) -> None:
    """Set the level of the package logger (used by the CLI ``--verbose``)."""
    _configure_root()
    logging.getLogger("courtrotation").setLevel(level)


def generate_id(prefix: str) -> str:
    """Generate a short unique id, e.g. ``guest-1f2e3d4c``."""
    return f"{prefix}-{uuid.uuid4().hex[:8]}"
