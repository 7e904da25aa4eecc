"""JSON file storage for session days.

Each session day is stored in its own file, ``session-YYYY-MM-DD.json``,
holding the session state and its undo history. A file that cannot be read
or does not match the expected shape is treated as if no session had been
saved.
"""

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

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from courtrotation.constants import SAVE_FILE_EXTENSION, SAVE_FILE_PREFIX
from courtrotation.exceptions import (
    CourtRotationException,
    FileLoadException,
    FileSaveException,
)
from courtrotation.models.session.session import Session
from courtrotation.utils import setup_logger
from courtrotation.utils.validation import validate_session_date_strict

logger = setup_logger(__name__)


class SessionStore:
    """Loads and saves sessions in a directory, one file per day."""

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def path_for(self, session_date: str) -> Path:
        """File path for a session day (the date is normalized first)."""
        day = validate_session_date_strict(session_date)
        return self.directory / f"{SAVE_FILE_PREFIX}{day}{SAVE_FILE_EXTENSION}"

    def saved_dates(self) -> List[str]:
        """Session days that have a saved file, oldest first."""
        if not self.directory.is_dir():
            return []
        dates = []
        for path in self.directory.glob(f"{SAVE_FILE_PREFIX}*{SAVE_FILE_EXTENSION}"):
            dates.append(path.stem[len(SAVE_FILE_PREFIX):])
        return sorted(dates)

    def _read(self, path: Path) -> Dict[str, Any]:
        """Read and parse a session file.

        Raises:
            FileLoadException: If the file cannot be read or is not a JSON object
        """
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise FileLoadException(f"Could not read {path}: {e}") from e
        if not isinstance(data, dict):
            raise FileLoadException(f"Expected a JSON object in {path}")
        return data

    def load(self, session_date: str) -> Optional[Session]:
        """Load the saved session for a day.

        Returns:
            The session, or None when nothing usable is saved
        """
        path = self.path_for(session_date)
        if not path.exists():
            return None

        try:
            session = Session.from_dict(self._read(path))
        except FileLoadException as e:
            logger.warning("Ignoring unreadable session file: %s", e)
            return None
        except (
            KeyError,
            ValueError,
            TypeError,
            OverflowError,
            CourtRotationException,
        ) as e:
            logger.warning("Ignoring malformed session file %s: %s", path, e)
            return None

        if session.session_date != validate_session_date_strict(session_date):
            logger.warning(
                "Ignoring session file %s: it belongs to %s",
                path,
                session.session_date,
            )
            return None

        logger.info(f"Loaded session {session.session_date} from {path}")
        return session

    def load_or_create(
        self, session_date: str, day_seed: Optional[str] = None
    ) -> Session:
        """Load the day's session, or start a new one with the default roster."""
        session = self.load(session_date)
        if session is None:
            session = Session.new(session_date=session_date, day_seed=day_seed)
        return session

    def save(self, session: Session) -> Path:
        """Write a session to its day file, replacing any previous save.

        Raises:
            FileSaveException: If the file cannot be written
        """
        path = self.path_for(session.session_date)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.directory, prefix=".tmp-", suffix=SAVE_FILE_EXTENSION
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(session.to_dict(), f, indent=2, ensure_ascii=False)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise FileSaveException(f"Could not save session to {path}: {e}") from e

        logger.info(f"Saved session {session.session_date} to {path}")
        return path

    def delete(self, session_date: str) -> bool:
        """Delete a day's saved session.

        Returns:
            True if a file was removed
        """
        path = self.path_for(session_date)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise FileSaveException(f"Could not delete {path}: {e}") from e
        logger.info(f"Deleted saved session {session_date}")
        return True
