"""Exceptions for use in Court Rotation"""

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


# ========== Base Application Exception ==========


class CourtRotationException(Exception):
    """Base exception for all Court Rotation errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(CourtRotationException):
    """Base exception for round generation errors."""

    pass


class InsufficientPlayersException(PairingException):
    """Raised when fewer than four participants are eligible to play."""

    def __init__(self, available: int):
        self.available = available
        super().__init__(
            f"At least 4 selected participants who are not away are required "
            f"(have {available})"
        )


class NoCandidateException(PairingException):
    """Raised when every candidate grouping was rejected as a rematch."""

    pass


class InvalidRoundException(PairingException):
    """Raised when a team or round record is malformed."""

    pass


# ========== Participant Exceptions ==========


class ParticipantException(CourtRotationException):
    """Base exception for participant-related errors."""

    pass


class ParticipantNotFoundException(ParticipantException):
    """Raised when a requested participant cannot be found."""

    def __init__(self, participant_id: str):
        self.participant_id = participant_id
        super().__init__(f"No participant with id '{participant_id}'")


class DuplicateParticipantException(ParticipantException):
    """Raised when attempting to add a participant whose id already exists."""

    pass


class InvalidParticipantStateException(ParticipantException):
    """Raised when a roster toggle is not allowed in the participant's state."""

    pass


class InvalidParticipantDataException(ParticipantException):
    """Raised when participant data is invalid or incomplete."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(CourtRotationException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass


class InvalidSaveDataException(ResourceException):
    """Raised when saved data does not have the expected shape."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(CourtRotationException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
