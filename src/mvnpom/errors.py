# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains error classes for mvnpom."""


class MvnPomError(Exception):
    """The base class for mvnpom errors."""


class ConfigurationError(MvnPomError):
    """Happens when there is an error in the configuration (.ini) file."""


class FileAccessError(MvnPomError):
    """Happens when a POM file does not exist or cannot be read."""

    def __init__(self, message: str, path: str, cause: OSError) -> None:
        """Initialize the error.

        Parameters
        ----------
        message : str
            The error message.
        path : str
            The path of the file that could not be read.
        cause : OSError
            The underlying I/O error.
        """
        super().__init__(message)
        self.path = path
        self.cause = cause


class DecodeError(MvnPomError):
    """Happens when the content of a POM file cannot be decoded into a project.

    Reasons can include:
        * the content is not well-formed XML
        * the content uses XML constructs forbidden by the configuration (e.g. entities)
        * the root element is not ``<project>``
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        """Initialize the error.

        Parameters
        ----------
        message : str
            The error message.
        cause : Exception | None
            The underlying XML or encoding error, or ``None`` if the XML was parsed but is not a POM.
        """
        super().__init__(message)
        self.cause = cause
