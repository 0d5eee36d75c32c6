# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module provides functions to manage default values."""

import configparser
import logging
import os
import pathlib
import shutil

from mvnpom.errors import ConfigurationError

logger: logging.Logger = logging.getLogger(__name__)


class ConfigParser(configparser.ConfigParser):
    """This class extends ConfigParser with useful methods."""

    def get_bool(self, section: str, item: str, fallback: bool) -> bool:
        """Return a boolean item from ``defaults.ini``.

        Parameters
        ----------
        section : str
            The section in ``defaults.ini``.
        item : str
            The boolean item.
        fallback : bool
            The value used when the section or the item does not exist.

        Returns
        -------
        bool
            The configured value.

        Raises
        ------
        ConfigurationError
            If the configured value is not a boolean.
        """
        try:
            return self.getboolean(section, item, fallback=fallback)
        except ValueError as error:
            raise ConfigurationError(f"The value of {item} in section [{section}] is not a boolean: {error}") from error


defaults = ConfigParser()


def load_defaults(user_config_path: str) -> bool:
    """Read the default values from ``defaults.ini`` file and store them in the defaults global object.

    Parameters
    ----------
    user_config_path : str
        The path to the user's defaults configuration file. It is ignored if it does not exist.

    Returns
    -------
    bool
        Return True if succeeded or False if failed.
    """
    curr_dir = pathlib.Path(__file__).parent.absolute()
    config_files = [os.path.join(curr_dir, "defaults.ini")]
    if user_config_path and os.path.exists(user_config_path):
        config_files.append(user_config_path)

    try:
        defaults.read(config_files, encoding="utf8")
        return True
    except (configparser.Error, ValueError) as error:
        logger.error("Failed to read the defaults.ini files.")
        logger.error(error)
        return False


def create_defaults(output_path: str, cwd_path: str) -> bool:
    """Create the ``defaults.ini`` file in the output directory for end users.

    Parameters
    ----------
    output_path : str
        The path where the ``defaults.ini`` will be created.
    cwd_path : str
        The path to the current working directory.

    Returns
    -------
    bool
        Return True if succeeded or False if failed.
    """
    src_path = os.path.join(pathlib.Path(__file__).parent.absolute(), "defaults.ini")

    # ConfigParser.write does not preserve the comments, so copy the file directly.
    dest_path = os.path.join(output_path, "defaults.ini")
    try:
        shutil.copy2(src_path, dest_path)
        logger.info(
            "Dumped the default values in %s.",
            os.path.relpath(dest_path, cwd_path),
        )
        return True
    except shutil.Error as error:
        logger.error("Failed to create %s: %s.", os.path.relpath(dest_path, cwd_path), error)
        return False
    except OSError as error:
        logger.error(error)
        return False
