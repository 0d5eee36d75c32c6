# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This is the main entrypoint to run mvnpom."""

import argparse
import dataclasses
import json
import logging
import os
import sys
from importlib import metadata as importlib_metadata

from mvnpom.config.defaults import create_defaults, load_defaults
from mvnpom.errors import ConfigurationError, DecodeError, FileAccessError
from mvnpom.parsers.pomparser import parse_pom_file
from mvnpom.pom.coordinates import dependency_purl, project_purl
from mvnpom.pom.model import Project, get_property

logger: logging.Logger = logging.getLogger(__name__)


def load_project(pom_path: str) -> Project:
    """Decode the POM file, exiting with an error code if that fails."""
    try:
        return parse_pom_file(pom_path)
    except FileAccessError as error:
        logger.error("Cannot access %s: %s", error.path, error.cause)
        sys.exit(os.EX_NOINPUT)
    except DecodeError as error:
        logger.error("Unable to decode %s. Reason: %s", pom_path, error)
        sys.exit(os.EX_DATAERR)
    except ConfigurationError as error:
        logger.error(error)
        sys.exit(os.EX_CONFIG)


def parse_pom(parse_args: argparse.Namespace) -> int:
    """Print the decoded project as JSON."""
    project = load_project(parse_args.pom)
    output = dataclasses.asdict(project)

    if parse_args.purls:
        purl = project_purl(project)
        output["purl"] = purl.to_string() if purl else ""
        for dependency, dependency_output in zip(project.dependencies, output["dependencies"]):
            dep_purl = dependency_purl(dependency)
            dependency_output["purl"] = dep_purl.to_string() if dep_purl else ""

    print(json.dumps(output, indent=4))
    return os.EX_OK


def print_property(property_args: argparse.Namespace) -> int:
    """Print the value of a build property, matching its name ignoring case."""
    project = load_project(property_args.pom)
    value, found = get_property(project, property_args.key)
    if not found:
        logger.error("Property %s is not declared in %s.", property_args.key, property_args.pom)
        return 1

    print(value)
    return os.EX_OK


def perform_action(action_args: argparse.Namespace) -> None:
    """Perform the indicated action of mvnpom."""
    match action_args.action:
        case "parse":
            sys.exit(parse_pom(action_args))
        case "get-property":
            sys.exit(print_property(action_args))
        case "dump-defaults":
            if not create_defaults(action_args.output_dir, os.getcwd()):
                sys.exit(os.EX_OSERR)
            sys.exit(os.EX_OK)
        case _:
            logger.error("mvnpom does not support command option %s.", action_args.action)
            sys.exit(os.EX_USAGE)


def main(argv: list[str] | None = None) -> None:
    """Execute mvnpom as a standalone command-line tool.

    Parameters
    ----------
    argv: list[str] | None
        Command-line arguments.
        If ``argv`` is ``None``, argparse automatically looks at ``sys.argv``.
        Hence, we set ``argv = None`` by default.
    """
    main_parser = argparse.ArgumentParser(prog="mvnpom")

    main_parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {importlib_metadata.version('mvnpom')}",
        help="Show mvnpom's version number and exit",
    )

    main_parser.add_argument(
        "-v",
        "--verbose",
        help="Run mvnpom with more debug logs",
        action="store_true",
    )

    main_parser.add_argument(
        "-dp",
        "--defaults-path",
        default="",
        help="The path to the defaults configuration file.",
    )

    # Add sub parsers for each action.
    sub_parser = main_parser.add_subparsers(dest="action", help="Run mvnpom <action> --help for help")

    # Decode a POM file and print it as JSON.
    parse_parser = sub_parser.add_parser(name="parse")
    parse_parser.add_argument("pom", type=str, help="The path to the POM file.")
    parse_parser.add_argument(
        "--purls",
        action="store_true",
        help="Add the Package URLs of the project and its dependencies to the output.",
    )

    # Look up a build property.
    property_parser = sub_parser.add_parser(name="get-property")
    property_parser.add_argument("pom", type=str, help="The path to the POM file.")
    property_parser.add_argument("key", type=str, help="The property name. The match ignores case.")

    # Dump the default values.
    dump_parser = sub_parser.add_parser(
        name="dump-defaults", description="Dumps the defaults.ini file to the output directory."
    )
    dump_parser.add_argument(
        "-o",
        "--output-dir",
        default=os.getcwd(),
        help="The directory where defaults.ini is written.",
    )

    args = main_parser.parse_args(argv)

    if not args.action:
        main_parser.print_help()
        sys.exit(os.EX_USAGE)

    if args.verbose:
        log_level = logging.DEBUG
        log_format = "%(asctime)s [%(name)s:%(funcName)s:%(lineno)d] [%(levelname)s] %(message)s"
    else:
        log_level = logging.INFO
        log_format = "%(asctime)s [%(levelname)s] %(message)s"

    # Logs go to stderr. Stdout carries the command output.
    st_handler = logging.StreamHandler(sys.stderr)
    logging.basicConfig(format=log_format, handlers=[st_handler], force=True, level=log_level)

    # Load the default values from defaults.ini files.
    if not load_defaults(args.defaults_path):
        logger.error("Exiting because the defaults configuration could not be loaded.")
        sys.exit(os.EX_NOINPUT)

    perform_action(args)


if __name__ == "__main__":
    main()
