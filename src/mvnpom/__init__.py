# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Decode Maven POM files into an immutable, typed project model."""

import os

from mvnpom.parsers.pomparser import parse_pom_file, parse_pom_string
from mvnpom.pom.model import get_property

# The version of this package.
__version__ = "0.1.0"

# The path to the mvnpom package.
MVNPOM_PATH = os.path.dirname(os.path.abspath(__file__))

parse = parse_pom_file

__all__ = ["parse", "parse_pom_file", "parse_pom_string", "get_property"]
