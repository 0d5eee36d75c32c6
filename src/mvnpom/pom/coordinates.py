# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module builds Package URLs (PURLs) from the Maven coordinates of a decoded POM.

For reference, see https://github.com/package-url/purl-spec/blob/master/PURL-TYPES.rst#maven.
The coordinates are used as declared: versions inherited from a parent or given as
``${...}`` expressions are not resolved.
"""

import logging

from packageurl import PackageURL

from mvnpom.config.defaults import defaults
from mvnpom.pom.model import Dependency, Project

logger: logging.Logger = logging.getLogger(__name__)

#: The artifact type Maven assumes when none is declared.
MAVEN_DEFAULT_TYPE = "jar"


def to_purl(
    group_id: str,
    artifact_id: str,
    version: str = "",
    type_: str = "",
    classifier: str = "",
) -> PackageURL | None:
    """Create a Maven PackageURL from artifact coordinates.

    Parameters
    ----------
    group_id : str
        The group id of the artifact.
    artifact_id : str
        The artifact id of the artifact.
    version : str
        The version of the artifact. The PURL has no version if this is empty.
    type_ : str
        The artifact type. It is only recorded as a qualifier if it is not ``jar``.
    classifier : str
        The classifier of the artifact.

    Returns
    -------
    PackageURL | None
        The Maven PackageURL, or ``None`` if the group id or the artifact id is empty.

    Examples
    --------
    >>> to_purl("org.apache.commons", "commons-lang3", "3.14.0").to_string()
    'pkg:maven/org.apache.commons/commons-lang3@3.14.0'
    >>> to_purl("org.junit", "junit-bom", "5.10.1", type_="pom").to_string()
    'pkg:maven/org.junit/junit-bom@5.10.1?type=pom'
    """
    if not group_id or not artifact_id:
        logger.debug("Cannot create a PURL from incomplete coordinates %s:%s.", group_id, artifact_id)
        return None

    qualifiers = {}
    if classifier:
        qualifiers["classifier"] = classifier
    if type_ and type_ != MAVEN_DEFAULT_TYPE:
        qualifiers["type"] = type_

    return PackageURL(
        type="maven",
        namespace=group_id,
        name=artifact_id,
        version=version or None,
        qualifiers=qualifiers or None,
    )


def dependency_purl(dependency: Dependency) -> PackageURL | None:
    """Create the PackageURL of a dependency.

    A dependency without ``<type>`` gets the type configured in ``[pomparser.purl] default_type``.
    """
    type_ = dependency.type or defaults.get("pomparser.purl", "default_type", fallback=MAVEN_DEFAULT_TYPE)
    return to_purl(dependency.group_id, dependency.artifact_id, dependency.version, type_, dependency.classifier)


def project_purl(project: Project) -> PackageURL | None:
    """Create the PackageURL of the project from its own coordinates and packaging."""
    return to_purl(project.group_id, project.artifact_id, project.version, project.packaging)
