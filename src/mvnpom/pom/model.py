# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the typed model of a Maven POM file.

Every record field that is read from the POM carries an :class:`XmlBinding` in its
dataclass metadata. The binding holds the dotted tag path of the field relative to the
element of the enclosing record, e.g. ``dependencies.dependency`` for the ``<dependency>``
children of the ``<dependencies>`` container. The POM parser walks these bindings to
decode a document, so the model below is the single place where the POM schema is declared.

Decoding rules:

* Element text and property values are stripped of surrounding whitespace by default.
  Set ``strip_text = False`` in the ``[pomparser]`` section of ``defaults.ini`` to keep it.
* If a text or record element is repeated, the last occurrence wins. The fields of a repeated
  record element, e.g. two ``<parent>`` elements, are not merged: only the last one is decoded.
* Items of repeated containers are concatenated in document order.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

#: The key of the XML binding in the dataclass field metadata.
XML_BINDING = "xml_binding"


class FieldKind(str, Enum):
    """The kinds of values a record field can be decoded into."""

    #: The text content of a single element.
    TEXT = "text"

    #: A nested record decoded from a single element.
    RECORD = "record"

    #: A list of records, one per repeated item element.
    LIST = "list"

    #: A mapping from the tag names of arbitrary child elements to their text content.
    MAPPING = "mapping"


@dataclass(frozen=True)
class XmlBinding:
    """The binding of a record field to the XML element(s) it is decoded from."""

    #: The dotted tag path relative to the element of the enclosing record.
    path: str

    #: The kind of value the field holds.
    kind: FieldKind

    #: The record type of RECORD and LIST fields.
    record_type: type | None = None

    @property
    def tags(self) -> list[str]:
        """Return the local tag names of the path."""
        return self.path.split(".")


def text_field(path: str) -> Any:
    """Declare a string field decoded from the text of the element at ``path``."""
    return field(default="", metadata={XML_BINDING: XmlBinding(path, FieldKind.TEXT)})


def record_field(path: str, record_type: type) -> Any:
    """Declare a nested record field decoded from the element at ``path``."""
    return field(default_factory=record_type, metadata={XML_BINDING: XmlBinding(path, FieldKind.RECORD, record_type)})


def list_field(path: str, record_type: type) -> Any:
    """Declare a list field with one record per element matching ``path``."""
    return field(default_factory=list, metadata={XML_BINDING: XmlBinding(path, FieldKind.LIST, record_type)})


def mapping_field(path: str) -> Any:
    """Declare a mapping field decoded from the children of the element at ``path``."""
    return field(default_factory=dict, metadata={XML_BINDING: XmlBinding(path, FieldKind.MAPPING)})


def format_gav(group_id: str, artifact_id: str, version: str) -> str:
    """Return the ``group:artifact:version`` string of the coordinates."""
    return f"{group_id}:{artifact_id}:{version}"


@dataclass(frozen=True)
class Exclusion:
    """A transitive dependency to suppress, declared in ``<exclusion>``."""

    #: The group id of the excluded artifact.
    group_id: str = text_field("groupId")

    #: The artifact id of the excluded artifact.
    artifact_id: str = text_field("artifactId")


@dataclass(frozen=True)
class Dependency:
    """A ``<dependency>`` declared directly in the project or in its dependency management."""

    #: The group id of the dependency.
    group_id: str = text_field("groupId")

    #: The artifact id of the dependency.
    artifact_id: str = text_field("artifactId")

    #: The version or version range, possibly an unresolved ``${...}`` expression.
    version: str = text_field("version")

    #: The classifier, e.g. ``sources``.
    classifier: str = text_field("classifier")

    #: The artifact type, e.g. ``pom`` for BOM imports.
    type: str = text_field("type")

    #: The scope, e.g. ``test``.
    scope: str = text_field("scope")

    #: The transitive dependencies to suppress.
    exclusions: list[Exclusion] = list_field("exclusions.exclusion", Exclusion)

    @property
    def gav(self) -> str:
        """Return the ``group:artifact:version`` string of the dependency."""
        return format_gav(self.group_id, self.artifact_id, self.version)


@dataclass(frozen=True)
class DependencyManagement:
    """The ``<dependencyManagement>`` block.

    The dependencies listed here only declare defaults. They do not add dependency edges.
    """

    #: The managed dependencies.
    dependencies: list[Dependency] = list_field("dependencies.dependency", Dependency)


@dataclass(frozen=True)
class Repository:
    """An artifact repository declared in ``<repositories>``."""

    #: The repository id.
    id: str = text_field("id")

    #: The human-readable name.
    name: str = text_field("name")

    #: The repository URL.
    url: str = text_field("url")


@dataclass(frozen=True)
class PluginRepository:
    """A plugin repository declared in ``<pluginRepositories>``."""

    #: The repository id.
    id: str = text_field("id")

    #: The human-readable name.
    name: str = text_field("name")

    #: The repository URL.
    url: str = text_field("url")


@dataclass(frozen=True)
class Plugin:
    """A build ``<plugin>``.

    The ``<executions>`` and ``<configuration>`` blocks of a plugin are not modelled
    and are discarded during decoding.
    """

    #: The group id of the plugin.
    group_id: str = text_field("groupId")

    #: The artifact id of the plugin.
    artifact_id: str = text_field("artifactId")

    #: The version of the plugin.
    version: str = text_field("version")

    @property
    def gav(self) -> str:
        """Return the ``group:artifact:version`` string of the plugin."""
        return format_gav(self.group_id, self.artifact_id, self.version)


@dataclass(frozen=True)
class Build:
    """The ``<build>`` block of a project or a profile."""

    #: The build plugins.
    plugins: list[Plugin] = list_field("plugins.plugin", Plugin)


@dataclass(frozen=True)
class Profile:
    """A build ``<profile>``. Profiles are stored but never activated."""

    #: The profile id.
    id: str = text_field("id")

    #: The build configuration of the profile.
    build: Build = record_field("build", Build)


@dataclass(frozen=True)
class Parent:
    """The ``<parent>`` reference of a project. All fields are empty if the project has no parent."""

    #: The group id of the parent project.
    group_id: str = text_field("groupId")

    #: The artifact id of the parent project.
    artifact_id: str = text_field("artifactId")

    #: The version of the parent project.
    version: str = text_field("version")

    @property
    def gav(self) -> str:
        """Return the ``group:artifact:version`` string of the parent."""
        return format_gav(self.group_id, self.artifact_id, self.version)


@dataclass(frozen=True)
class Project:
    """The root ``<project>`` of a POM file.

    Text values, including property values, are stripped of surrounding whitespace unless
    ``strip_text`` is disabled in the ``[pomparser]`` section of ``defaults.ini``.
    """

    #: The POM model version, e.g. ``4.0.0``.
    model_version: str = text_field("modelVersion")

    #: The parent reference.
    parent: Parent = record_field("parent", Parent)

    #: The group id of the project. It is empty if the project inherits it from its parent.
    group_id: str = text_field("groupId")

    #: The artifact id of the project.
    artifact_id: str = text_field("artifactId")

    #: The version of the project. It is empty if the project inherits it from its parent.
    version: str = text_field("version")

    #: The packaging, e.g. ``jar`` or ``pom``.
    packaging: str = text_field("packaging")

    #: The display name.
    name: str = text_field("name")

    #: The artifact repositories.
    repositories: list[Repository] = list_field("repositories.repository", Repository)

    #: The build properties as declared, without interpolation.
    properties: dict[str, str] = mapping_field("properties")

    #: The dependency management block.
    dependency_management: DependencyManagement = record_field("dependencyManagement", DependencyManagement)

    #: The direct dependencies.
    dependencies: list[Dependency] = list_field("dependencies.dependency", Dependency)

    #: The build profiles.
    profiles: list[Profile] = list_field("profiles.profile", Profile)

    #: The build configuration.
    build: Build = record_field("build", Build)

    #: The plugin repositories.
    plugin_repositories: list[PluginRepository] = list_field(
        "pluginRepositories.pluginRepository", PluginRepository
    )

    @property
    def gav(self) -> str:
        """Return the ``group:artifact:version`` string of the project as declared."""
        return format_gav(self.group_id, self.artifact_id, self.version)

    def get_property(self, key: str) -> tuple[str, bool]:
        """Look up a build property ignoring case. See :func:`get_property`."""
        return get_property(self, key)


def get_property(project: Project, key: str) -> tuple[str, bool]:
    """Look up a build property of the project ignoring case.

    The properties are scanned in the order they are declared in the POM, so if several
    keys differ only by case, the value of the first declared one is returned.
    Values are returned as decoded, i.e. stripped of surrounding whitespace unless
    ``strip_text`` is disabled in ``defaults.ini``.

    Parameters
    ----------
    project : Project
        The decoded project.
    key : str
        The property name, e.g. ``project.build.sourceEncoding``.

    Returns
    -------
    tuple[str, bool]
        The value and ``True`` if the property exists, or an empty string and ``False`` if not.

    Examples
    --------
    >>> project = Project(properties={"java.version": "11"})
    >>> get_property(project, "JAVA.VERSION")
    ('11', True)
    >>> get_property(project, "nonexistent")
    ('', False)
    """
    target = key.lower()
    for name, value in project.properties.items():
        if name.lower() == target:
            return value, True
    return "", False
