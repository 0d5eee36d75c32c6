# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""
This module tests the POM parser.
"""

import dataclasses
import logging
import os
from pathlib import Path

import pytest

from mvnpom.config.defaults import defaults
from mvnpom.errors import DecodeError, FileAccessError
from mvnpom.parsers.pomparser import (
    decode_property_entries,
    fold_property_entries,
    parse_pom_element,
    parse_pom_file,
    parse_pom_string,
)
from mvnpom.pom.model import Build, Dependency, Exclusion, Parent, Plugin, PluginRepository, Project, Repository

RESOURCES_DIR = Path(__file__).parent.joinpath("resources")


def test_parse_valid_pom() -> None:
    """Test decoding a POM file that uses every supported section."""
    project = parse_pom_file(os.path.join(RESOURCES_DIR, "valid.xml"))

    assert project.model_version == "4.0.0"
    assert project.parent == Parent(group_id="org.example", artifact_id="example-parent", version="2.1.0")
    assert project.group_id == "org.example.app"
    assert project.artifact_id == "example-app"
    assert project.version == "1.0.0-SNAPSHOT"
    assert project.packaging == "war"
    assert project.name == "Example Application"

    assert project.repositories == [
        Repository(id="central", name="Maven Central", url="https://repo.maven.apache.org/maven2"),
        Repository(id="snapshots", name="Example Snapshots", url="https://repo.example.org/snapshots"),
    ]
    assert project.plugin_repositories == [
        PluginRepository(id="plugins", name="Example Plugins", url="https://repo.example.org/plugins"),
    ]

    assert project.properties == {
        "java.version": "11",
        "project.build.sourceEncoding": "UTF-8",
        "junit.version": "5.10.1",
        "empty.property": "",
    }

    assert project.dependency_management.dependencies == [
        Dependency(
            group_id="org.junit",
            artifact_id="junit-bom",
            version="${junit.version}",
            type="pom",
            scope="import",
        )
    ]

    assert len(project.dependencies) == 2
    commons, junit = project.dependencies
    assert commons.gav == "org.apache.commons:commons-lang3:3.14.0"
    assert commons.exclusions == [
        Exclusion(group_id="commons-logging", artifact_id="commons-logging"),
        Exclusion(group_id="log4j", artifact_id="log4j"),
    ]
    assert junit == Dependency(
        group_id="org.junit.jupiter",
        artifact_id="junit-jupiter",
        classifier="tests",
        type="test-jar",
        scope="test",
    )

    assert [profile.id for profile in project.profiles] == ["release", "no-build"]
    assert project.profiles[0].build.plugins == [
        Plugin(group_id="org.apache.maven.plugins", artifact_id="maven-gpg-plugin", version="3.1.0")
    ]
    assert project.profiles[1].build == Build()

    assert project.build.plugins == [
        Plugin(group_id="org.apache.maven.plugins", artifact_id="maven-compiler-plugin", version="3.11.0"),
        Plugin(artifact_id="maven-war-plugin"),
    ]


def test_parse_minimal_pom() -> None:
    """Test that a minimal POM only sets its coordinates and leaves every list empty."""
    project = parse_pom_file(RESOURCES_DIR.joinpath("minimal.xml"))

    assert project == Project(group_id="g", artifact_id="a", version="1.0")
    assert project.parent == Parent()
    for project_field in dataclasses.fields(Project):
        if isinstance(getattr(project, project_field.name), list):
            assert not getattr(project, project_field.name)
    assert project.properties == {}
    assert project.dependency_management.dependencies == []
    assert project.build.plugins == []


def test_parse_is_deterministic() -> None:
    """Test that decoding the same file twice gives equal but independent results."""
    first = parse_pom_file(RESOURCES_DIR.joinpath("valid.xml"))
    second = parse_pom_file(RESOURCES_DIR.joinpath("valid.xml"))

    assert first == second
    assert first.dependencies is not second.dependencies
    assert first.properties is not second.properties


def test_parse_missing_file() -> None:
    """Test that a missing file is reported with its path."""
    missing = os.path.join(RESOURCES_DIR, "does_not_exist.xml")
    with pytest.raises(FileAccessError) as exc_info:
        parse_pom_file(missing)

    assert exc_info.value.path == missing
    assert isinstance(exc_info.value.cause, FileNotFoundError)
    assert missing in str(exc_info.value)


def test_parse_directory() -> None:
    """Test that a path that cannot be read as a file is reported as a file access error."""
    with pytest.raises(FileAccessError):
        parse_pom_file(RESOURCES_DIR)


@pytest.mark.parametrize(
    "file_name",
    [
        pytest.param("invalid.xml", id="unclosed tag"),
        pytest.param("forbidden_entity.xml", id="entity declaration"),
        pytest.param("not_a_pom.xml", id="wrong root element"),
        pytest.param("unknown_encoding.xml", id="unknown encoding"),
    ],
)
def test_parse_invalid(file_name: str) -> None:
    """Test that undecodable files raise a decode error."""
    with pytest.raises(DecodeError):
        parse_pom_file(RESOURCES_DIR.joinpath(file_name))


def test_parse_invalid_keeps_cause() -> None:
    """Test that the decode error carries the underlying XML error."""
    with pytest.raises(DecodeError) as exc_info:
        parse_pom_string("<project><groupId>g</project>")

    assert exc_info.value.cause is not None
    assert exc_info.value.__cause__ is exc_info.value.cause


def test_parse_encoding_from_prolog() -> None:
    """Test that the file bytes are decoded using the encoding declared in the XML prolog."""
    project = parse_pom_file(RESOURCES_DIR.joinpath("latin1.xml"))
    assert project.name == "Café"


def test_parse_without_namespace() -> None:
    """Test that namespaced and plain POMs decode the same way."""
    namespaced = parse_pom_string(
        '<project xmlns="http://maven.apache.org/POM/4.0.0"><groupId>g</groupId><artifactId>a</artifactId></project>'
    )
    plain = parse_pom_string("<project><groupId>g</groupId><artifactId>a</artifactId></project>")
    assert namespaced == plain


def test_parse_properties_last_wins() -> None:
    """Test that a duplicated property keeps its last value."""
    project = parse_pom_string(
        """
        <project>
            <properties>
                <revision>1</revision>
                <revision>2</revision>
            </properties>
            <properties>
                <other>3</other>
            </properties>
        </project>
        """
    )
    assert project.properties == {"revision": "2", "other": "3"}


def test_parse_repeated_containers() -> None:
    """Test that the items of repeated containers are concatenated in document order."""
    project = parse_pom_string(
        """
        <project>
            <dependencies><dependency><artifactId>first</artifactId></dependency></dependencies>
            <dependencies><dependency><artifactId>second</artifactId></dependency></dependencies>
        </project>
        """
    )
    assert [dependency.artifact_id for dependency in project.dependencies] == ["first", "second"]


def test_parse_ignores_items_outside_containers() -> None:
    """Test that items are only taken from inside their container element."""
    project = parse_pom_string(
        """
        <project>
            <dependency><artifactId>stray</artifactId></dependency>
            <dependencies><other><artifactId>nested</artifactId></other></dependencies>
        </project>
        """
    )
    assert project.dependencies == []


def test_parse_scalar_last_wins() -> None:
    """Test that a repeated scalar element keeps its last value."""
    project = parse_pom_string("<project><version>1</version><version>2</version></project>")
    assert project.version == "2"


def test_parse_strips_text() -> None:
    """Test that surrounding whitespace is stripped from text by default."""
    project = parse_pom_string("<project><groupId>\n    g\n</groupId><properties><p> v </p></properties></project>")
    assert project.group_id == "g"
    assert project.properties == {"p": "v"}


def test_parse_keeps_text_when_configured() -> None:
    """Test that text is kept as is when stripping is disabled."""
    defaults.set("pomparser", "strip_text", "False")
    project = parse_pom_string("<project><groupId> g </groupId><properties><p> v </p></properties></project>")
    assert project.group_id == " g "
    assert project.properties == {"p": " v "}


def test_parse_entities_when_allowed() -> None:
    """Test that entity declarations are expanded when they are not forbidden."""
    defaults.set("pomparser", "forbid_entities", "False")
    project = parse_pom_file(RESOURCES_DIR.joinpath("forbidden_entity.xml"))
    assert project.group_id == "lol" * 10


def test_parse_forbid_dtd() -> None:
    """Test that a DOCTYPE declaration is rejected when DTDs are forbidden."""
    defaults.set("pomparser", "forbid_dtd", "True")
    with pytest.raises(DecodeError):
        parse_pom_string('<?xml version="1.0"?><!DOCTYPE project><project/>')


def test_parse_element() -> None:
    """Test parsing POM content into an XML element tree."""
    pom = parse_pom_element("<project><groupId>g</groupId></project>")
    assert pom.tag == "project"
    assert len(pom) == 1


def test_decode_property_entries() -> None:
    """Test that every child of a properties element is taken, in document order."""
    properties = parse_pom_element(
        """
        <properties xmlns="http://maven.apache.org/POM/4.0.0">
            <b>1</b>
            <!-- comment -->
            <a.b-c>2<nested>ignored</nested>3</a.b-c>
            <b>4</b>
        </properties>
        """
    )
    entries = decode_property_entries(properties)
    assert entries == [("b", "1"), ("a.b-c", "23"), ("b", "4")]
    assert fold_property_entries(entries) == {"b": "4", "a.b-c": "23"}


def test_parse_logs_discarded_plugin_blocks(caplog: pytest.LogCaptureFixture) -> None:
    """Test that the unmodelled configuration and executions of a plugin are reported as discarded."""
    with caplog.at_level(logging.DEBUG, logger="mvnpom"):
        parse_pom_file(RESOURCES_DIR.joinpath("valid.xml"))

    assert "Discarding unmapped element <configuration> of <plugin>." in caplog.text
    assert "Discarding unmapped element <executions> of <plugin>." in caplog.text


def test_parse_unknown_encoding() -> None:
    """Test that an unknown encoding in the XML prolog is a decode error carrying the lookup failure."""
    with pytest.raises(DecodeError) as exc_info:
        parse_pom_string(b'<?xml version="1.0" encoding="bogus"?><project/>')

    assert isinstance(exc_info.value.cause, LookupError)


def test_parse_record_last_wins() -> None:
    """Test that a repeated record element keeps only its last occurrence, without merging fields."""
    project = parse_pom_string(
        """
        <project>
            <parent><groupId>first</groupId><version>1</version></parent>
            <parent><artifactId>second</artifactId></parent>
        </project>
        """
    )
    assert project.parent == Parent(artifact_id="second")
