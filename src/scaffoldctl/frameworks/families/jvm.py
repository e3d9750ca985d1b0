"""Spring Boot family (Maven)."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from scaffoldctl.domain.composer import (
    DependencyContribution,
    FamilySpec,
    FileContribution,
    all_of,
    enabled,
    equals,
)
from scaffoldctl.domain.options import OptionSpec, ResolvedOptions
from scaffoldctl.domain.project import ProjectIdentity
from scaffoldctl.domain.types import Category, Database
from scaffoldctl.frameworks.families.common import README

_mvc = equals("webStack", "mvc")
_webflux = equals("webStack", "webflux")
_tests = enabled("tests")
_docker = enabled("docker")

SPRING_OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec("javaVersion", "17", str, description="Java release for the compiler"),
    OptionSpec("springBootVersion", "3.2.0", str, description="Spring Boot parent version"),
    OptionSpec("groupId", "com.example", str, description="Maven groupId and base package"),
    OptionSpec("artifactId", "", str, description="Maven artifactId (empty: project name)"),
    OptionSpec("docker", False, bool, description="Add Dockerfile and docker-compose.yml"),
    OptionSpec("tests", True, bool, description="Add a Spring Boot test"),
    OptionSpec(
        "database",
        Database.H2.value,
        str,
        (Database.H2.value, Database.POSTGRESQL.value, Database.MYSQL.value),
        description="Datasource to configure",
    ),
    OptionSpec("webStack", "mvc", str, ("mvc", "webflux"), description="Servlet or reactive web"),
)


def _package_segment(value: str) -> str:
    segment = re.sub(r"[^a-z0-9_]", "", value.lower())
    if not segment:
        return "app"
    return f"_{segment}" if segment[0].isdigit() else segment


def spring_context(resolved: ResolvedOptions, identity: ProjectIdentity) -> Mapping[str, Any]:
    """Maven coordinates and Java naming derived from options and project name."""
    artifact_id = resolved["artifactId"] or identity.slug
    segments = [_package_segment(part) for part in resolved["groupId"].split(".") if part]
    segments.append(_package_segment(artifact_id))
    java_package = ".".join(segments)
    return {
        "artifact_id": artifact_id,
        "java_package": java_package,
        "java_package_path": java_package.replace(".", "/"),
        "application_class": f"{identity.pascal}Application",
        "port": 8080,
        "commands": ["mvn spring-boot:run"],
        "test_command": "mvn test",
    }


SPRING_BOOT = FamilySpec(
    name="spring-boot",
    label="Spring Boot",
    category=Category.SPRING,
    aliases=("spring-boot", "spring", "spring-mvc", "spring-webflux"),
    options=SPRING_OPTIONS,
    presets={"spring-mvc": {"webStack": "mvc"}, "spring-webflux": {"webStack": "webflux"}},
    template_group="spring",
    dependencies=(
        DependencyContribution(
            "maven", {"org.springframework.boot:spring-boot-starter-web": ""}, _mvc
        ),
        DependencyContribution(
            "maven", {"org.springframework.boot:spring-boot-starter-webflux": ""}, _webflux
        ),
        DependencyContribution(
            "maven", {"org.springframework.boot:spring-boot-starter-actuator": ""}
        ),
        DependencyContribution(
            "maven", {"org.springframework.boot:spring-boot-starter-data-jpa": ""}, _mvc
        ),
        DependencyContribution(
            "maven", {"org.springframework.boot:spring-boot-starter-data-r2dbc": ""}, _webflux
        ),
        DependencyContribution(
            "maven", {"com.h2database:h2": "runtime"}, equals("database", "h2")
        ),
        DependencyContribution(
            "maven", {"io.r2dbc:r2dbc-h2": "runtime"}, all_of(_webflux, equals("database", "h2"))
        ),
        DependencyContribution(
            "maven", {"org.postgresql:postgresql": "runtime"}, equals("database", "postgresql")
        ),
        DependencyContribution(
            "maven",
            {"org.postgresql:r2dbc-postgresql": "runtime"},
            all_of(_webflux, equals("database", "postgresql")),
        ),
        DependencyContribution(
            "maven", {"com.mysql:mysql-connector-j": "runtime"}, equals("database", "mysql")
        ),
        DependencyContribution(
            "maven",
            {"io.asyncer:r2dbc-mysql": "runtime"},
            all_of(_webflux, equals("database", "mysql")),
        ),
        DependencyContribution(
            "maven", {"org.springframework.boot:spring-boot-starter-test": "test"}, _tests
        ),
        DependencyContribution(
            "maven", {"io.projectreactor:reactor-test": "test"}, all_of(_tests, _webflux)
        ),
    ),
    files=(
        FileContribution("pom.xml", "pom.xml.j2"),
        FileContribution(
            "src/main/java/{{ java_package_path }}/{{ application_class }}.java",
            "Application.java.j2",
        ),
        FileContribution(
            "src/main/java/{{ java_package_path }}/controller/HelloController.java",
            "HelloController.java.j2",
        ),
        FileContribution("src/main/resources/application.properties", "application.properties.j2"),
        FileContribution(
            "src/test/java/{{ java_package_path }}/{{ application_class }}Tests.java",
            "ApplicationTests.java.j2",
            _tests,
        ),
        FileContribution("Dockerfile", "Dockerfile.j2", _docker),
        FileContribution("docker-compose.yml", "docker-compose.yml.j2", _docker),
        FileContribution(".dockerignore", "dockerignore.j2", _docker),
        FileContribution(".gitignore", "gitignore.j2"),
        README,
    ),
    context=spring_context,
)
