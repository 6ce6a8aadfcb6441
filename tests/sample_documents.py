"""
Fully-populated sample documents shared by the codec and I/O tests.
"""
from __future__ import annotations

from doc_types.build_diff import BuildDiff, Mismatch
from doc_types.build_record import Artifact, BuildRecord, DigestItem
from doc_types.config import CacheConfig, InputConfig, LocalConfig, RemoteConfig
from doc_types.report import CacheReport, ProjectReport


def sample_config() -> CacheConfig:
    return CacheConfig(
        enabled=True,
        hash_algorithm="SHA-256",
        validate_xml=True,
        remote=RemoteConfig(
            enabled=True,
            url="https://cache.example.org/builds",
            id="build-cache",
            save_to_remote=True,
        ),
        local=LocalConfig(max_builds_cached=5, location="/var/cache/builds"),
        attached_outputs=("generated-sources", "classes"),
        input=InputConfig(
            glob="{*.java,*.xml}",
            includes=("src/", "pom.xml"),
            excludes=("target/",),
        ),
    )


def sample_build_record() -> BuildRecord:
    return BuildRecord(
        project="org.example:core:1.2.0",
        checksum="a1b2c3d4e5f60718",
        cache_implementation_version="1.0.1",
        hash_algorithm="XX",
        final=True,
        goals=("clean", "install"),
        artifact=Artifact(
            group_id="org.example",
            artifact_id="core",
            version="1.2.0",
            file_name="core-1.2.0.jar",
            file_hash="ffee0011",
            file_size=20480,
        ),
        attached_artifacts=(
            Artifact(
                group_id="org.example",
                artifact_id="core",
                version="1.2.0",
                classifier="sources",
                file_name="core-1.2.0-sources.jar",
                file_size=4096,
            ),
        ),
        inputs=(
            DigestItem(type="file", hash="0badf00d", file_checksum="c0ffee", value="src/Main.java"),
            DigestItem(type="dependency", hash="deadbeef", value="org.slf4j:slf4j-api:2.0.9"),
        ),
    )


def sample_build_diff() -> BuildDiff:
    return BuildDiff(
        mismatches=(
            Mismatch(
                item="src/Main.java",
                current="0badf00d",
                baseline="f00d0bad",
                reason="source file changed",
                resolution="rebuild",
            ),
            Mismatch(
                item="maven-compiler-plugin:release",
                current="17",
                baseline="11",
                context="compile",
            ),
        ),
    )


def sample_report() -> CacheReport:
    return CacheReport(
        projects=(
            ProjectReport(
                group_id="org.example",
                artifact_id="core",
                checksum="a1b2c3d4e5f60718",
                checksum_matched=True,
                lifecycle_matched=True,
                source="REMOTE",
                url="https://cache.example.org/builds/core",
            ),
            ProjectReport(
                group_id="org.example",
                artifact_id="app",
                checksum="99887766",
                source="BUILD",
                shared_to_remote=True,
                url="https://cache.example.org/builds/app",
            ),
        ),
    )
