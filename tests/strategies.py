"""
Hypothesis strategies producing valid cache documents of every kind.

Generated documents always pass their kind's validator, so they can be
pushed through the full serialize → deserialize path.
"""
from __future__ import annotations

from hypothesis import strategies as st

from core import xml_tree
from doc_types.build_diff import BuildDiff, Mismatch
from doc_types.build_record import Artifact, BuildRecord, DigestItem
from doc_types.config import CacheConfig, InputConfig, LocalConfig, RemoteConfig
from doc_types.report import CacheReport, ProjectReport


# Identifiers — no whitespace, never blank
_IDENT_CHARS = st.sampled_from("abcdefghijklmnopqrstuvwxyz0123456789-_.")
ident = st.text(_IDENT_CHARS, min_size=1, max_size=12)

# Any text XML 1.0 can carry, including tabs, CR/LF and astral characters
free_text = st.text(
    st.characters(blacklist_categories=("Cs",)).filter(xml_tree.is_xml_char),
    max_size=20,
)
optional_text = st.one_of(st.none(), free_text)

_texts = st.lists(free_text, max_size=4).map(tuple)


# ------------------------------------------------------------------
# Config
# ------------------------------------------------------------------

@st.composite
def cache_configs(draw: st.DrawFn) -> CacheConfig:
    remote_enabled = draw(st.booleans())
    remote = RemoteConfig(
        enabled=remote_enabled,
        url=draw(ident.map(lambda h: f"https://{h}.example") if remote_enabled else optional_text),
        id=draw(free_text),
        save_to_remote=draw(st.booleans()),
    )
    return CacheConfig(
        enabled=draw(st.booleans()),
        hash_algorithm=draw(ident),
        validate_xml=draw(st.booleans()),
        remote=remote,
        local=LocalConfig(
            max_builds_cached=draw(st.integers(min_value=1, max_value=1000)),
            location=draw(optional_text),
        ),
        attached_outputs=draw(_texts),
        input=InputConfig(glob=draw(free_text), includes=draw(_texts), excludes=draw(_texts)),
    )


# ------------------------------------------------------------------
# Build record
# ------------------------------------------------------------------

artifacts = st.builds(
    Artifact,
    group_id=ident,
    artifact_id=ident,
    version=optional_text,
    type=free_text,
    classifier=optional_text,
    scope=optional_text,
    file_name=optional_text,
    file_hash=optional_text,
    file_size=st.integers(min_value=0, max_value=2**40),
)

digest_items = st.builds(
    DigestItem,
    type=ident,
    hash=ident,
    file_checksum=optional_text,
    value=optional_text,
)


@st.composite
def build_records(draw: st.DrawFn) -> BuildRecord:
    return BuildRecord(
        project=f"{draw(ident)}:{draw(ident)}",
        checksum=draw(ident),
        cache_implementation_version=draw(optional_text),
        hash_algorithm=draw(ident),
        final=draw(st.booleans()),
        goals=draw(_texts),
        artifact=draw(st.one_of(st.none(), artifacts)),
        attached_artifacts=tuple(draw(st.lists(artifacts, max_size=3))),
        inputs=tuple(draw(st.lists(digest_items, max_size=4))),
    )


# ------------------------------------------------------------------
# Build diff / report
# ------------------------------------------------------------------

mismatches = st.builds(
    Mismatch,
    item=ident,
    current=optional_text,
    baseline=optional_text,
    reason=optional_text,
    resolution=optional_text,
    context=optional_text,
)

build_diffs = st.lists(mismatches, max_size=5).map(lambda ms: BuildDiff(mismatches=tuple(ms)))

project_reports = st.builds(
    ProjectReport,
    group_id=ident,
    artifact_id=ident,
    checksum=ident,
    checksum_matched=st.booleans(),
    lifecycle_matched=st.booleans(),
    source=optional_text,
    shared_to_remote=st.booleans(),
    url=optional_text,
)

cache_reports = st.lists(project_reports, max_size=5).map(lambda ps: CacheReport(projects=tuple(ps)))


any_document = st.one_of(cache_configs(), build_records(), build_diffs, cache_reports)
