import io

from doc_types.build_record import BuildRecord, DigestItem, parser as build_parser, serializer as build_serializer
from tests.sample_documents import sample_build_record


def _serialize(record: BuildRecord) -> str:
    sink = io.BytesIO()
    build_serializer.serialize(record, sink)
    return sink.getvalue().decode("utf-8")


# ===========================================================
# Serialization
# ===========================================================

class TestBuildRecordSerializer:

    def test_declaration_and_namespace(self):
        text = _serialize(BuildRecord(project="g:a", checksum="c"))
        assert text.startswith("<?xml version='1.0' encoding='UTF-8'?>")
        assert '<build xmlns="http://maven.apache.org/BUILD-CACHE-BUILD/1.0.0">' in text

    def test_minimal_layout(self):
        text = _serialize(BuildRecord(project="g:a", checksum="c"))
        assert "<project>g:a</project>" in text
        assert "<hashAlgorithm>XX</hashAlgorithm>" in text
        assert "<final>false</final>" in text
        assert "<checksum>c</checksum>" in text

    def test_optional_fields_omitted(self):
        text = _serialize(BuildRecord(project="g:a", checksum="c"))
        assert "cacheImplementationVersion" not in text
        assert "<goals" not in text
        assert "<artifact" not in text
        assert "attachedArtifacts" not in text
        assert "<item" not in text

    def test_project_precedes_input_info(self):
        text = _serialize(BuildRecord(project="g:a", checksum="c"))
        assert text.index("<project>") < text.index("<projectsInputInfo>")

    def test_digest_item_attributes(self):
        record = BuildRecord(
            project="g:a",
            checksum="c",
            inputs=(DigestItem(type="file", hash="h1", file_checksum="fc", value="src/A.java"),),
        )
        text = _serialize(record)
        assert '<item type="file" hash="h1" fileChecksum="fc" value="src/A.java" />' in text

    def test_empty_digest_value_is_kept(self):
        record = BuildRecord(
            project="g:a", checksum="c", inputs=(DigestItem(type="file", hash="h", value=""),)
        )
        assert '<item type="file" hash="h" value="" />' in _serialize(record)

    def test_escapes_markup(self):
        record = BuildRecord(project="g:a", checksum="c", goals=("<script>&",))
        text = _serialize(record)
        assert "<goal>&lt;script&gt;&amp;</goal>" in text

    def test_indented(self):
        text = _serialize(BuildRecord(project="g:a", checksum="c"))
        assert "\n  <project>" in text
        assert "\n    <checksum>" in text


# ===========================================================
# Round-trip: serialize → parse
# ===========================================================

class TestBuildRecordRoundTrip:

    def test_full_record(self):
        record = sample_build_record()
        sink = io.BytesIO()
        build_serializer.serialize(record, sink)
        sink.seek(0)
        assert build_parser.parse(sink) == record

    def test_same_bytes_twice(self):
        record = sample_build_record()
        assert _serialize(record) == _serialize(record)
