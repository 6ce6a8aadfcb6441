from doc_types.build_record import Artifact, BuildRecord, DigestItem
from doc_types.build_record.validator import validate
from tests.sample_documents import sample_build_record


class TestBuildRecordValidator:

    def test_sample_is_valid(self):
        result = validate(sample_build_record())
        assert result.is_valid
        assert not result.warnings

    def test_empty_project(self):
        result = validate(BuildRecord(project="", checksum="c"))
        assert not result.is_valid
        assert any("Project coordinate is empty" in e for e in result.errors)

    def test_coordinate_without_artifact_id(self):
        result = validate(BuildRecord(project="org.example", checksum="c"))
        assert any("groupId:artifactId" in e for e in result.errors)

    def test_coordinate_with_empty_group(self):
        result = validate(BuildRecord(project=":core", checksum="c"))
        assert not result.is_valid

    def test_empty_checksum(self):
        result = validate(BuildRecord(project="g:a", checksum="  "))
        assert any("checksum" in e for e in result.errors)

    def test_empty_hash_algorithm(self):
        result = validate(BuildRecord(project="g:a", checksum="c", hash_algorithm=""))
        assert any("Hash algorithm" in e for e in result.errors)

    def test_negative_file_size(self):
        record = BuildRecord(
            project="g:a", checksum="c",
            artifact=Artifact(group_id="g", artifact_id="a", file_size=-1),
        )
        assert any("negative file size" in e for e in validate(record).errors)

    def test_attached_artifact_without_ids(self):
        record = BuildRecord(
            project="g:a", checksum="c",
            attached_artifacts=(Artifact(group_id="", artifact_id="a"),),
        )
        assert not validate(record).is_valid

    def test_input_without_hash(self):
        record = BuildRecord(project="g:a", checksum="c", inputs=(DigestItem(type="file", hash=""),))
        assert any("Input #0" in e for e in validate(record).errors)

    def test_final_without_artifacts_warns(self):
        result = validate(BuildRecord(project="g:a", checksum="c", final=True))
        assert result.is_valid
        assert result.warnings
