import io

import pytest

from doc_types.config import CacheConfig, InputConfig, LocalConfig, RemoteConfig, parser as config_parser


def _parse(text: str) -> CacheConfig:
    return config_parser.parse(io.BytesIO(text.encode("utf-8")))


# ===========================================================
# Defaults
# ===========================================================

class TestConfigParserDefaults:

    def test_empty_root_gives_defaults(self):
        assert _parse("<cache/>") == CacheConfig()

    def test_namespaced_empty_root(self):
        assert _parse('<cache xmlns="http://maven.apache.org/BUILD-CACHE-CONFIG/1.0.0"/>') == CacheConfig()

    def test_partial_configuration(self):
        config = _parse(
            "<cache><configuration><hashAlgorithm>SHA-256</hashAlgorithm></configuration></cache>"
        )
        assert config.hash_algorithm == "SHA-256"
        assert config.enabled is True
        assert config.remote == RemoteConfig()
        assert config.local == LocalConfig()
        assert config.input == InputConfig()


# ===========================================================
# Sections
# ===========================================================

class TestConfigParserSections:

    def test_remote(self):
        config = _parse(
            "<cache><configuration>"
            "<remote enabled='true' id='shared'><url>https://c.example</url>"
            "<saveToRemote>true</saveToRemote></remote>"
            "</configuration></cache>"
        )
        assert config.remote == RemoteConfig(
            enabled=True, url="https://c.example", id="shared", save_to_remote=True,
        )

    def test_local(self):
        config = _parse(
            "<cache><configuration><local><maxBuildsCached>10</maxBuildsCached>"
            "<location>/tmp/cache</location></local></configuration></cache>"
        )
        assert config.local == LocalConfig(max_builds_cached=10, location="/tmp/cache")

    def test_attached_outputs(self):
        config = _parse(
            "<cache><configuration><attachedOutputs>"
            "<dirName>classes</dirName><dirName>generated</dirName>"
            "</attachedOutputs></configuration></cache>"
        )
        assert config.attached_outputs == ("classes", "generated")

    def test_input(self):
        config = _parse(
            "<cache><input><global><glob>*.java</glob>"
            "<includes><include>src/</include></includes>"
            "<excludes><exclude>target/</exclude><exclude>out/</exclude></excludes>"
            "</global></input></cache>"
        )
        assert config.input == InputConfig(glob="*.java", includes=("src/",), excludes=("target/", "out/"))

    def test_booleans_are_case_insensitive(self):
        config = _parse("<cache><configuration><enabled>FALSE</enabled></configuration></cache>")
        assert config.enabled is False


# ===========================================================
# Structural errors
# ===========================================================

class TestConfigParserErrors:

    def test_wrong_root(self):
        with pytest.raises(ValueError, match="<cache>"):
            _parse("<build/>")

    def test_bad_remote_flag(self):
        with pytest.raises(ValueError, match="remote"):
            _parse("<cache><configuration><remote enabled='yes'/></configuration></cache>")

    def test_bad_max_builds(self):
        with pytest.raises(ValueError, match="maxBuildsCached"):
            _parse(
                "<cache><configuration><local><maxBuildsCached>many</maxBuildsCached>"
                "</local></configuration></cache>"
            )
