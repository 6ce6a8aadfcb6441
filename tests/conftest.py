import sys
import os

import pytest

# Add src/ to sys.path so absolute imports (core.*, doc_types.*, infrastructure.*) work,
# and the project root so tests.* helper modules resolve.
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(_project_root, "src"))
sys.path.insert(0, _project_root)


@pytest.fixture
def make_registry():
    """Build a registry bound to only the given document kinds."""
    from infrastructure import CodecRegistry, default_codecs

    def _make(*kinds):
        return CodecRegistry(c for c in default_codecs() if c.kind in kinds)

    return _make
