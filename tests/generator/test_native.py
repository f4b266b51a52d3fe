import pytest

from genkit import PackagingMode
from genkit.exceptions import ArtifactNotFoundError
from genkit.generator import ArtifactProbe, NativeModeResolver, is_true
from genkit.io import DiskFileSystem


@pytest.fixture
def resolver():
    return NativeModeResolver(ArtifactProbe(DiskFileSystem()))


class TestIsTrue:

    @pytest.mark.parametrize("value", ["true", "TRUE", " True ", "yes", "on", "1", True])
    def test_true_spellings(self, value):
        assert is_true(value) is True

    @pytest.mark.parametrize("value", ["false", "", "no", "nope", "0", "2", False])
    def test_everything_else_is_false(self, value):
        assert is_true(value) is False


class TestNativeModeResolver:

    def test_flag_true_overrides_archive(self, resolver, build_dir):
        """Only the jar exists, the flag still decides."""
        assert resolver.resolve("true", str(build_dir)) == PackagingMode.NATIVE

    def test_flag_false_overrides_executable(self, resolver, build_dir, native_executable):
        assert resolver.resolve("false", str(build_dir)) == PackagingMode.RUNTIME

    def test_malformed_flag_is_runtime(self, resolver, build_dir, native_executable):
        assert resolver.resolve("definitely", str(build_dir)) == PackagingMode.RUNTIME

    def test_flag_does_not_need_artifacts(self, resolver, tmp_path):
        assert resolver.resolve("true", str(tmp_path)) == PackagingMode.NATIVE

    def test_no_flag_uses_probe(self, resolver, build_dir, native_executable):
        assert resolver.resolve(None, str(build_dir)) == PackagingMode.NATIVE

    def test_no_flag_no_artifact_raises(self, resolver, tmp_path):
        with pytest.raises(ArtifactNotFoundError):
            resolver.resolve(None, str(tmp_path))
