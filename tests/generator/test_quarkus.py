import pytest

from genkit import BuildConfiguration, ImageConfiguration, QuarkusGenerator, RuntimeMode
from genkit.exceptions import ArtifactNotFoundError
from genkit.io import DiskFileSystem

BASE_JAVA_IMAGE = "java:latest"
BASE_NATIVE_IMAGE = "fedora:latest"
NATIVE_PROPS = {"jkube.generator.quarkus.nativeImage": "true"}


class UnreadableFileSystem(DiskFileSystem):
    """Disk filesystem whose directories cannot be listed."""

    def listdir(self, path):
        raise PermissionError(f"Permission denied: '{path}'")


def assert_build_from(images, base_image):
    assert images is not None
    assert len(images) == 1
    assert images[0].build.from_image == base_image


class TestDefaults:
    """Base image chosen from packaging mode and runtime mode."""

    def test_default_from_in_openshift(self, make_context, image_lookup):
        images = QuarkusGenerator(make_context(RuntimeMode.OPENSHIFT), image_lookup).customize([], True)
        assert_build_from(images, "quarkus/s2i")

    def test_default_from_in_kubernetes(self, make_context, image_lookup):
        images = QuarkusGenerator(make_context(RuntimeMode.KUBERNETES), image_lookup).customize([], True)
        assert_build_from(images, "quarkus/docker")

    def test_default_from_when_native_in_openshift(self, make_context, image_lookup):
        ctx = make_context(RuntimeMode.OPENSHIFT, properties=NATIVE_PROPS)
        images = QuarkusGenerator(ctx, image_lookup).customize([], True)
        assert_build_from(images, "quay.io/quarkus/ubi-quarkus-native-binary-s2i:1.0")
        assert image_lookup.calls == []

    def test_default_from_when_native_in_kubernetes(self, make_context, image_lookup, native_executable):
        ctx = make_context(RuntimeMode.KUBERNETES, properties=NATIVE_PROPS)
        images = QuarkusGenerator(ctx, image_lookup).customize([], True)
        assert_build_from(images, "registry.access.redhat.com/ubi8/ubi-minimal:8.1")
        assert images[0].build.cmd[0] == "./sample-runner"

    def test_detected_native_without_flag(self, make_context, image_lookup, native_executable):
        images = QuarkusGenerator(make_context(RuntimeMode.KUBERNETES), image_lookup).customize([], True)
        assert_build_from(images, "registry.access.redhat.com/ubi8/ubi-minimal:8.1")

    def test_nothing_built_raises(self, make_context, image_lookup, tmp_path):
        ctx = make_context(build_directory=str(tmp_path))
        with pytest.raises(ArtifactNotFoundError):
            QuarkusGenerator(ctx, image_lookup).customize([], True)


class TestOverrides:
    """Explicitly configured base images."""

    @pytest.mark.parametrize("mode", list(RuntimeMode))
    @pytest.mark.parametrize("props", [{}, NATIVE_PROPS])
    def test_configured_from(self, make_context, image_lookup, mode, props):
        ctx = make_context(mode, properties=props, config={"quarkus": {"from": BASE_JAVA_IMAGE}})
        assert_build_from(QuarkusGenerator(ctx, image_lookup).customize([], True), BASE_JAVA_IMAGE)

    def test_configured_from_when_native(self, make_context, image_lookup, native_executable):
        ctx = make_context(properties=NATIVE_PROPS, config={"quarkus": {"from": BASE_NATIVE_IMAGE}})
        images = QuarkusGenerator(ctx, image_lookup).customize([], True)
        assert_build_from(images, BASE_NATIVE_IMAGE)
        assert images[0].metadata["packaging"] == "native"

    def test_properties_from(self, make_context, image_lookup):
        ctx = make_context(properties={"jkube.generator.quarkus.from": BASE_JAVA_IMAGE})
        assert_build_from(QuarkusGenerator(ctx, image_lookup).customize([], True), BASE_JAVA_IMAGE)

    def test_properties_from_when_native(self, make_context, image_lookup, native_executable):
        props = {**NATIVE_PROPS, "jkube.generator.quarkus.from": BASE_NATIVE_IMAGE}
        ctx = make_context(properties=props)
        assert_build_from(QuarkusGenerator(ctx, image_lookup).customize([], True), BASE_NATIVE_IMAGE)

    def test_configured_from_before_build(self, make_context, image_lookup, tmp_path):
        """A pinned image needs no artifact; the layout is left open."""
        ctx = make_context(build_directory=str(tmp_path), config={"quarkus": {"from": BASE_JAVA_IMAGE}})
        images = QuarkusGenerator(ctx, image_lookup).customize([], True)
        assert_build_from(images, BASE_JAVA_IMAGE)
        assert images[0].build.assembly is None

    def test_configured_from_with_unreadable_build_directory(self, make_context, image_lookup):
        ctx = make_context(fs=UnreadableFileSystem(), config={"quarkus": {"from": BASE_JAVA_IMAGE}})
        images = QuarkusGenerator(ctx, image_lookup).customize([], True)
        assert_build_from(images, BASE_JAVA_IMAGE)
        assert images[0].build.assembly is None
        assert image_lookup.calls == []


class TestCustomize:

    def test_appends_to_existing(self, make_context, image_lookup):
        existing = [ImageConfiguration(name="db:1", build=BuildConfiguration(from_image="postgres:16"))]
        images = QuarkusGenerator(make_context(), image_lookup).customize(existing, True)
        assert [img.name for img in images[:1]] == ["db:1"]
        assert len(images) == 2
        assert images[1].build.from_image == "quarkus/s2i"

    def test_each_call_resolves_afresh(self, make_context, image_lookup, build_dir):
        generator = QuarkusGenerator(make_context(RuntimeMode.KUBERNETES), image_lookup)
        assert generator.customize([], True)[0].build.from_image == "quarkus/docker"
        (build_dir / "sample-runner").touch()
        assert generator.customize([], True)[0].build.from_image == "registry.access.redhat.com/ubi8/ubi-minimal:8.1"

    def test_context_is_not_mutated(self, make_context, image_lookup):
        ctx = make_context(properties={"jkube.generator.quarkus.from": BASE_JAVA_IMAGE})
        before = ctx.model_dump(exclude={"fs"})
        QuarkusGenerator(ctx, image_lookup).customize([], False)
        assert ctx.model_dump(exclude={"fs"}) == before
