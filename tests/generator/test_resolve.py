import pytest

from genkit import DefaultImageCatalog, PackagingMode, RuntimeMode
from genkit import constants
from genkit.exceptions import ArtifactNotFoundError, ImageLookupError
from genkit.generator import BaseImageResolver
from genkit.generator.resolve import Resolution
from pydantic import ValidationError

FROM_PROPERTY = "jkube.generator.quarkus.from"
NATIVE_PROPERTY = "jkube.generator.quarkus.nativeImage"


@pytest.fixture
def resolver(image_lookup):
    return BaseImageResolver(DefaultImageCatalog(image_lookup))


class TestPrecedence:

    def test_config_wins_over_property(self, resolver, make_context):
        ctx = make_context(
            config={"quarkus": {"from": "from-config:1"}},
            properties={FROM_PROPERTY: "from-property:1"},
        )
        resolution = resolver.resolution(ctx)
        assert resolution.image == "from-config:1"
        assert resolution.source == "config"

    def test_property_wins_over_catalog(self, resolver, make_context, image_lookup):
        ctx = make_context(properties={FROM_PROPERTY: "from-property:1"})
        resolution = resolver.resolution(ctx)
        assert resolution.image == "from-property:1"
        assert resolution.source == "property"
        assert image_lookup.calls == []

    def test_catalog_fallback(self, resolver, make_context):
        resolution = resolver.resolution(make_context(mode=RuntimeMode.KUBERNETES))
        assert resolution.image == "quarkus/docker"
        assert resolution.source == "catalog"
        assert resolution.mode == PackagingMode.RUNTIME

    def test_values_are_passed_through_verbatim(self, resolver, make_context):
        ctx = make_context(properties={FROM_PROPERTY: "  not a valid ref  "})
        assert resolver.resolve(ctx) == "  not a valid ref  "

    def test_other_generator_config_is_ignored(self, resolver, make_context):
        ctx = make_context(config={"spring-boot": {"from": "spring:1"}},
                           properties={"jkube.generator.spring-boot.from": "spring:2"})
        assert resolver.resolve(ctx) == "quarkus/s2i"

    def test_namespace_is_configurable(self, resolver, make_context):
        ctx = make_context(namespace="acme", properties={
            "acme.generator.quarkus.from": "acme:1",
            FROM_PROPERTY: "jkube:1",
        })
        assert resolver.resolve(ctx) == "acme:1"

    def test_override_skips_artifact_detection(self, resolver, make_context, tmp_path):
        ctx = make_context(config={"quarkus": {"from": "java:latest"}}, build_directory=str(tmp_path / "empty"))
        assert resolver.resolve(ctx) == "java:latest"


class TestPackagingMode:

    def test_native_flag_from_config(self, resolver, make_context):
        ctx = make_context(config={"quarkus": {"nativeImage": True}})
        assert resolver.packaging_mode(ctx) == PackagingMode.NATIVE

    def test_native_flag_from_property(self, resolver, make_context):
        ctx = make_context(properties={NATIVE_PROPERTY: "true"})
        assert resolver.packaging_mode(ctx) == PackagingMode.NATIVE

    def test_artifact_id_narrows_probe(self, resolver, make_context, native_executable):
        assert resolver.packaging_mode(make_context(artifact_id="sample")) == PackagingMode.NATIVE
        with pytest.raises(ArtifactNotFoundError):
            resolver.packaging_mode(make_context(artifact_id="other"))

    def test_detect_mode_returns_none_without_artifacts(self, resolver, make_context, tmp_path):
        assert resolver.detect_mode(make_context(build_directory=str(tmp_path))) is None


class TestErrors:

    def test_missing_artifact_names_generator(self, resolver, make_context, tmp_path):
        with pytest.raises(ArtifactNotFoundError, match=r"\[quarkus\]"):
            resolver.resolve(make_context(build_directory=str(tmp_path)))

    def test_lookup_failure_names_mode_and_target(self, resolver, make_context, image_lookup):
        image_lookup.images.pop(constants.LOOKUP_RUNTIME_S2I)
        with pytest.raises(ImageLookupError, match=r"\[quarkus\].*runtime packaging in openshift mode"):
            resolver.resolve(make_context(mode=RuntimeMode.OPENSHIFT))


class TestResolution:

    @pytest.mark.parametrize("config, properties, source", [
        ({"quarkus": {"from": "java:latest"}}, {}, "config"),
        ({}, {FROM_PROPERTY: "java:latest"}, "property"),
        ({}, {}, "catalog"),
    ])
    def test_source_names_the_tier(self, resolver, make_context, config, properties, source):
        assert resolver.resolution(make_context(config=config, properties=properties)).source == source

    def test_unknown_source_is_rejected(self):
        with pytest.raises(ValidationError):
            Resolution(image="java:latest", source="guess")
