from enum import Enum

# --- Log and Debug ---
# Short aliases for module names to keep CLI/env concise
LOG_ALIAS_MAP = {
    "probe": "genkit.generator.probe",
    "native": "genkit.generator.native",
    "resolve": "genkit.generator.resolve",
    "rsv": "genkit.generator.resolve",
    "compose": "genkit.generator.compose",
    "cmp": "genkit.generator.compose",
    "quarkus": "genkit.generator.quarkus",
    "gen": "genkit.generator",
    "catalog": "genkit.images.catalog",
    "lookup": "genkit.images.lookup",
    "img": "genkit.images",
    "io": "genkit.io",
    "fs": "genkit.io.fs",
    "conf": "genkit.config",
    "rty": "genkit.registry",
}

# Top-level modules within genkit for auto-prefixing
KNOWN_TOP_MODULES = {
    "generator",
    "images",
    "io",
    "datacls",
    "utils",
    "exceptions",
    "config",
    "registry",
    "cli",
}

LOG_LEVELS_ENV = "GENKIT_LOG_LEVELS"


# --- Modes ---

class RuntimeMode(str, Enum):
    """Deployment target the generated image is meant for."""
    KUBERNETES = "kubernetes"
    OPENSHIFT = "openshift"


class PackagingMode(str, Enum):
    """How the application artifact was packaged."""
    RUNTIME = "runtime"
    NATIVE = "native"


class BuildStrategy(str, Enum):
    DOCKER = "docker"
    S2I = "s2i"
    JIB = "jib"


# --- Generator properties ---
PROPERTY_NAMESPACE = "jkube"
GENERATOR_PROPERTY_PREFIX = "generator"
DEFAULT_GENERATOR = "quarkus"

# Option keys understood by generators, both in override config and as
# `<namespace>.generator.<name>.<key>` project properties
OPT_FROM = "from"
OPT_NATIVE_IMAGE = "nativeImage"
OPT_NAME = "name"
OPT_ALIAS = "alias"
OPT_TAGS = "tags"
OPT_WEB_PORT = "webPort"

TRUE_VALUES = {"true", "yes", "on", "1"}


# --- Artifacts ---
RUNNER_SUFFIX = "-runner"
ARCHIVE_EXTENSION = "jar"


# --- Default images ---
LOOKUP_RUNTIME_DOCKER = "runtime.upstream.docker"
LOOKUP_RUNTIME_S2I = "runtime.upstream.s2i"

NATIVE_S2I_IMAGE = "quay.io/quarkus/ubi-quarkus-native-binary-s2i:1.0"
NATIVE_MINIMAL_IMAGE = "registry.access.redhat.com/ubi8/ubi-minimal:8.1"


# --- Image layout ---
DEFAULT_WEB_PORT = "8080"
RUNTIME_TARGET_DIR = "/deployments"
NATIVE_TARGET_DIR = "/"
NATIVE_HTTP_HOST_ARG = "-Dquarkus.http.host=0.0.0.0"
SNAPSHOT_SUFFIX = "-SNAPSHOT"
LATEST_TAG = "latest"
