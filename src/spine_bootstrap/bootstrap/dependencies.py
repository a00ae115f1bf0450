"""Modules a bootstrapped project depends on."""

from __future__ import annotations

from typing import Final

from spine_bootstrap.project.dependencies import Dependency

SPINE_GROUP: Final[str] = "io.spine"
SPINE_GCLOUD_GROUP: Final[str] = "io.spine.gcloud"
SPINE_PREFIX: Final[str] = "spine-"


def _spine(short_name: str, group: str = SPINE_GROUP) -> Dependency:
    return Dependency(group, SPINE_PREFIX + short_name)


class SpineDependency:
    """Framework modules, named ``io.spine:spine-<short name>``."""

    @staticmethod
    def base() -> Dependency:
        return _spine("base")

    @staticmethod
    def time() -> Dependency:
        return _spine("time")

    @staticmethod
    def client() -> Dependency:
        return _spine("client")

    @staticmethod
    def server() -> Dependency:
        return _spine("server")

    @staticmethod
    def testlib() -> Dependency:
        return _spine("testlib")

    @staticmethod
    def testutil_time() -> Dependency:
        return _spine("testutil-time")

    @staticmethod
    def testutil_client() -> Dependency:
        return _spine("testutil-client")

    @staticmethod
    def testutil_server() -> Dependency:
        return _spine("testutil-server")

    @staticmethod
    def web() -> Dependency:
        return _spine("web")

    @staticmethod
    def firebase_web() -> Dependency:
        return _spine("firebase-web")

    @staticmethod
    def datastore() -> Dependency:
        return _spine("datastore", SPINE_GCLOUD_GROUP)

    @staticmethod
    def testutil_gcloud() -> Dependency:
        return _spine("testutil-gcloud", SPINE_GCLOUD_GROUP)


# A module outside of the framework.
ThirdPartyDependency = Dependency


def protobuf_lite() -> Dependency:
    """The Protobuf Lite runtime, pulled in transitively by some libraries."""
    return ThirdPartyDependency("com.google.protobuf", "protobuf-lite")


__all__ = [
    "SPINE_GCLOUD_GROUP",
    "SPINE_GROUP",
    "SpineDependency",
    "ThirdPartyDependency",
    "protobuf_lite",
]
