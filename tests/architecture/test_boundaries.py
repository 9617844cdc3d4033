from pytest_archon import archrule


def test_query_independence() -> None:
    """
    The query package builds payloads only.
    It must not know about HTTP, services or the client facade.
    """
    (
        archrule("query_is_independent")
        .match("mixcore_sdk.query*")
        .should_not_import("mixcore_sdk.transport*")
        .should_not_import("mixcore_sdk.client*")
        .should_not_import("mixcore_sdk.database*")
        .should_not_import("httpx*")
        .check("mixcore_sdk")
    )


def test_ports_layering() -> None:
    """
    Ports (interfaces) should not depend on Adapters (implementations).
    """
    (
        archrule("ports_layering")
        .match("mixcore_sdk.ports*")
        .should_not_import("mixcore_sdk.transport*")
        .should_not_import("mixcore_sdk.token_store*")
        .should_not_import("httpx*")
        .check("mixcore_sdk")
    )


def test_services_use_transport_port() -> None:
    """
    Services talk to the transport through the port, never to httpx directly.
    """
    (
        archrule("services_behind_port")
        .match("mixcore_sdk.auth*", "mixcore_sdk.database*", "mixcore_sdk.storage*")
        .should_not_import("httpx*")
        .should_not_import("mixcore_sdk.transport*")
        .check("mixcore_sdk")
    )


def test_models_isolation() -> None:
    """
    Wire models are plain pydantic and must not reach into services.
    """
    (
        archrule("models_isolation")
        .match("mixcore_sdk.models*")
        .should_not_import("mixcore_sdk.auth*")
        .should_not_import("mixcore_sdk.database*")
        .should_not_import("mixcore_sdk.storage*")
        .should_not_import("mixcore_sdk.client*")
        .check("mixcore_sdk")
    )
