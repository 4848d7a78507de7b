from pytest_archon import archrule


def test_domain_isolation() -> None:
    """
    Domain layer should be self-contained.
    Nullable wrappers satisfy IValuer structurally, without importing ports.
    """
    (
        archrule("domain_isolation")
        .match("nullable_validation.domain*")
        .should_not_import("nullable_validation.ports*")
        .should_not_import("nullable_validation.validation*")
        .check("nullable_validation")
    )


def test_primitives_isolation() -> None:
    """
    Primitives layer is the lowest level.
    It must not import from domain or ports.
    """
    (
        archrule("primitives_isolation")
        .match("nullable_validation.primitives*")
        .should_not_import("nullable_validation.domain*")
        .should_not_import("nullable_validation.ports*")
        .check("nullable_validation")
    )


def test_ports_layering() -> None:
    """
    Ports (protocols) should not depend on concrete wrapper types.
    """
    (
        archrule("ports_layering")
        .match("nullable_validation.ports*")
        .should_not_import("nullable_validation.domain*")
        .check("nullable_validation")
    )


def test_engine_independent_of_wrappers() -> None:
    """
    The engine only knows wrappers through hooks; only the factory wires
    the built-in Null* types in.
    """
    (
        archrule("engine_independence")
        .match("nullable_validation.validation.validator")
        .match("nullable_validation.validation.rules")
        .match("nullable_validation.validation.tags")
        .match("nullable_validation.validation.hooks")
        .should_not_import("nullable_validation.domain*")
        .check("nullable_validation")
    )
