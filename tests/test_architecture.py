"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters
- Application services don't depend on adapters
- Adapters can depend on domain
- No circular dependencies
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should only import the standard library, pydantic and the domain."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("mvg_quick_departures.domain.models*")
        .should_not_import("mvg_quick_departures.adapters*")
        .should_not_import("mvg_quick_departures.application*")
        .should_not_import("mvg_quick_departures.domain.contracts*")
        .should_not_import("mvg_quick_departures.domain.ports*")
        .may_import("mvg_quick_departures.domain.models*")
        .may_import("mvg_quick_departures.domain.errors")
        .check("mvg_quick_departures")
    )


def test_domain_contracts_have_no_dependencies() -> None:
    """Domain contracts (protocols/interfaces) should not import adapters or application."""
    (
        archrule("domain contracts", comment="Domain contracts should be independent")
        .match("mvg_quick_departures.domain.contracts*")
        .should_not_import("mvg_quick_departures.adapters*")
        .should_not_import("mvg_quick_departures.application*")
        .may_import("mvg_quick_departures.domain.contracts*")
        .may_import("mvg_quick_departures.domain.models*")
        .may_import("mvg_quick_departures.domain.ports*")
        .check("mvg_quick_departures")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("mvg_quick_departures.domain.ports*")
        .should_not_import("mvg_quick_departures.adapters*")
        .should_not_import("mvg_quick_departures.application*")
        .may_import("mvg_quick_departures.domain.ports*")
        .may_import("mvg_quick_departures.domain.models*")
        .may_import("mvg_quick_departures.domain.contracts*")
        .check("mvg_quick_departures")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("mvg_quick_departures.application*")
        .should_not_import("mvg_quick_departures.adapters*")
        .should_not_import("aiohttp*")
        .may_import("mvg_quick_departures.domain*")
        .may_import("mvg_quick_departures.application*")
        .check("mvg_quick_departures")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("mvg_quick_departures.adapters*")
        .should_not_import("mvg_quick_departures.application*")
        .may_import("mvg_quick_departures.domain*")
        .may_import("mvg_quick_departures.adapters*")
        .check("mvg_quick_departures", only_direct_imports=True)
    )


def test_no_circular_dependencies_in_domain() -> None:
    """Domain layer should not have circular dependencies."""
    (
        archrule("domain no cycles", comment="Domain layer should not have circular dependencies")
        .match("mvg_quick_departures.domain*")
        .should_not_import("mvg_quick_departures.adapters*")
        .should_not_import("mvg_quick_departures.application*")
        .may_import("mvg_quick_departures.domain*")
        .check("mvg_quick_departures", only_direct_imports=True)
    )


def test_terminal_adapter_doesnt_import_mvg_api() -> None:
    """The renderer should only see view models, never the API adapters."""
    (
        archrule("terminal independence", comment="Rendering should not depend on the API")
        .match("mvg_quick_departures.adapters.terminal*")
        .should_not_import("mvg_quick_departures.adapters.mvg_api*")
        .should_not_import("aiohttp*")
        .may_import("mvg_quick_departures.domain*")
        .check("mvg_quick_departures", only_direct_imports=True)
    )
