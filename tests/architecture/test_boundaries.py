from pytest_archon import archrule


def test_exceptions_independence() -> None:
    """
    Exceptions are the lowest level.
    They must not import configuration, parameters, or query builders.
    """
    (
        archrule("exceptions_independence")
        .match("gdata_gapps.exceptions")
        .should_not_import("gdata_gapps.endpoints*")
        .should_not_import("gdata_gapps.query_string*")
        .should_not_import("gdata_gapps.queries*")
        .check("gdata_gapps")
    )


def test_query_string_independence() -> None:
    """
    The shared parameter mapping is consumed by queries, never the reverse.
    """
    (
        archrule("query_string_independence")
        .match("gdata_gapps.query_string")
        .should_not_import("gdata_gapps.queries*")
        .should_not_import("gdata_gapps.factory*")
        .check("gdata_gapps")
    )


def test_queries_layering() -> None:
    """
    Query builders must not depend on the factory that creates them.
    """
    (
        archrule("queries_layering")
        .match("gdata_gapps.queries*")
        .should_not_import("gdata_gapps.factory*")
        .check("gdata_gapps")
    )
