"""Tests for candidate collection."""

import logging

from didyoumean.collector import collect

from .conftest import DEFAULT_SCOPE


class TestCollect:
    """Test collect function."""

    def test_defined_names_in_discovery_order(self, namespace):
        """Test names come back in the order the host lists them"""
        candidates = collect(
            "Data::Dumper",
            namespace.list_defined_names,
            ["print"],
            namespace.is_default_scope,
        )
        assert candidates == ["Dumper", "Indent", "Sortkeys"]
        assert namespace.calls == ["Data::Dumper"]

    def test_default_scope_adds_reserved_names(self, namespace):
        """Test reserved names follow defined names in the default scope"""
        candidates = collect(
            DEFAULT_SCOPE,
            namespace.list_defined_names,
            ["print", "open"],
            namespace.is_default_scope,
        )
        assert candidates == ["Dumper", "Dumps", "load_data", "print", "open"]

    def test_deduplicates_by_exact_spelling(self, namespace):
        """Test overlapping names appear once, case variants are kept"""
        candidates = collect(
            DEFAULT_SCOPE,
            namespace.list_defined_names,
            ["Dumper", "dumper", "print", "print"],
            namespace.is_default_scope,
        )
        assert candidates == ["Dumper", "Dumps", "load_data", "dumper", "print"]

    def test_non_default_scope_ignores_reserved(self, namespace):
        """Test reserved names only apply to the default scope"""
        candidates = collect(
            "Empty", namespace.list_defined_names, ["print"], namespace.is_default_scope
        )
        assert candidates == []

    def test_missing_collaborators(self):
        """Test no collaborators yields an empty candidate set"""
        assert collect("anything", None, ["print"], None) == []

    def test_failing_lister_degrades(self, caplog):
        """Test a raising lister contributes nothing and is logged"""

        def broken(scope):
            raise RuntimeError("symbol table unavailable")

        with caplog.at_level(logging.WARNING, logger="didyoumean.collector"):
            candidates = collect(DEFAULT_SCOPE, broken, ["print"], lambda s: True)

        assert candidates == ["print"]
        assert "symbol table unavailable" in caplog.text

    def test_failing_classifier_means_not_default(self, namespace, caplog):
        """Test a raising classifier leaves reserved names out"""

        def broken(scope):
            raise LookupError("no such scope")

        with caplog.at_level(logging.WARNING, logger="didyoumean.collector"):
            candidates = collect(
                DEFAULT_SCOPE, namespace.list_defined_names, ["print"], broken
            )

        assert candidates == ["Dumper", "Dumps", "load_data"]
        assert "no such scope" in caplog.text

    def test_skips_non_string_names(self):
        """Test junk reported by a host is dropped"""
        candidates = collect(
            "scope", lambda s: ["ok", 3, None, b"bytes"], [None, "print"], lambda s: True
        )
        assert candidates == ["ok", "print"]

    def test_generator_lister(self):
        """Test the lister may return any iterable"""
        candidates = collect("scope", lambda s: (n for n in ["a", "b", "a"]))
        assert candidates == ["a", "b"]
