"""Tests for enumerated attribute variant validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from honeyhealth.conventions.attributes import Attribute, ComplexType, SimpleType
from honeyhealth.conventions.index import ConventionIndex
from honeyhealth.conventions.variants import VariantCheck, check_variants, undefined_variants


@pytest.fixture
def method() -> Attribute:
    return Attribute(type=ComplexType(members=("GET", "POST")))


@pytest.fixture
def model_index(model_dir: Path) -> ConventionIndex:
    return ConventionIndex.build([model_dir])


class TestUndefinedVariants:
    def test_one_undefined(self, method):
        assert undefined_variants(method, ["GET", "POST", "PATCH"]) == ["PATCH"]

    def test_declared_members_pass(self, method):
        assert undefined_variants(method, list(method.type.members)) == []

    def test_simple_type_has_no_variants(self):
        attr = Attribute(type=SimpleType("string"))
        assert undefined_variants(attr, ["anything", 1]) == []

    def test_values_trimmed_before_comparison(self, method):
        assert undefined_variants(method, [" GET ", "POST\n"]) == []

    def test_undefined_reported_once_in_trimmed_form(self, method):
        assert undefined_variants(method, [" PATCH", "PATCH", "PATCH\t"]) == ["PATCH"]

    def test_members_trimmed_before_comparison(self):
        attr = Attribute(type=ComplexType(members=(" GET",)))
        assert undefined_variants(attr, ["GET"]) == []

    def test_integer_members_compared_as_text(self):
        attr = Attribute(type=ComplexType(members=(200, 404)))
        assert undefined_variants(attr, [200, "404", 500]) == ["500"]

    def test_deduplicated_in_first_seen_order(self, method):
        observed = ["PUT", "PATCH", "PUT", "GET", "DELETE"]
        assert undefined_variants(method, observed) == ["PUT", "PATCH", "DELETE"]

    def test_empty_member_set(self):
        attr = Attribute(type=ComplexType())
        assert undefined_variants(attr, ["x"]) == ["x"]


class TestVariantCheck:
    def test_severity(self):
        assert VariantCheck(name="a").severity == "ok"
        assert VariantCheck(name="a", undefined=("x",), allow_custom_values=True).severity == "warning"
        assert VariantCheck(name="a", undefined=("x",)).severity == "error"

    def test_passed(self):
        assert VariantCheck(name="a").passed
        assert not VariantCheck(name="a", undefined=("x",)).passed


class TestCheckVariants:
    def test_closed_set_is_error(self, model_index):
        check = check_variants(model_index, "db.system", ["postgresql", "mssql"])
        assert check is not None
        assert check.undefined == ("mssql",)
        assert check.severity == "error"

    def test_custom_values_allowed_is_warning(self, model_index):
        check = check_variants(model_index, "http.request.method", ["GET", "PATCH"])
        assert check is not None
        assert check.undefined == ("PATCH",)
        assert check.severity == "warning"

    def test_all_declared(self, model_index):
        check = check_variants(model_index, "db.system", ["mysql"])
        assert check is not None
        assert check.passed

    def test_simple_attribute_skipped(self, model_index):
        assert check_variants(model_index, "db.statement", ["select 1"]) is None

    def test_builtin_skipped(self, model_index):
        assert check_variants(model_index, "span.kind", ["server"]) is None

    def test_non_matching_name_skipped(self, model_index):
        assert check_variants(model_index, "db.sytem", ["mssql"]) is None

    def test_deprecated_name_skipped(self, model_index):
        assert check_variants(model_index, "http.request.resend_count", [1]) is None
