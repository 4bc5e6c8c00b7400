"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from catalog_query.application.i18n import ResourceBundle
from catalog_query.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)


class TestBaseError:
    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {
            "code": "my_code",
            "message": "m",
            "message_key": "errors.my_code",
            "detail": {"key": "val"},
        }

    def test_custom_message_key(self) -> None:
        assert BaseError("m", message_key="listing.empty").message_key == "listing.empty"

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops")))
        assert parsed["code"] == "oops"


class TestHierarchy:
    @pytest.mark.parametrize(
        ("error", "parent"),
        [
            (ValidationError("bad"), DomainError),
            (NotFoundError("product", "p1"), DomainError),
            (UnauthorizedError("no session"), ApplicationError),
            (ForbiddenError(), ApplicationError),
        ],
    )
    def test_parents(self, error: BaseError, parent: type) -> None:
        assert isinstance(error, parent)
        assert isinstance(error, BaseError)

    def test_not_found_message(self) -> None:
        err = NotFoundError("product", "p1")
        assert err.message == "product 'p1' not found"
        assert err.code == "not_found"

    def test_validation_errors_serialised(self) -> None:
        err = ValidationError("bad page", errors=[{"field": "page"}])
        assert err.to_dict()["errors"] == [{"field": "page"}]

    def test_forbidden_role(self) -> None:
        assert ForbiddenError(role="admin").role == "admin"

    def test_validation_for_field(self) -> None:
        err = ValidationError.for_field("limit", "ten", "limit must be an integer")
        assert err.errors == [{"field": "limit", "value": "ten"}]
        assert err.message == "limit must be an integer"


class TestLocalized:
    def test_resolves_through_bundle(self) -> None:
        bundle = ResourceBundle(
            {
                "vi": {"errors.not_found": "Không tìm thấy {resource}"},
                "en": {"errors.not_found": "{resource} {identifier} was not found"},
            }
        )
        err = NotFoundError("product", "p1")
        assert err.localized(bundle, "en") == "product p1 was not found"
        assert err.localized(bundle, "ja") == "Không tìm thấy product"

    def test_falls_back_to_message(self) -> None:
        err = ValidationError("page must be >= 1")
        assert err.localized(ResourceBundle({}), "en") == "page must be >= 1"

    def test_unknown_placeholders_are_kept(self) -> None:
        bundle = ResourceBundle({"vi": {"errors.forbidden": "Cần quyền {role}"}})
        assert ForbiddenError(role="admin").localized(bundle) == "Cần quyền {role}"
