"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from log_viewer.kernel.errors import (
    BackendProtocolError,
    BackendTimeoutError,
    BackendUnavailableError,
    BaseError,
    DomainError,
    ExternalServiceError,
    InfrastructureError,
    MalformedDocumentError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        err = BaseError("m", code="custom")
        assert err.code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        d = err.to_dict()
        assert "original" in d["cause"]

    def test_to_dict_without_cause(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "cause" not in err.to_dict(include_cause=False)

    def test_detail_is_copied(self) -> None:
        detail = {"k": 1}
        err = BaseError("m", detail=detail)
        detail["k"] = 2
        assert err.detail == {"k": 1}

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        err = BaseError("oops", code="oops", detail={"x": 1})
        parsed = json.loads(str(err))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m", code="c")) == "BaseError(code='c', message='m')"


class TestDomainErrors:
    def test_validation_error_carries_field_errors(self) -> None:
        err = ValidationError("bad", errors=[{"field": "size", "value": 0}])
        assert err.code == "validation_error"
        assert err.to_dict()["errors"] == [{"field": "size", "value": 0}]

    def test_validation_error_defaults_to_empty_errors(self) -> None:
        assert ValidationError("bad").errors == []

    def test_malformed_document_defaults(self) -> None:
        err = MalformedDocumentError()
        assert err.code == "malformed_document"
        assert err.message == "Document is not a JSON object"
        assert err.kind is None

    def test_malformed_document_kind(self) -> None:
        assert MalformedDocumentError("scalar", kind="string").kind == "string"

    @pytest.mark.parametrize("cls", [ValidationError, MalformedDocumentError])
    def test_domain_subclasses(self, cls: type[BaseError]) -> None:
        assert issubclass(cls, DomainError)
        assert not issubclass(cls, InfrastructureError)


class TestInfrastructureErrors:
    def test_backend_unavailable_default_message(self) -> None:
        err = BackendUnavailableError("http://es:9200")
        assert err.message == "Could not reach 'http://es:9200'"
        assert err.resource == "http://es:9200"
        assert err.code == "backend_unavailable"

    def test_timeout_is_sibling_of_unavailable(self) -> None:
        err = BackendTimeoutError("http://es:9200", "timed out")
        assert isinstance(err, InfrastructureError)
        assert not isinstance(err, BackendUnavailableError)
        assert err.resource == "http://es:9200"
        assert err.code == "backend_timeout"

    def test_timeout_default_message(self) -> None:
        assert BackendTimeoutError("http://es:9200").message == "Timed out waiting for 'http://es:9200'"

    def test_protocol_error_path(self) -> None:
        err = BackendProtocolError("missing hits", path="$.hits")
        assert err.path == "$.hits"
        assert err.code == "backend_protocol_error"

    def test_external_service_status(self) -> None:
        err = ExternalServiceError("es", status_code=400)
        assert err.status_code == 400
        assert err.message == "External service 'es' error"

    @pytest.mark.parametrize(
        "err",
        [
            BackendUnavailableError("x"),
            BackendTimeoutError("x"),
            BackendProtocolError("x"),
            ExternalServiceError("x"),
        ],
    )
    def test_all_are_infrastructure(self, err: BaseError) -> None:
        assert isinstance(err, InfrastructureError)
        assert not isinstance(err, DomainError)
