"""Unit tests for the JSON-RPC envelope codec."""

from __future__ import annotations

import json

import pytest

from nimiqrpc.rpc.envelope import (
    RPCErrorObject,
    Request,
    Response,
    check_response,
    parse_response,
)
from nimiqrpc.rpc.errors import (
    ApplicationError,
    ErrorKind,
    IDMismatchError,
    MalformedResponseError,
    MethodNotFoundError,
    ServerError,
)
from nimiqrpc.rpc.schemas import SchemaValidationError


class TestRequest:
    def test_to_dict(self) -> None:
        request = Request("getBalance", ["NQ07 0000"], id=3)
        assert request.to_dict() == {
            "jsonrpc": "2.0",
            "method": "getBalance",
            "params": ["NQ07 0000"],
            "id": 3,
        }

    def test_params_omitted_when_none(self) -> None:
        payload = json.loads(Request("blockNumber", id=1).to_json())
        assert "params" not in payload
        assert payload["jsonrpc"] == "2.0"

    @pytest.mark.parametrize(
        "params",
        [None, [], [1, True], ["abc", 10], {"from": "NQ01", "value": 5}, "single"],
    )
    def test_json_round_trip(self, params) -> None:
        request = Request("someMethod", params, id=42)
        decoded = Request.from_json(request.to_json())
        assert decoded.method == request.method
        assert decoded.params == request.params
        assert decoded.id == request.id

    def test_string_id_round_trip(self) -> None:
        request = Request("mining", id="abc")
        assert Request.from_json(request.to_json()).id == "abc"

    def test_from_json_rejects_missing_method(self) -> None:
        with pytest.raises(SchemaValidationError):
            Request.from_json(b'{"jsonrpc": "2.0", "id": 1}')

    def test_from_json_rejects_invalid_json(self) -> None:
        with pytest.raises(SchemaValidationError):
            Request.from_json(b"{not json")


class TestParseResponse:
    def test_result(self) -> None:
        response = parse_response(b'{"jsonrpc": "2.0", "result": 1234, "id": 1}')
        assert response == Response(id=1, result=1234)

    def test_error(self) -> None:
        response = parse_response(
            b'{"jsonrpc": "2.0", "error": {"code": -32601, "message": "nope"}, "id": 2}'
        )
        assert response.error == RPCErrorObject(code=-32601, message="nope")
        assert response.error.kind is ErrorKind.METHOD_NOT_FOUND

    def test_null_error_is_no_error(self) -> None:
        response = parse_response(b'{"jsonrpc": "2.0", "result": true, "error": null, "id": 1}')
        assert response.error is None
        assert response.result is True

    @pytest.mark.parametrize(
        "body",
        [
            b"",
            b"<html>Bad gateway</html>",
            b"[1, 2, 3]",
            b'{"jsonrpc": "2.0", "result": 1}',
            b'{"jsonrpc": "1.0", "result": 1, "id": 1}',
            b'{"jsonrpc": "2.0", "result": 1, "id": 1.5}',
            b'{"jsonrpc": "2.0", "error": {"message": "no code"}, "id": 1}',
            b'{"jsonrpc": "2.0", "error": {"code": "x"}, "id": 1}',
        ],
    )
    def test_malformed(self, body: bytes) -> None:
        with pytest.raises(MalformedResponseError):
            parse_response(body)

    def test_malformed_lists_schema_errors(self) -> None:
        with pytest.raises(MalformedResponseError) as exc_info:
            parse_response(b'{"jsonrpc": "2.0", "result": 1}')
        assert any("id" in error for error in exc_info.value.errors)


class TestCheckResponse:
    def test_returns_result(self) -> None:
        request = Request("blockNumber", id=5)
        assert check_response(request, Response(id=5, result=99)) == 99

    def test_id_mismatch(self) -> None:
        request = Request("blockNumber", id=5)
        with pytest.raises(IDMismatchError) as exc_info:
            check_response(request, Response(id=6, result=99))
        assert exc_info.value.request_id == 5
        assert exc_info.value.response_id == 6

    def test_id_mismatch_wins_over_error(self) -> None:
        request = Request("blockNumber", id=5)
        response = Response(id=4, error=RPCErrorObject(code=-32601, message="nope"))
        with pytest.raises(IDMismatchError):
            check_response(request, response)

    @pytest.mark.parametrize("response_id", ["5", None])
    def test_id_type_must_match(self, response_id) -> None:
        with pytest.raises(IDMismatchError):
            check_response(Request("mining", id=5), Response(id=response_id, result=True))

    def test_reserved_error_code(self) -> None:
        request = Request("noSuchMethod", id=1)
        response = Response(id=1, error=RPCErrorObject(code=-32601, message="nope"))
        with pytest.raises(MethodNotFoundError):
            check_response(request, response)

    def test_server_error_range(self) -> None:
        request = Request("mining", id=1)
        response = Response(id=1, error=RPCErrorObject(code=-32010))
        with pytest.raises(ServerError):
            check_response(request, response)

    def test_application_error_keeps_message(self) -> None:
        request = Request("sendTransaction", id=1)
        response = Response(
            id=1, error=RPCErrorObject(code=1, message="Invalid transaction", data="fee")
        )
        with pytest.raises(ApplicationError) as exc_info:
            check_response(request, response)
        assert exc_info.value.message == "Invalid transaction"
        assert exc_info.value.data == "fee"

    def test_zero_error_code_is_success(self) -> None:
        request = Request("mining", id=1)
        response = Response(id=1, result=False, error=RPCErrorObject(code=0))
        assert check_response(request, response) is False
