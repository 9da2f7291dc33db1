from __future__ import annotations

import pytest
from pydantic import ValidationError

from scrollback.codec import MSG_KIND
from scrollback.errors import DecodeError
from scrollback.kinds import PlainKind, Response


class TestPlainKind:
    """Payload-free kinds travel as bare strings."""

    @pytest.mark.parametrize(
        ("kind", "wire"),
        [
            (PlainKind.PRIVMSG, "PrivMsg"),
            (PlainKind.NOTICE, "Notice"),
            (PlainKind.ACTION, "Action"),
            (PlainKind.STATUS, "Status"),
        ],
    )
    def test_wire_name(self, kind: PlainKind, wire: str) -> None:
        assert MSG_KIND.to_obj(kind) == wire
        assert MSG_KIND.from_obj(wire) is kind

    def test_unknown_name_rejected(self) -> None:
        with pytest.raises(DecodeError):
            MSG_KIND.from_obj("Whisper")


class TestResponse:
    """Numeric replies keep their code through the explicit tagged shape."""

    @pytest.mark.parametrize("code", [0, 1, 332, 65535])
    def test_boundary_codes_round_trip(self, code: int) -> None:
        kind = Response(code=code)
        assert MSG_KIND.to_obj(kind) == {"tag": "Response", "code": code}
        assert MSG_KIND.loads(MSG_KIND.dumps(kind)) == kind

    @pytest.mark.parametrize("code", [-1, 65536])
    def test_out_of_range_rejected_on_construction(self, code: int) -> None:
        with pytest.raises(ValidationError):
            Response(code=code)

    @pytest.mark.parametrize("code", ["332", 3.5, True, None])
    def test_non_numeric_code_rejected_on_decode(self, code: object) -> None:
        with pytest.raises(DecodeError) as exc_info:
            MSG_KIND.from_obj({"tag": "Response", "code": code})
        assert exc_info.value.codec == "msg_kind"

    def test_missing_code_rejected(self) -> None:
        with pytest.raises(DecodeError):
            MSG_KIND.loads('{"tag": "Response"}')

    def test_response_is_not_a_plain_kind(self) -> None:
        assert Response(code=0) != PlainKind.STATUS
