"""Tests for the SnapSave cipher: argument parsing and segment decoding."""

from __future__ import annotations

import pytest

from snapsaver.domain.entities import CipherArguments
from snapsaver.domain.exceptions import MalformedPayloadError, PayloadEncodingError
from snapsaver.infrastructure.snapsave.cipher import (
    decode_payload,
    decode_segments,
    parse_cipher_arguments,
    repair_encoding,
)

_MAP = "VwLxfSmQ"  # digits V=0 w=1 L=2 x=3 f=4, delimiter S (index 5)

# "A" = 65 + 43 = 108 = 413 (base 5)
_CIPHER_A = "fwxS"
# "é" = C3 A9 -> 238, 212 = 1423, 1322 (base 5)
_CIPHER_E_ACUTE = "wfLxSwxLLS"


def _call(args: str) -> str:
    return f"var x=1;eval(function(h,u,n,t,e,r){{return decodeURIComponent(escape(r))}}({args}))"


def _args(cipher: str, *, offset: int = 43, base: int = 5) -> CipherArguments:
    return CipherArguments(
        cipher_text=cipher,
        delimiter_char="28",
        char_map=_MAP,
        subtract_offset=offset,
        base=base,
    )


class TestParseCipherArguments:
    def test_parses_five_arguments_and_ignores_extra(self) -> None:
        args = parse_cipher_arguments(_call(f'"{_CIPHER_A}",28,"{_MAP}",43,5,17'))
        assert args == _args(_CIPHER_A)
        assert args.delimiter == "S"

    def test_strips_whitespace_and_single_quotes(self) -> None:
        args = parse_cipher_arguments(_call(f" '{_CIPHER_A}' , 28 , '{_MAP}' , 43 , 5 "))
        assert args.cipher_text == _CIPHER_A
        assert args.char_map == _MAP
        assert args.subtract_offset == 43
        assert args.base == 5

    def test_quoted_argument_may_contain_commas(self) -> None:
        args = parse_cipher_arguments(_call(f'"a,b",28,"{_MAP}",43,5'))
        assert args.cipher_text == "a,b"

    def test_missing_call_marker(self) -> None:
        with pytest.raises(MalformedPayloadError, match="call marker"):
            parse_cipher_arguments("<html>Error</html>")

    def test_missing_closing_marker(self) -> None:
        raw = f'decodeURIComponent(escape(r))}}("{_CIPHER_A}",28,"{_MAP}",43,5,17'
        with pytest.raises(MalformedPayloadError, match="closing marker"):
            parse_cipher_arguments(raw)

    def test_unterminated_quote(self) -> None:
        raw = f'decodeURIComponent(escape(r))}}("{_CIPHER_A},28,43,5))'
        with pytest.raises(MalformedPayloadError, match="unterminated quoted"):
            parse_cipher_arguments(raw)

    def test_too_few_arguments(self) -> None:
        with pytest.raises(MalformedPayloadError, match="expected 5"):
            parse_cipher_arguments(_call(f'"{_CIPHER_A}",28,"{_MAP}"'))

    def test_empty_argument_list(self) -> None:
        with pytest.raises(MalformedPayloadError, match="got 0"):
            parse_cipher_arguments(_call(""))

    def test_non_integer_base(self) -> None:
        with pytest.raises(MalformedPayloadError, match="base is not an integer"):
            parse_cipher_arguments(_call(f'"{_CIPHER_A}",28,"{_MAP}",43,"five"'))

    def test_non_integer_offset(self) -> None:
        with pytest.raises(MalformedPayloadError, match="subtract offset"):
            parse_cipher_arguments(_call(f'"{_CIPHER_A}",28,"{_MAP}",x,5'))

    def test_base_outside_symbol_map(self) -> None:
        with pytest.raises(MalformedPayloadError, match="no delimiter"):
            parse_cipher_arguments(_call(f'"{_CIPHER_A}",28,"{_MAP}",43,8'))

    def test_base_out_of_range(self) -> None:
        with pytest.raises(MalformedPayloadError, match="base out of range"):
            parse_cipher_arguments(_call(f'"{_CIPHER_A}",28,"{_MAP}",43,1'))

    def test_garbage_between_arguments(self) -> None:
        with pytest.raises(MalformedPayloadError, match="unexpected character"):
            parse_cipher_arguments(_call(f'"{_CIPHER_A}" 28,"{_MAP}",43,5'))


class TestDecodeSegments:
    def test_single_segment(self) -> None:
        assert decode_segments(_args(_CIPHER_A)) == b"A"

    def test_multibyte_character_is_two_segments(self) -> None:
        assert decode_segments(_args(_CIPHER_E_ACUTE)) == "é".encode()

    def test_empty_cipher_text(self) -> None:
        assert decode_segments(_args("")) == b""

    def test_no_delimiter_fails_instead_of_looping(self) -> None:
        with pytest.raises(MalformedPayloadError, match="unterminated segment at offset 0"):
            decode_segments(_args("fwxfwxfwx"))

    def test_trailing_unterminated_segment(self) -> None:
        with pytest.raises(MalformedPayloadError, match="offset 4"):
            decode_segments(_args(_CIPHER_A + "fw"))

    def test_value_below_zero_is_not_a_byte(self) -> None:
        with pytest.raises(PayloadEncodingError, match="not a byte"):
            decode_segments(_args(_CIPHER_A, offset=200))

    def test_value_above_255_is_not_a_byte(self) -> None:
        with pytest.raises(PayloadEncodingError, match="not a byte"):
            decode_segments(_args("wfLxS", offset=-100))


class TestRepairEncoding:
    def test_decodes_utf8(self) -> None:
        assert repair_encoding("Café ☕".encode()) == "Café ☕"

    def test_invalid_utf8(self) -> None:
        with pytest.raises(PayloadEncodingError, match="not UTF-8"):
            repair_encoding(b"\xc3")


class TestDecodePayload:
    def test_decodes_text(self) -> None:
        assert decode_payload(_args(_CIPHER_A + _CIPHER_E_ACUTE)) == "Aé"

    def test_truncated_multibyte_sequence(self) -> None:
        # only the first byte of "é"
        with pytest.raises(PayloadEncodingError):
            decode_payload(_args("wfLxS"))

    def test_deterministic(self) -> None:
        args = _args(_CIPHER_A * 3 + _CIPHER_E_ACUTE)
        assert decode_payload(args) == decode_payload(args) == "AAAé"
