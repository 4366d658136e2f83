"""Value objects for the SnapSave cipher envelope."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CipherArguments:
    """The five arguments SnapSave passes to its inline decoder function.

    ``char_map[base]`` terminates every encoded segment; the symbols before
    it in the map encode the digits ``0..base-1``.
    """

    cipher_text: str
    delimiter_char: str  # passed by the upstream, unused by the decoder
    char_map: str
    subtract_offset: int
    base: int

    @property
    def delimiter(self) -> str:
        return self.char_map[self.base]
