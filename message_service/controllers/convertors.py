"""Path convertor accepting only unsigned 64-bit message IDs."""

from __future__ import annotations

from starlette.convertors import Convertor, register_url_convertor

MAX_MESSAGE_ID = 2**64 - 1


def _bounded_digits_pattern(maximum: int) -> str:
    """Return a regex matching decimal strings whose value is at most ``maximum``.

    Leading zeros are allowed. Without them a match has at most as many digits
    as ``maximum``, so larger values never match and the route is a miss.
    """

    digits = str(maximum)
    width = len(digits)
    alternatives = [f"[0-9]{{1,{width - 1}}}"] if width > 1 else []
    for index, digit in enumerate(digits):
        upper = int(digit) - 1
        # A full-width value has no leading zero, so its first digit is >= 1.
        lowest = 1 if index == 0 else 0
        if upper < lowest:
            continue
        lead = f"[{lowest}-{upper}]"
        rest = width - index - 1
        tail = f"[0-9]{{{rest}}}" if rest else ""
        alternatives.append(f"{digits[:index]}{lead}{tail}")
    alternatives.append(digits)
    return "0*(?:" + "|".join(alternatives) + ")"


class UnsignedIntConvertor(Convertor):
    regex = _bounded_digits_pattern(MAX_MESSAGE_ID)

    def convert(self, value: str) -> int:
        # Strip padding first; long runs of zeros would trip int()'s digit limit.
        return int(value.lstrip("0") or "0")

    def to_string(self, value: int) -> str:
        value = int(value)
        if not 0 <= value <= MAX_MESSAGE_ID:
            raise ValueError(f"message ID out of range: {value}")
        return str(value)


register_url_convertor("u64", UnsignedIntConvertor())


__all__ = ["MAX_MESSAGE_ID", "UnsignedIntConvertor"]
