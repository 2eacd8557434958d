"""
Day 13: Distress Signal
=======================
Packets are nested lists of integers, e.g. ``[1,[2,[3,[4,[5,6,7]]]],8,9]``.
They are read with a small recursive-descent parser and compared with
the puzzle's ordering rules.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import List, Tuple, Union

from advent.inputs import read_lines, split_blocks
from advent.solvers.solver_errors import InputError, NoSolutionError

DAY = 13
INPUT_PATH = "inputs/day13.txt"

PacketValue = Union[int, List["PacketValue"]]

DIVIDER_PACKETS: Tuple[str, str] = ("[[2]]", "[[6]]")
DIGITS = frozenset("0123456789")


class PacketParser:
    """Recursive-descent parser over a single packet line."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def _error(self, reason: str) -> InputError:
        return InputError(f"{reason} at column {self.pos}: {self.text!r}", day=DAY)

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def parse(self) -> PacketValue:
        value = self._value()
        if self.pos != len(self.text):
            raise self._error("Trailing characters")
        return value

    def _value(self) -> PacketValue:
        char = self._peek()
        if char == "[":
            return self._list()
        if char in DIGITS:
            return self._integer()
        raise self._error("Expected a list or an integer")

    def _list(self) -> List[PacketValue]:
        self.pos += 1  # consume "["
        items: List[PacketValue] = []
        if self._peek() == "]":
            self.pos += 1
            return items
        while True:
            items.append(self._value())
            char = self._peek()
            self.pos += 1
            if char == "]":
                return items
            if char != ",":
                raise self._error("Expected ',' or ']'")

    def _integer(self) -> int:
        start = self.pos
        while self._peek() in DIGITS:
            self.pos += 1
        return int(self.text[start:self.pos])


def parse_packet(text: str) -> PacketValue:
    return PacketParser(text).parse()


def compare(left: PacketValue, right: PacketValue) -> int:
    """Negative when left sorts first, zero when equal, positive otherwise."""
    if isinstance(left, int) and isinstance(right, int):
        return (left > right) - (left < right)
    if isinstance(left, int):
        left = [left]
    if isinstance(right, int):
        right = [right]
    for left_item, right_item in zip(left, right):
        result = compare(left_item, right_item)
        if result:
            return result
    return (len(left) > len(right)) - (len(left) < len(right))


def parse_packet_pairs(lines: List[str]) -> List[Tuple[PacketValue, PacketValue]]:
    pairs = []
    for block in split_blocks(lines):
        if len(block) != 2:
            raise InputError(f"Expected a pair of packets, got {len(block)}", day=DAY)
        pairs.append((parse_packet(block[0]), parse_packet(block[1])))
    return pairs


def parse_packets(lines: List[str]) -> List[PacketValue]:
    return [parse_packet(line) for line in lines if line]


def part1(lines: List[str]) -> int:
    return sum(
        index
        for index, (left, right) in enumerate(parse_packet_pairs(lines), start=1)
        if compare(left, right) < 0
    )


def part2(lines: List[str]) -> int:
    dividers = [parse_packet(text) for text in DIVIDER_PACKETS]
    packets = sorted(parse_packets(lines) + dividers, key=cmp_to_key(compare))

    decoder_key = 1
    for divider in dividers:
        try:
            decoder_key *= packets.index(divider) + 1
        except ValueError:
            raise NoSolutionError(f"Divider {divider} not found", day=DAY) from None
    return decoder_key


def main():
    lines = read_lines(INPUT_PATH)
    print(f"Part 1: {part1(lines)}")
    print(f"Part 2: {part2(lines)}")


if __name__ == "__main__":
    main()
