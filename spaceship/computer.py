"""Intcode computer: memory, instruction decoding and input/output queues."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import IntEnum


class Intcode(IntEnum):
    """Opcodes understood by the computer."""

    ADD = 1
    MULTIPLY = 2
    INPUT = 3
    OUTPUT = 4
    JUMP_IF_TRUE = 5
    JUMP_IF_FALSE = 6
    LESS_THAN = 7
    EQUAL_TO = 8
    ADJUST_BASE = 9
    HALT = 99


class IntcodeError(Exception):
    """Raised when an instruction cannot be decoded."""


class _Mode(IntEnum):
    POSITION = 0
    IMMEDIATE = 1
    RELATIVE = 2


_WIDTH = {
    Intcode.ADD: 4,
    Intcode.MULTIPLY: 4,
    Intcode.INPUT: 2,
    Intcode.OUTPUT: 2,
    Intcode.JUMP_IF_TRUE: 3,
    Intcode.JUMP_IF_FALSE: 3,
    Intcode.LESS_THAN: 4,
    Intcode.EQUAL_TO: 4,
    Intcode.ADJUST_BASE: 2,
    Intcode.HALT: 1,
}

_ARITHMETIC = {
    Intcode.ADD: lambda a, b: a + b,
    Intcode.MULTIPLY: lambda a, b: a * b,
    Intcode.LESS_THAN: lambda a, b: int(a < b),
    Intcode.EQUAL_TO: lambda a, b: int(a == b),
}


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Integer division rounding toward zero, with the matching remainder."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def _mode(mask: int, index: int) -> _Mode:
    shifted, _ = _trunc_divmod(mask, 10 ** (index - 1))
    _, digit = _trunc_divmod(shifted, 10)
    try:
        return _Mode(digit)
    except ValueError:
        return _Mode.POSITION


class Computer:
    """An Intcode machine with ten times the program size as memory."""

    def __init__(self, program: Iterable[int]) -> None:
        code = list(program)
        self.memory: list[int] = code + [0] * (len(code) * 9)
        self.inputs: deque[int] = deque()
        self.outputs: deque[int] = deque()
        self.instruction_pointer = 0
        self.relative_base = 0

    def _fetch(self, address: int) -> int:
        if not 0 <= address < len(self.memory):
            raise IndexError(f"address {address} is outside memory")
        return self.memory[address]

    def _store(self, address: int, value: int) -> None:
        if not 0 <= address < len(self.memory):
            raise IndexError(f"address {address} is outside memory")
        self.memory[address] = value

    def _decode(self) -> tuple[Intcode | None, int, int]:
        word = self._fetch(self.instruction_pointer)
        mask, opcode = _trunc_divmod(word, 100)
        try:
            return Intcode(opcode), mask, opcode
        except ValueError:
            return None, mask, opcode

    def _param(self, index: int) -> int:
        return self._fetch(self.instruction_pointer + index)

    def _read(self, mask: int, index: int) -> int:
        mode = _mode(mask, index)
        raw = self._param(index)
        if mode is _Mode.IMMEDIATE:
            return raw
        if mode is _Mode.RELATIVE:
            return self._fetch(raw + self.relative_base)
        return self._fetch(raw)

    def _write(self, mask: int, index: int, value: int) -> None:
        mode = _mode(mask, index)
        raw = self._param(index)
        if mode is _Mode.IMMEDIATE:
            return
        address = raw + self.relative_base if mode is _Mode.RELATIVE else raw
        self._store(address, value)

    def _execute(self, op: Intcode, mask: int) -> None:
        if op in _ARITHMETIC:
            left = self._read(mask, 1)
            right = self._read(mask, 2)
            self._write(mask, 3, _ARITHMETIC[op](left, right))
        elif op is Intcode.INPUT:
            self._write(mask, 1, self.read_input())
        elif op is Intcode.OUTPUT:
            self.outputs.append(self._read(mask, 1))
        elif op is Intcode.ADJUST_BASE:
            self.adjust_base(self._read(mask, 1))
        elif op in (Intcode.JUMP_IF_TRUE, Intcode.JUMP_IF_FALSE):
            wanted = op is Intcode.JUMP_IF_TRUE
            if (self._read(mask, 1) != 0) == wanted:
                self.instruction_pointer = self._read(mask, 2)
                return
        self.move_instruction_pointer(_WIDTH[op])

    def calculate(self) -> None:
        """Run until a halt or an unknown opcode is reached."""
        while True:
            op, mask, _ = self._decode()
            if op is None or op is Intcode.HALT:
                return
            self._execute(op, mask)

    def run_instruction(self) -> Intcode:
        """Execute a single instruction and return its opcode."""
        op, mask, raw = self._decode()
        if op is None:
            raise IntcodeError(
                f"unknown opcode {raw} at address {self.instruction_pointer}"
            )
        self._execute(op, mask)
        return op

    def write_input(self, values: Iterable[int]) -> None:
        """Append values to the input queue."""
        self.inputs.extend(values)

    def read_input(self) -> int:
        """Take the next value from the input queue."""
        if not self.inputs:
            raise IndexError("input queue is empty")
        return self.inputs.popleft()

    def write_output(self, values: Iterable[int]) -> None:
        """Append values to the output queue."""
        self.outputs.extend(values)

    def read_output(self) -> int:
        """Take the next value from the output queue."""
        if not self.outputs:
            raise IndexError("output queue is empty")
        return self.outputs.popleft()

    def has_output(self) -> bool:
        """Whether output values are waiting to be read."""
        return bool(self.outputs)

    def adjust_base(self, offset: int) -> None:
        """Shift the relative base by offset."""
        self.relative_base += offset

    def move_instruction_pointer(self, offset: int) -> None:
        """Advance the instruction pointer by offset."""
        self.instruction_pointer += offset