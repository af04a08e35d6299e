"""Constrained token grammar for generating SUBLEQ programs.

A program is ``START``, one or more address triplets ``(A, B, C)`` with each
address in ``[0, 63]``, and then ``END``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, auto

NUM_ADDRESSES = 64
VOCAB_SIZE = NUM_ADDRESSES + 2

START_TOKEN = 0
END_TOKEN = 1
ADDR_OFFSET = 2


class ConstraintViolation(ValueError):
    """A token was not allowed in the current generation state."""


class TokenKind(Enum):
    START = auto()
    END = auto()
    ADDR = auto()


@dataclass(frozen=True)
class Token:
    """A token of the SUBLEQ vocabulary."""

    kind: TokenKind
    address: int | None = None

    def __post_init__(self) -> None:
        if self.kind is TokenKind.ADDR:
            if self.address is None or not 0 <= self.address < NUM_ADDRESSES:
                raise ValueError(f"address out of range: {self.address!r}")
        elif self.address is not None:
            raise ValueError(f"{self.kind.name} token carries no address")

    @classmethod
    def start(cls) -> Token:
        return cls(TokenKind.START)

    @classmethod
    def end(cls) -> Token:
        return cls(TokenKind.END)

    @classmethod
    def addr(cls, address: int) -> Token:
        return cls(TokenKind.ADDR, address)

    @property
    def is_addr(self) -> bool:
        return self.kind is TokenKind.ADDR

    def to_id(self) -> int:
        """Numeric vocabulary id of this token."""
        if self.kind is TokenKind.START:
            return START_TOKEN
        if self.kind is TokenKind.END:
            return END_TOKEN
        return ADDR_OFFSET + self.address

    @classmethod
    def from_id(cls, token_id: int) -> Token | None:
        """Token for a vocabulary id, or ``None`` if the id is outside it."""
        if token_id == START_TOKEN:
            return cls.start()
        if token_id == END_TOKEN:
            return cls.end()
        if ADDR_OFFSET <= token_id < VOCAB_SIZE:
            return cls.addr(token_id - ADDR_OFFSET)
        return None


class GenState(Enum):
    EXPECT_START = auto()
    EXPECT_A = auto()
    EXPECT_B = auto()
    EXPECT_C = auto()
    EXPECT_END_OR_A = auto()
    DONE = auto()


_OPERAND_NEXT = {
    GenState.EXPECT_A: (GenState.EXPECT_B, "A"),
    GenState.EXPECT_B: (GenState.EXPECT_C, "B"),
    GenState.EXPECT_C: (GenState.EXPECT_END_OR_A, "C"),
}


@dataclass
class SubleqConstraint:
    """State machine that only accepts syntactically valid programs."""

    state: GenState = field(default=GenState.EXPECT_START)

    def allowed_token_mask(self) -> list[bool]:
        """Boolean mask over the vocabulary: ``True`` where a token is allowed."""
        mask = [False] * VOCAB_SIZE
        if self.state is GenState.EXPECT_START:
            mask[START_TOKEN] = True
        elif self.state in _OPERAND_NEXT or self.state is GenState.EXPECT_END_OR_A:
            mask[ADDR_OFFSET:] = [True] * NUM_ADDRESSES
            if self.state is GenState.EXPECT_END_OR_A:
                mask[END_TOKEN] = True
        return mask

    def advance(self, token: Token) -> None:
        """Move to the next state after ``token``; raise if it is not allowed."""
        state = self.state
        if state is GenState.EXPECT_START:
            if token.kind is not TokenKind.START:
                raise ConstraintViolation("Expected START token")
            self.state = GenState.EXPECT_A
        elif state in _OPERAND_NEXT:
            next_state, operand = _OPERAND_NEXT[state]
            if not token.is_addr:
                raise ConstraintViolation(f"Expected address token for {operand}")
            self.state = next_state
        elif state is GenState.EXPECT_END_OR_A:
            if token.kind is TokenKind.END:
                self.state = GenState.DONE
            elif token.is_addr:
                self.state = GenState.EXPECT_B
            else:
                raise ConstraintViolation("START not allowed here")
        else:
            raise ConstraintViolation("Generation already complete")

    def is_done(self) -> bool:
        return self.state is GenState.DONE


def decode_tokens(tokens: Iterable[Token]) -> list[int]:
    """Addresses of a token sequence, with START and END dropped."""
    return [t.address for t in tokens if t.is_addr]


def encode_program(program: Iterable[int]) -> list[Token]:
    """Wrap a program in START/END, clamping each cell to the address range."""
    body = [Token.addr(min(max(cell, 0), NUM_ADDRESSES - 1)) for cell in program]
    return [Token.start(), *body, Token.end()]


def tokens_to_ids(tokens: Iterable[Token]) -> list[int]:
    return [t.to_id() for t in tokens]


def ids_to_tokens(ids: Iterable[int]) -> list[Token]:
    """Tokens for the given ids; ids outside the vocabulary are skipped."""
    return [tok for tok in map(Token.from_id, ids) if tok is not None]