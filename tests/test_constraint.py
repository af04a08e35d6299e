import pytest

from subleq_spire.constraint import (
    ADDR_OFFSET,
    END_TOKEN,
    START_TOKEN,
    VOCAB_SIZE,
    ConstraintViolation,
    GenState,
    SubleqConstraint,
    Token,
    decode_tokens,
    encode_program,
    ids_to_tokens,
    tokens_to_ids,
)


def test_token_roundtrip():
    for token_id in range(VOCAB_SIZE):
        token = Token.from_id(token_id)
        assert token.to_id() == token_id


def test_from_id_outside_vocabulary():
    assert Token.from_id(VOCAB_SIZE) is None


def test_addr_out_of_range_rejected():
    with pytest.raises(ValueError):
        Token.addr(64)


def test_start_only_allows_start():
    mask = SubleqConstraint().allowed_token_mask()
    assert mask[START_TOKEN]
    assert not mask[END_TOKEN]
    assert not any(mask[ADDR_OFFSET:])


def test_valid_sequence():
    c = SubleqConstraint()
    c.advance(Token.start())
    assert c.state is GenState.EXPECT_A

    c.advance(Token.addr(10))
    assert c.state is GenState.EXPECT_B
    c.advance(Token.addr(20))
    assert c.state is GenState.EXPECT_C
    c.advance(Token.addr(30))
    assert c.state is GenState.EXPECT_END_OR_A

    c.advance(Token.addr(5))
    assert c.state is GenState.EXPECT_B
    c.advance(Token.addr(5))
    assert c.state is GenState.EXPECT_C
    c.advance(Token.addr(0))
    assert c.state is GenState.EXPECT_END_OR_A

    c.advance(Token.end())
    assert c.is_done()


def test_expect_end_or_a_mask():
    c = SubleqConstraint()
    c.advance(Token.start())
    for _ in range(3):
        c.advance(Token.addr(0))
    mask = c.allowed_token_mask()
    assert not mask[START_TOKEN]
    assert mask[END_TOKEN]
    assert all(mask[ADDR_OFFSET:])


def test_done_mask_is_empty():
    c = SubleqConstraint(state=GenState.DONE)
    assert c.allowed_token_mask() == [False] * VOCAB_SIZE


def test_decode_tokens():
    tokens = [
        Token.start(),
        Token.addr(10),
        Token.addr(15),
        Token.addr(4),
        Token.addr(2),
        Token.addr(2),
        Token.addr(8),
        Token.end(),
    ]
    assert decode_tokens(tokens) == [10, 15, 4, 2, 2, 8]


def test_encode_program():
    tokens = encode_program([10, 15, 4])
    assert len(tokens) == 5
    assert tokens[0] == Token.start()
    assert tokens[4] == Token.end()
    assert decode_tokens(tokens) == [10, 15, 4]


def test_encode_program_clamps():
    assert decode_tokens(encode_program([-5, 100])) == [0, 63]


def test_ids_roundtrip():
    tokens = [Token.start(), Token.addr(5), Token.addr(10), Token.addr(63), Token.end()]
    ids = tokens_to_ids(tokens)
    assert ids == [0, 7, 12, 65, 1]
    assert ids_to_tokens(ids) == tokens


def test_ids_to_tokens_skips_unknown():
    assert ids_to_tokens([0, 500, 1]) == [Token.start(), Token.end()]


def test_invalid_start():
    c = SubleqConstraint()
    with pytest.raises(ConstraintViolation, match="Expected START token"):
        c.advance(Token.addr(5))


def test_end_inside_triplet_rejected():
    c = SubleqConstraint()
    c.advance(Token.start())
    with pytest.raises(ConstraintViolation, match="address token for A"):
        c.advance(Token.end())


def test_start_after_triplet_rejected():
    c = SubleqConstraint(state=GenState.EXPECT_END_OR_A)
    with pytest.raises(ConstraintViolation, match="START not allowed"):
        c.advance(Token.start())


def test_advance_after_done_rejected():
    c = SubleqConstraint(state=GenState.DONE)
    with pytest.raises(ConstraintViolation, match="already complete"):
        c.advance(Token.end())