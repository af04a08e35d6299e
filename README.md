# subleq_spire

A shared-memory battle royale for SUBLEQ programs. Gladiators are loaded into
one memory space, run round-robin, and may overwrite each other's code. The
last one still running wins. Battle results feed an ELO rating system, a
Hall of Fame of elite programs and a replay buffer of token sequences.

The package has no dependencies outside the standard library.

## SUBLEQ

Each instruction is a triplet `(A, B, C)`:

```
mem[B] -= mem[A]
if mem[B] <= 0: pc = C
else:           pc += 3
```

The subtraction wraps to the signed 64-bit range. A program halts when its
three operand cells would run past the end of memory, when `A` or `B` is
outside memory, when it branches to a `C` outside memory, or after
`MAX_CYCLES` (10,000) executed instructions.

## Modules

### `subleq_spire.vm`

`SubleqVM` is one program running on a shared memory list.

- `SubleqVM.load(program, base_addr, memory)` copies the program into
  `memory` at `base_addr` (cells past the end are dropped) and returns a VM
  with `pc` at `base_addr`.
- `step(memory)` executes one instruction and returns whether the VM is
  still alive; `alive`, `pc` and `cycles` are updated in place.
- `run_to_death(memory)` steps until the VM halts.

### `subleq_spire.arena`

- `ArenaConfig(memory_size=1024, gladiator_slot_size=64, max_rounds=100_000)`.
- `Arena(config)` holds `memory`, `gladiators` and its own copy of `config`.
  - `spawn(programs)` clears memory and loads program `i` at
    `i * gladiator_slot_size`. If the slots do not fit, `memory_size` grows to
    `len(programs) * gladiator_slot_size`.
  - `run_battle()` gives each living gladiator one step per round until at
    most one is alive or `max_rounds` is reached, and returns a
    `BattleResult` with `winner_index` (`None` unless exactly one survived),
    `total_rounds`, `survivors` and `elimination_order` (earliest first).
  - `extract_program(index)` returns a copy of gladiator `index`'s memory slot.

### `subleq_spire.constraint`

The token vocabulary: `START` (id 0), `END` (id 1) and 64 address tokens
(ids 2–65).

- `Token.start()`, `Token.end()`, `Token.addr(address)`; `to_id()` and
  `Token.from_id(token_id)`, which returns `None` outside the vocabulary.
- `SubleqConstraint` is a state machine over `GenState` that accepts only
  `START`, one or more address triplets, then `END`.
  `allowed_token_mask()` gives a boolean mask over the vocabulary;
  `advance(token)` raises `ConstraintViolation` (a `ValueError`) for a token
  that is not allowed; `is_done()` reports completion.
- `encode_program(program)` wraps a program in `START`/`END`, clamping each
  cell to 0–63; `decode_tokens(tokens)` keeps only the addresses;
  `tokens_to_ids` and `ids_to_tokens` convert between tokens and ids
  (unknown ids are skipped).

### `subleq_spire.elo`

- `elo_expected(rating_a, rating_b)` — probability that A wins.
- `elo_update(rating_a, rating_b, score_a, k=K_FACTOR)` — new ratings after
  one match (`score_a` 1, 0 or 0.5).
- `compute_battle_elos(num_fighters, elimination_order, winner_index, initial_elos)`
  — each eliminated fighter loses a match to everyone still alive at that
  moment; an outright winner gets a bonus of `K_FACTOR / 2`.

`DEFAULT_ELO` is 1500 and `K_FACTOR` is 32.

### `subleq_spire.hall_of_fame`

`HallOfFame(max_size)` holds `HoFEntry(token_ids, program, elo, generation_born)`
records and a `last_generation` counter.

- `try_promote(entry)` adds the entry while there is room, otherwise replaces
  the lowest-rated entry if the new one rates higher; returns whether it was
  inducted.
- `select_champions(count)` returns up to `count` distinct random
  `(index, entry_copy)` pairs.
- `update_elo(index, new_elo)` (unknown indices are ignored) and
  `all_token_ids()`.
- `save(path)` writes JSON; `HallOfFame.load(path, default_max_size)` reads
  it back, or returns an empty Hall of Fame if the file is missing or
  unreadable.

### `subleq_spire.replay_buffer`

`ReplayBuffer(max_capacity)` is a first-in first-out store of token id
sequences.

- `push(token_ids)` drops the oldest sequence when full.
- `save(path)` / `ReplayBuffer.load(path, default_capacity)` as JSON, with an
  empty buffer when the file is missing or unreadable.
- `make_weighted_batch(hof_sequences, max_seq_len, batch_size, hof_ratio)`
  samples about `hof_ratio` of the rows from `hof_sequences` and the rest
  from the buffer, and returns `(inputs, targets)` as lists of lists:
  each row pairs `tokens[:-1]` with `tokens[1:]`, padded to a common length
  (inputs with 0, targets with the `END` id) and limited to `max_seq_len`
  tokens. It returns `None` when there is nothing to sample.

### `subleq_spire.curriculum`

- `CurriculumStage(until_generation, arena_memory_size, gladiator_slot_size, max_rounds)`
  and `DEFAULT_CURRICULUM` (256, 512, then 1024 cells).
- `curriculum_arena_config(generation, stages)` returns the `ArenaConfig` of
  the first stage still covering `generation`, the last stage past them all,
  or the defaults with no stages.
- `generate_random_program(max_tokens)` returns a random valid program and
  its tokens, with 1 to `max_tokens // 3` instructions.
- `seed_random_programs(buffer, count, max_tokens)` pushes random programs
  into a `ReplayBuffer` as token ids.

## Example

```python
from subleq_spire.arena import Arena, ArenaConfig
from subleq_spire.elo import compute_battle_elos

arena = Arena(ArenaConfig(memory_size=256, gladiator_slot_size=64, max_rounds=10_000))
arena.spawn([[999, 0, 0], [64, 64, 64]])
result = arena.run_battle()

print(result.winner_index)        # 1
print(result.elimination_order)   # [0]

elos = compute_battle_elos(2, result.elimination_order, result.winner_index, [1500.0, 1500.0])
```

## What this package does not do

It provides the arena, the ratings, the token grammar and the data stores,
but no program generator that learns: there is no neural model, no training
step and no generation-by-generation evolution loop, and no model
checkpoints. New programs come from `generate_random_program` or from your
own code. There is no command-line entry point; everything is used as a
library.

The tests are written for pytest, available through the `test` extra.