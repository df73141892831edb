# glossa

A library for writing phonetic transcriptions, describing phonemes, and
running finite automata.

## What it offers

### Diacritic placement

- `glossa.pos`: `Position` (`TOP`, `LEFT`, `BOTTOM`, `RIGHT`),
  `ALL_POSITIONS` (the iteration order: left, top, bottom, right),
  `TotalMap` (one value per position, with `from_fn`, `map`,
  `map_with_pos`, `transpose`, `items`, indexing by position) and
  `PartialMap` (an ordered map of at most four positions; `insert` raises
  `DuplicatePositionError` for a repeated position and
  `PartialMapFullError` when full).
- `glossa.slot`: `Hint` (`REGULAR`, `OBSTRUCTED`), `Slot` (the diacritics at
  one position, with `render(position)`) and `hints(character)`, which gives
  the slot hints for a known base letter or `None`.
- `glossa.cluster`: `solve(hints, diacritics)` tries every way of placing the
  diacritics and returns a `TotalMap` of `Slot`s with the lowest cost, raising
  `NoSolutionError` when none fits. `GraphemeCluster.solve(character, hints,
  diacritics)` does the same for a base character, and `str()` of a cluster
  writes the character followed by the marks. Any object with a
  `renderings()` method returning a `PartialMap[str]` serves as a diacritic.
  `Symbol` is also provided.

### Phonetics

- `glossa.features`: `Phonation` and `Cavity`.
- `glossa.diacritic`: `PhoneticDiacritic`, the IPA marks used below.
- `glossa.vowel`: `Height`, `Frontness`, `Roundedness` and `Vowel`.
- `glossa.consonant`: `Place`, `Manner` (with `try_lenit`, `try_fortify`,
  `lenit`, `fortify`, which return a manner rather than changing one) and
  `Consonant`.
- `glossa.phone`: `Phone`, wrapping a `Vowel` or a `Consonant`, with
  `syllabic()`, `cavity()` and `phonation()`.

`Vowel`, `Consonant` and `Phone` render as IPA with `str()`;
`grapheme_cluster()` returns the underlying `GraphemeCluster`.

### Phonology

`glossa.phonology` holds `Phoneme`, `Allophone`, `PhonemeSpec` (a phoneme and
its allophones in declaration order) and the conditions `Always`, `Never`,
`Eq`, `Neq`, `Not`, `AnyOf`, `AllOf`, `Seq` and `Named`. All are comparable,
orderable and hashable.

### Automata

- `glossa.dfa`: deterministic `Automaton` with `start()` and `test(symbols)`;
  an `Execution` advances with `step(symbol)`, and `current_state()` raises
  `UnrecognizedInput` once the input has left the automaton.
- `glossa.nfa`: nondeterministic `Automaton`, plus `Automaton.merge`, which
  joins several automatons at a shared initial state 0.
- `glossa.em_nfa`: automata with empty moves, described with
  `TransitionOutput(empty=..., symbols=...)`.
- `glossa.compiler`: `nfa_to_dfa(automaton)` builds a deterministic
  automaton that starts in state 0.

States are plain integers; symbols are any hashable values.

### Coproducts

`glossa.coproduct` tags values by their place in a sequence: the value at
place `n` is `n` layers of `Tail` around a `Head`. `hiter`, `hvec` and
`harray` produce an iterator, a list and a tuple of such values; `inner()`
unwraps one. `Conil` is the empty coproduct and cannot be constructed.

## Installing

```
pip install .
```

## Example

```python
from glossa.vowel import Vowel, Height, Frontness, Roundedness
from glossa.features import Phonation, Cavity

vowel = Vowel(
    height=Height.MID,
    frontness=Frontness.FRONT,
    roundedness=Roundedness.UNROUNDED,
    phonation=Phonation.VOICELESS,
    cavity=Cavity.NASAL,
    syllabic=False,
)
print(vowel)  # ẽ̥̯˕
```

Automata accept any iterable of symbols:

```python
from glossa.nfa import Automaton
from glossa.compiler import nfa_to_dfa

nfa = Automaton(
    initial_state=0,
    final_states={1},
    transitions={0: {False: {0}, True: {0, 1}}},
)
dfa = nfa_to_dfa(nfa)
print(dfa.test([False, True]))  # True
```

## What it does not do

- There is no command-line program; everything is used from Python.
- The phonology conditions are data only: nothing evaluates them against a
  word or applies allophone rules.
- Only the base letters known to `glossa.slot.hints` can be rendered;
  rendering a vowel or consonant whose letter is not among them raises
  `ValueError`.

## Running the tests

```
pip install .[test]
pytest
```