# automatakit

A small library for working with finite automata:

- deterministic automata (`automatakit.dfa.DFA`),
- nondeterministic automata with lambda moves (`automatakit.nfa.NFA`),
  including lambda elimination (`NFA.to_regular_nfa`) and the subset
  construction (`NFA.to_dfa`),
- regular expressions (`automatakit.regex.RegEx`), converted to postfix form
  and compiled to an NFA fragment by fragment (Thompson's construction).

Every automaton answers `accepts(word)` with an `AcceptCode`
(`automatakit.automaton`):

- `ACCEPTED` – the word is read completely and ends in an accepting state,
- `DENIED` – the word is read completely but ends outside the accepting states,
- `ABORT` – the word uses a symbol outside the automaton's alphabet, or no
  transition exists for some symbol along the way.

`AcceptCode.message()` gives `"Accepted!"`, `"Denied."` or `"Abort!"`.
`Automaton.test(word)` prints `Word <word> is: <message>` and returns the code.
The word passed in is never consumed; a plain string works as well as a `Word`.

## Installation

```
pip install automatakit
```

The package needs nothing beyond the standard library (Python 3.10 or later).

## Regular expressions

Literals are ASCII letters and digits. `+` is union, `*` is the Kleene star,
`.` is concatenation, and parentheses group. In infix notation the
concatenation operator may be left out; it is inserted where needed.

```python
from automatakit.regex import RegEx, RegExNotation

expr = RegEx("aa(a+b)b*", RegExNotation.INFIX)
print(expr.to_postfix())                # aa.ab+.b*.

nfa = expr.to_nfa()
print(nfa.accepts("aaab").message())    # Accepted!
print(nfa.accepts("bba").message())     # Abort!

dfa = nfa.to_dfa()
dfa.test("aabbbb")                      # prints: Word aabbbb is: Accepted!
```

Unbalanced parentheses, and operators without enough operands, raise
`RegExError` (a `ValueError`). An empty expression gives an NFA with the single
state `q0`, no transitions and no accepting states.

`build_fragment(symbol, namer, *fragments)` builds one piece of the
construction by hand: a literal takes no fragments, `*` takes one, `+` and `.`
take two. `namer` is a `StateMapper` (`automatakit.state_mapper`), which hands
out fresh state names `q0`, `q1`, …; `NFA.from_fragment` turns a fragment into
an automaton.

## Building automata by hand

```python
from automatakit.nfa import NFA
from automatakit.states import States
from automatakit.symbol import Symbol
from automatakit.transitions import Transition

nfa = NFA(
    [
        Transition("q0", Symbol("a"), States(["q0", "q2"])),
        Transition("q0", Symbol("b"), States(["q1"])),
        Transition("q1", Symbol("a"), States(["q4"])),
        Transition("q1", Symbol.LAMBDA, States(["q0"])),
        Transition("q2", Symbol("b"), States(["q3"])),
        Transition("q3", Symbol("c"), States(["q1", "q3"])),
    ],
    "q0",
    States(["q4"]),
)

print(nfa.accepts("bbba"))       # AcceptCode.ACCEPTED
closure = nfa.lambda_closure("q1")   # States of q0 and q1
regular = nfa.to_regular_nfa()   # same language, no lambda moves
dfa = nfa.to_dfa()               # states named q0, q1, ...
print(dfa)                       # transition table, one line per move
```

A `DFA` is built the same way, with `Transition(source, symbol, target)`
whose target is a single state. In a `DFATransitions` table the first
transition for a (state, symbol) pair wins; in an `NFATransitions` table the
targets of repeated pairs are merged. Lambda moves print as `λ`.

Supporting types:

- `State` – a state compared by name; `States` – an immutable, ordered set of
  states with `with_states`, `without`, `intersect`, `unite` and `format`
  (rendering `{ "q0", "q1" }`).
- `Symbol` – a single character with operator checks and `precedence()`.
- `Alphabet` – an ordered set of symbols; the lambda symbol is never added.
- `Word` – symbols consumed one at a time with `process_symbol()`, and
  `defined_over(alphabet)`.

## What it does not do

automatakit is a library only: it installs no command-line tool, does not
minimise automata, and does not read or write automata from files.