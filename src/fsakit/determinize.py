# Copyright 2026 The fsakit Authors. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY THE FSAKIT AUTHORS ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL THE FSAKIT AUTHORS OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT,
# INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING,
# BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE,
# DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of the fsakit authors.

"""
Transformers that remove nondeterminism: epsilon elimination (epsilon-NFA to
NFA) and subset construction (NFA to DFA).

Both functions leave their argument untouched and return a new
:class:`~fsakit.automaton.Automaton`.
"""

from loguru import logger

from fsakit.automaton import Automaton, AutomatonKind
from fsakit.util import subset_name


def eliminate_epsilon(fsa):
    """
    Returns an automaton accepting the same words as ``fsa`` but without
    epsilon moves.

    For each state ``s`` and symbol ``a``, the new moves out of ``s`` on ``a``
    are the epsilon-closure of every ``a``-move out of the epsilon-closure of
    ``s``. A state becomes accepting if its epsilon-closure contains an
    accepting state. States, alphabet and start state are unchanged.

    Args:
        fsa (Automaton): An epsilon-NFA.

    Returns:
        Automaton: An NFA (or DFA) with no epsilon moves.

    Raises:
        InvalidAutomatonType: If ``fsa`` has no epsilon moves.
    """
    fsa.require((AutomatonKind.EPSILON_NFA,), "Epsilon elimination")

    symbols = fsa.symbols
    transitions = {}
    final_states = set()
    for state in sorted(fsa.states):
        closure = fsa.epsilon_closure({state})
        if fsa.is_final(closure):
            final_states.add(state)
        for symbol in symbols:
            dests = fsa.next_states(closure, symbol)
            if dests:
                transitions[state, symbol] = fsa.epsilon_closure(dests)

    result = Automaton(
        fsa.states, fsa.alphabet, transitions, fsa.start_state, final_states
    )
    logger.debug(
        "Eliminated epsilon moves: {} states, {} transitions, now {}",
        len(result),
        len(result.transitions),
        result.classify().value,
    )
    return result


def determinize(fsa):
    """
    Converts an NFA to an equivalent DFA using subset construction.

    Each reachable set of NFA states becomes one DFA state named by
    :func:`fsakit.util.subset_name`, so the names only depend on the set
    members and two runs produce identical automata. Sets with no move on a
    symbol get no transition on it: the result may be a partial DFA, no trap
    state is added.

    Args:
        fsa (Automaton): An NFA or DFA without epsilon moves.

    Returns:
        Automaton: A DFA.

    Raises:
        InvalidAutomatonType: If ``fsa`` still has epsilon moves.

    Example:
        >>> nfa = Automaton({"p", "q"}, {"a"}, {("p", "a"): {"p", "q"}}, "p", {"q"})
        >>> dfa = determinize(nfa)
        >>> sorted(dfa.states)
        ['{p,q}', '{p}']
    """
    fsa.require((AutomatonKind.NFA, AutomatonKind.DFA), "Subset construction")

    initial = frozenset((fsa.start_state,))
    start = subset_name(initial)
    states = {start}
    final_states = set()
    if fsa.is_final(initial):
        final_states.add(start)
    transitions = {}

    symbols = fsa.symbols
    frontier = [initial]
    seen = {initial}
    while frontier:
        current = frontier.pop()
        name = subset_name(current)
        for symbol in symbols:
            new_state = frozenset(fsa.next_states(current, symbol))
            if not new_state:
                continue
            new_name = subset_name(new_state)
            if new_state not in seen:
                frontier.append(new_state)
                seen.add(new_state)
                states.add(new_name)
                if fsa.is_final(new_state):
                    final_states.add(new_name)
            transitions[name, symbol] = new_name

    result = Automaton(states, fsa.alphabet, transitions, start, final_states)
    logger.debug(
        "Subset construction turned {} states into {}", len(fsa), len(result)
    )
    return result
