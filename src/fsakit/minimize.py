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
DFA minimization.

Two independent algorithms are offered. They may name states differently but
always accept the same words:

* :func:`minimize_table_filling` marks distinguishable pairs of states
  (Myhill-Nerode) and merges the rest.
* :func:`minimize_partition_refinement` splits the final/non-final partition
  until every block is stable (Moore).

Both drop states that are unreachable from the start state and accept
partial DFAs: a missing move behaves like a move to a non-accepting trap
state, which never appears in the result.
"""

from loguru import logger

from fsakit.automaton import Automaton, AutomatonKind
from fsakit.util import Marker

# Stands for the implicit trap state of a partial DFA
TRASH = Marker("TRASH")

# Names of the states built by partition refinement are this prefix followed
# by the block number
MIN_PREFIX = "qMin"


def _deterministic_moves(fsa, states):
    # (state, symbol) -> the single destination, for the given states only
    symbols = fsa.symbols
    moves = {}
    for state in states:
        for symbol in symbols:
            dests = fsa.transitions.get((state, symbol))
            if dests:
                (moves[state, symbol],) = dests
    return moves


def _pair(p, q):
    if p is TRASH:
        return q, TRASH
    if q is TRASH or p < q:
        return p, q
    return q, p


def distinguishable_pairs(fsa):
    """
    Runs the table-filling fixed point over the reachable states of ``fsa``.

    Returns a dict mapping every unordered pair of reachable states, as a
    sorted tuple, to True if some word distinguishes the two states. Pairs
    pairing a state with :data:`TRASH` are included; such a pair is False
    when the state can never reach an accepting state.

    A symbol is skipped for a pair only when neither state has a move on it.
    When just one of them has a move, the other moves to :data:`TRASH`
    rather than being skipped, so an accepting state with a move never
    merges with an accepting state without one.

    Args:
        fsa (Automaton): A DFA.
    """
    fsa.require((AutomatonKind.DFA,), "Minimization")

    symbols = fsa.symbols
    reachable = sorted(fsa.reachable_states())
    finals = fsa.final_states
    moves = _deterministic_moves(fsa, reachable)

    def move(state, symbol):
        if state is TRASH:
            return TRASH
        return moves.get((state, symbol), TRASH)

    universe = reachable + [TRASH]
    marked = {}
    for i, p in enumerate(universe):
        for q in universe[i + 1 :]:
            marked[_pair(p, q)] = (p in finals) != (q in finals)

    changed = True
    while changed:
        changed = False
        for pair in list(marked):
            if marked[pair]:
                continue
            p, q = pair
            for symbol in symbols:
                dp = move(p, symbol)
                dq = move(q, symbol)
                # Neither side can move, or both reach the same state
                if dp is dq or dp == dq:
                    continue
                if marked[_pair(dp, dq)]:
                    marked[pair] = True
                    changed = True
                    break
    return marked


def table_filling_representatives(fsa):
    """
    Maps every reachable state of the DFA ``fsa`` to the representative of its
    equivalence class.

    Each state starts as its own representative. The indistinguishable pairs
    are then visited in sorted order and both members adopt the smaller of
    their two current representatives. Because indistinguishability is an
    equivalence relation once the marking reaches its fixed point, and the
    pair ``(m, x)`` for the smallest member ``m`` of a class is visited before
    any other pair containing ``x``, every class ends up represented by its
    smallest member.
    """
    marked = distinguishable_pairs(fsa)
    charges = {state: state for state in fsa.reachable_states()}
    equivalent = sorted(
        pair
        for pair, is_marked in marked.items()
        if not is_marked and pair[1] is not TRASH
    )
    for p, q in equivalent:
        minor = min(charges[p], charges[q])
        charges[p] = charges[q] = minor
    return charges


def minimize_table_filling(fsa):
    """
    Returns the minimal DFA equivalent to ``fsa`` using the table-filling
    algorithm.

    Each resulting state is named after the smallest original state it
    merges. Unreachable states are dropped silently.

    Args:
        fsa (Automaton): A DFA.

    Returns:
        Automaton: A new, minimal DFA.

    Raises:
        InvalidAutomatonType: If ``fsa`` is not a DFA.
    """
    charges = table_filling_representatives(fsa)
    moves = _deterministic_moves(fsa, charges)

    transitions = {}
    for (state, symbol), dest in sorted(moves.items()):
        transitions[charges[state], symbol] = charges[dest]
    final_states = {charges[s] for s in charges if s in fsa.final_states}

    result = Automaton(
        set(charges.values()),
        fsa.alphabet,
        transitions,
        charges[fsa.start_state],
        final_states,
    )
    logger.debug(
        "Table filling reduced {} states ({} reachable) to {}",
        len(fsa),
        len(charges),
        len(result),
    )
    return result


def refine_partition(fsa):
    """
    Returns the coarsest stable partition of the reachable states of the DFA
    ``fsa``, as a list of sets ordered by their sorted members.

    The initial partition separates accepting from non-accepting states
    (omitting an empty block). On every pass each block is split by the
    signature of its members: for each symbol in alphabetical order, the
    smallest member of the block the move leads to, or :data:`TRASH` when
    there is no move. Passes repeat until no block splits.
    """
    fsa.require((AutomatonKind.DFA,), "Minimization")

    symbols = fsa.symbols
    reachable = fsa.reachable_states()
    moves = _deterministic_moves(fsa, reachable)
    finals = reachable & fsa.final_states
    partition = [block for block in (finals, reachable - finals) if block]

    changed = True
    while changed:
        changed = False
        block_of = {}
        for block in partition:
            representative = min(block)
            for state in block:
                block_of[state] = representative

        next_partition = []
        for block in partition:
            groups = {}
            for state in sorted(block):
                signature = []
                for symbol in symbols:
                    dest = moves.get((state, symbol))
                    if dest is None or dest not in reachable:
                        signature.append(TRASH)
                    else:
                        signature.append(block_of[dest])
                groups.setdefault(tuple(signature), set()).add(state)
            if len(groups) > 1:
                changed = True
            next_partition.extend(groups.values())
        partition = next_partition

    partition.sort(key=sorted)
    return partition


def minimize_partition_refinement(fsa, prefix=MIN_PREFIX):
    """
    Returns the minimal DFA equivalent to ``fsa`` using partition refinement.

    The blocks of :func:`refine_partition` become states named ``prefix``
    followed by the block number (``qMin0``, ``qMin1``, ...). A block is
    accepting if its representative is, and its moves are the
    representative's moves mapped through the partition.

    Args:
        fsa (Automaton): A DFA.
        prefix (str): Prefix for the new state names.

    Returns:
        Automaton: A new, minimal DFA.

    Raises:
        InvalidAutomatonType: If ``fsa`` is not a DFA.
    """
    partition = refine_partition(fsa)

    mapping = {}
    representatives = {}
    for i, block in enumerate(partition):
        name = f"{prefix}{i}"
        representatives[name] = min(block)
        for state in block:
            mapping[state] = name

    final_states = {
        name for name, rep in representatives.items() if rep in fsa.final_states
    }
    symbols = fsa.symbols
    transitions = {}
    for name, rep in representatives.items():
        for symbol in symbols:
            dests = fsa.transitions.get((rep, symbol))
            if dests:
                (dest,) = dests
                if dest in mapping:
                    transitions[name, symbol] = mapping[dest]

    result = Automaton(
        set(mapping.values()),
        fsa.alphabet,
        transitions,
        mapping[fsa.start_state],
        final_states,
    )
    logger.debug(
        "Partition refinement reduced {} states to {} blocks", len(fsa), len(result)
    )
    return result
