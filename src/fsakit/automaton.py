import sys
from enum import Enum

from fsakit import errors

# The silent transition marker. It can label a transition but can never be an
# alphabet symbol, so it can never be read from a word.
EPSILON = ""

# Name of the single state created by the empty constructor
DEFAULT_STATE = "q0"


class AutomatonKind(Enum):
    """
    The three shapes a transition relation can have.

    An automaton with both epsilon moves and branching moves is an
    ``EPSILON_NFA``.
    """

    EPSILON_NFA = "epsilon-nfa"
    NFA = "nfa"
    DFA = "dfa"


def _destination_set(destinations):
    # A lone identifier is one destination, not a sequence of characters
    if isinstance(destinations, str):
        return {destinations}
    try:
        return set(destinations)
    except TypeError:
        raise errors.UnknownDestinationState(
            f"Destinations must be a state or an iterable of states, "
            f"got {destinations!r}"
        ) from None


def _check_name(state):
    if not isinstance(state, str) or not state:
        raise errors.UnnamedState(
            f"States must be named with non-empty strings, got {state!r}"
        )


def _check_symbol(symbol):
    if not isinstance(symbol, str) or symbol == EPSILON:
        raise errors.ReservedSymbol(
            f"Alphabet symbols must be non-empty strings, got {symbol!r}"
        )


class Automaton:
    """
    Finite state automaton over a finite alphabet of string symbols.

    One class covers every shape: nondeterminism (several destinations for
    one origin and symbol) and epsilon moves (the :data:`EPSILON` symbol) are
    facts about the data, reported by :meth:`classify`.

    Attributes:
        alphabet (set): The input symbols. Never contains :data:`EPSILON`.
        states (set): The state identifiers.
        transitions (dict): Maps ``(state, symbol)`` pairs to the set of
            destination states. An entry never holds an empty set.
        final_states (set): The accepting states.
        start_state (str): The initial state.

    Every constructor argument is copied, so the automaton never shares a
    collection with its caller. Transformers (:meth:`eliminate_epsilon`,
    :meth:`determinize`, :meth:`minimize_table_filling`,
    :meth:`minimize_partition_refinement`) leave the receiver untouched and
    return a new automaton.

    Example:
        >>> fsa = Automaton({"q0", "q1"}, {"a"}, {("q0", "a"): "q1"}, "q0", {"q1"})
        >>> fsa.accepts("a")
        True
        >>> fsa.classify()
        <AutomatonKind.DFA: 'dfa'>
    """

    def __init__(
        self,
        states=None,
        alphabet=None,
        transitions=None,
        start_state=None,
        final_states=None,
    ):
        """
        Initializes the automaton, validating every invariant.

        Calling without arguments creates the single state ``q0`` as start
        state and an empty alphabet; symbols must be added with
        :meth:`add_alphabet_symbol` before the automaton is used.

        Args:
            states (iterable): The state identifiers.
            alphabet (iterable): The input symbols.
            transitions (dict, optional): Maps ``(state, symbol)`` to a
                destination identifier or an iterable of them.
            start_state (str): The initial state.
            final_states (iterable, optional): The accepting states.

        Raises:
            EmptyAlphabet: If the alphabet is empty.
            EmptyStateSet: If there are no states.
            UnknownStartState: If the start state is not in ``states``.
            UnnamedState: If a state identifier is empty.
            UnknownState: If a final state is not in ``states``.
            ReservedSymbol: If the alphabet contains the epsilon marker.
            UnknownOriginState, UnknownSymbol, UnknownDestinationState:
                If a transition references something unregistered. A key
                that isn't an ``(origin, symbol)`` pair raises
                UnknownOriginState.
        """
        if (
            states is None
            and alphabet is None
            and transitions is None
            and start_state is None
            and final_states is None
        ):
            self.alphabet = set()
            self.states = {DEFAULT_STATE}
            self.transitions = {}
            self.final_states = set()
            self.start_state = DEFAULT_STATE
            return

        states = set(states or ())
        alphabet = set(alphabet or ())
        final_states = set(final_states or ())

        if not alphabet:
            raise errors.EmptyAlphabet("The alphabet can't be empty")
        if not states:
            raise errors.EmptyStateSet("The state set can't be empty")
        if not isinstance(start_state, str) or start_state not in states:
            raise errors.UnknownStartState(
                f"The start state {start_state!r} isn't in the state set"
            )
        for state in states:
            _check_name(state)
        for symbol in alphabet:
            _check_symbol(symbol)
        for state in final_states:
            if state not in states:
                raise errors.UnknownState(
                    f"The final state {state!r} isn't in the state set"
                )

        self.alphabet = alphabet
        self.states = states
        self.final_states = final_states
        self.start_state = start_state
        self.transitions = {}

        if transitions:
            checked = []
            for key, destinations in transitions.items():
                if not isinstance(key, tuple) or len(key) != 2:
                    raise errors.UnknownOriginState(
                        f"Transition keys must be (origin, symbol) pairs, got {key!r}"
                    )
                origin, symbol = key
                dests = _destination_set(destinations)
                self._check_transition(origin, symbol, dests)
                checked.append((origin, symbol, dests))
            for origin, symbol, dests in checked:
                self._union(origin, symbol, dests)

    def __len__(self):
        """
        Returns the number of states in the automaton.
        """
        return len(self.states)

    def __eq__(self, other):
        if not isinstance(other, Automaton):
            return NotImplemented
        return (
            self.start_state == other.start_state
            and self.states == other.states
            and self.alphabet == other.alphabet
            and self.final_states == other.final_states
            and self.transitions == other.transitions
        )

    __hash__ = None

    def __repr__(self):
        return "<%s %s states=%d symbols=%d finals=%d>" % (
            type(self).__name__,
            self.classify().value,
            len(self.states),
            len(self.alphabet),
            len(self.final_states),
        )

    def copy(self):
        """
        Returns an independent copy of this automaton.

        The copy shares no set or dict with the original, so either can be
        mutated afterwards without affecting the other.
        """
        new = type(self).__new__(type(self))
        new.alphabet = set(self.alphabet)
        new.states = set(self.states)
        new.final_states = set(self.final_states)
        new.start_state = self.start_state
        new.transitions = {key: set(dests) for key, dests in self.transitions.items()}
        return new

    # Derived from the public collections on every access

    @property
    def kind(self):
        """
        The :class:`AutomatonKind` of this automaton.
        """
        nondeterministic = False
        for (_, symbol), dests in self.transitions.items():
            if symbol == EPSILON:
                return AutomatonKind.EPSILON_NFA
            if len(dests) > 1:
                nondeterministic = True
        if nondeterministic:
            return AutomatonKind.NFA
        return AutomatonKind.DFA

    @property
    def symbols(self):
        """
        The alphabet as a sorted tuple, the canonical iteration order used by
        every transformer.
        """
        return tuple(sorted(self.alphabet))

    # Construction and mutation

    def _check_transition(self, origin, symbol, destinations):
        if not isinstance(origin, str) or origin not in self.states:
            raise errors.UnknownOriginState(
                f"The origin state {origin!r} isn't in the state set"
            )
        if not isinstance(symbol, str) or (
            symbol != EPSILON and symbol not in self.alphabet
        ):
            raise errors.UnknownSymbol(f"The symbol {symbol!r} isn't in the alphabet")
        for dest in destinations:
            if not isinstance(dest, str) or dest not in self.states:
                raise errors.UnknownDestinationState(
                    f"The destination state {dest!r} isn't in the state set"
                )

    def _union(self, origin, symbol, destinations):
        if destinations:
            self.transitions.setdefault((origin, symbol), set()).update(destinations)

    def add_state(self, state):
        """
        Adds a state. Adding a state that already exists does nothing.

        Raises:
            UnnamedState: If ``state`` is empty or not a string.
        """
        _check_name(state)
        self.states.add(state)

    def add_alphabet_symbol(self, symbol):
        """
        Adds an input symbol. Adding a symbol that already exists does
        nothing.

        Raises:
            ReservedSymbol: If ``symbol`` is the epsilon marker.
        """
        _check_symbol(symbol)
        self.alphabet.add(symbol)

    add_symbol = add_alphabet_symbol

    def add_transition(self, origin, symbol, destinations):
        """
        Adds transitions from ``origin`` on ``symbol`` to ``destinations``.

        Repeated calls for the same origin and symbol accumulate destinations
        (set union), which is how NFAs are built one edge at a time. Pass
        :data:`EPSILON` as the symbol for a silent move.

        Args:
            origin (str): The source state.
            symbol (str): An alphabet symbol or :data:`EPSILON`.
            destinations (str or iterable): One destination or several.

        Raises:
            UnknownOriginState: If ``origin`` isn't a state.
            UnknownSymbol: If ``symbol`` isn't in the alphabet or epsilon.
            UnknownDestinationState: If any destination isn't a state.

        Example:
            >>> fsa = Automaton({"q0", "q1"}, {"a"}, start_state="q0")
            >>> fsa.add_transition("q0", "a", "q0")
            >>> fsa.add_transition("q0", "a", {"q1"})
            >>> sorted(fsa.transitions[("q0", "a")])
            ['q0', 'q1']
        """
        dests = _destination_set(destinations)
        self._check_transition(origin, symbol, dests)
        self._union(origin, symbol, dests)

    def add_final_state(self, state):
        """
        Marks an existing state as accepting.

        Raises:
            UnnamedState: If ``state`` is empty.
            UnknownState: If ``state`` isn't a state.
        """
        _check_name(state)
        if state not in self.states:
            raise errors.UnknownState(f"The final state {state!r} isn't in the state set")
        self.final_states.add(state)

    def set_start_state(self, state):
        """
        Makes an existing state the initial state.

        Raises:
            UnknownState: If ``state`` isn't a state.
        """
        if not isinstance(state, str) or state not in self.states:
            raise errors.UnknownState(f"The start state {state!r} isn't in the state set")
        self.start_state = state

    # Closures

    def _moves(self, state, symbols):
        transitions = self.transitions
        for symbol in symbols:
            dests = transitions.get((state, symbol))
            if dests:
                yield dests

    def _expand(self, states, symbols):
        reached = _destination_set(states)
        frontier = list(reached)
        while frontier:
            state = frontier.pop()
            for dests in self._moves(state, symbols):
                new_states = dests.difference(reached)
                frontier.extend(new_states)
                reached.update(new_states)
        return frozenset(reached)

    def closure(self, states):
        """
        Returns the states reachable from ``states`` by any number of moves on
        any symbol, epsilon included. The result contains ``states``.

        Args:
            states (str or iterable): A state or a collection of states.

        Returns:
            frozenset: The closed set.
        """
        return self._expand(states, (EPSILON,) + self.symbols)

    def epsilon_closure(self, states):
        """
        Returns the states reachable from ``states`` using only epsilon moves.
        The result contains ``states``.

        Example:
            >>> fsa = Automaton({"a", "b", "c"}, {"x"}, start_state="a")
            >>> fsa.add_transition("a", EPSILON, "b")
            >>> fsa.add_transition("b", EPSILON, "c")
            >>> sorted(fsa.epsilon_closure({"a"}))
            ['a', 'b', 'c']
        """
        return self._expand(states, (EPSILON,))

    def reachable_states(self):
        """
        Returns the states reachable from the start state.
        """
        return self.closure({self.start_state})

    # Simulation

    def next_states(self, states, symbol):
        """
        Returns the union of the moves on ``symbol`` out of every state in
        ``states``, without following epsilon moves.
        """
        dest_states = set()
        for state in states:
            dests = self.transitions.get((state, symbol))
            if dests:
                dest_states.update(dests)
        return dest_states

    def is_final(self, states):
        """
        Returns True if any of ``states`` is an accepting state.
        """
        return not self.final_states.isdisjoint(states)

    def accepts(self, word):
        """
        Checks if ``word`` is accepted by the automaton.

        A string is read one character per symbol; any other iterable is
        read one item per symbol, which allows multi-character symbols.

        The simulation tracks the set of live states, so it gives the right
        answer for epsilon-NFAs, NFAs and DFAs alike. A symbol outside the
        alphabet, or running out of live states, rejects the word; this
        method never raises.

        Args:
            word (str or iterable): The input.

        Returns:
            bool: True if the word is accepted, False otherwise.
        """
        current = self.epsilon_closure({self.start_state})
        for symbol in word:
            if symbol not in self.alphabet:
                return False
            current = self.epsilon_closure(self.next_states(current, symbol))
            if not current:
                return False
        return self.is_final(current)

    def generate(self, max_length):
        """
        Yields every accepted word of at most ``max_length`` symbols, shortest
        first and alphabetically within one length.

        Words are yielded as strings made by concatenating their symbols.

        Example:
            >>> fsa = Automaton({"q0"}, {"a", "b"}, {("q0", "a"): "q0"}, "q0", {"q0"})
            >>> list(fsa.generate(2))
            ['', 'a', 'aa']
        """
        symbols = self.symbols
        level = [("", self.epsilon_closure({self.start_state}))]
        for length in range(max_length + 1):
            for word, states in level:
                if self.is_final(states):
                    yield word
            if length == max_length:
                break

            next_level = []
            for word, states in level:
                for symbol in symbols:
                    dests = self.epsilon_closure(self.next_states(states, symbol))
                    if dests:
                        next_level.append((word + symbol, dests))
            if not next_level:
                break
            level = next_level

    # Inspection

    def classify(self):
        """
        Returns the :class:`AutomatonKind` of the transition relation.

        Any epsilon move makes it ``EPSILON_NFA``; otherwise any origin and
        symbol with more than one destination makes it ``NFA``; otherwise it
        is a ``DFA`` (possibly partial).
        """
        return self.kind

    def require(self, kinds, operation):
        """
        Raises :class:`~fsakit.errors.InvalidAutomatonType` unless this
        automaton is one of ``kinds``.
        """
        actual = self.classify()
        if actual not in kinds:
            expected = " or ".join(k.value for k in kinds)
            raise errors.InvalidAutomatonType(
                f"{operation} needs a {expected} automaton, got {actual.value}",
                expected=tuple(kinds),
                actual=actual,
            )

    def triples(self):
        """
        Yields every ``(origin, symbol, destination)`` edge, sorted.
        """
        for (origin, symbol), dests in sorted(self.transitions.items()):
            for dest in sorted(dests):
                yield origin, symbol, dest

    def dump(self, stream=sys.stdout):
        """
        Prints a textual listing of the automaton to ``stream``.

        The start state is marked with ``@`` and accepting states with
        ``||``. Epsilon moves are shown as ``<EPSILON>``.
        """
        for state in sorted(self.states):
            beg = "@" if state == self.start_state else " "
            end = " ||" if state in self.final_states else ""
            print(beg, state + end, file=stream)
            for symbol in (EPSILON,) + self.symbols:
                dests = self.transitions.get((state, symbol))
                if dests:
                    label = symbol if symbol != EPSILON else "<EPSILON>"
                    print("   ", label, "->", ", ".join(sorted(dests)), file=stream)

    # Transformers

    def eliminate_epsilon(self):
        """
        Returns an equivalent automaton without epsilon moves. See
        :func:`fsakit.determinize.eliminate_epsilon`.
        """
        from fsakit.determinize import eliminate_epsilon

        return eliminate_epsilon(self)

    def determinize(self):
        """
        Returns an equivalent DFA built by subset construction. See
        :func:`fsakit.determinize.determinize`.
        """
        from fsakit.determinize import determinize

        return determinize(self)

    def minimize_table_filling(self):
        """
        Returns the minimal equivalent DFA, found by marking distinguishable
        state pairs. See :func:`fsakit.minimize.minimize_table_filling`.
        """
        from fsakit.minimize import minimize_table_filling

        return minimize_table_filling(self)

    def minimize_partition_refinement(self, prefix=None):
        """
        Returns the minimal equivalent DFA, found by refining a partition of
        the states. See :func:`fsakit.minimize.minimize_partition_refinement`.
        """
        from fsakit.minimize import MIN_PREFIX, minimize_partition_refinement

        return minimize_partition_refinement(
            self, prefix=MIN_PREFIX if prefix is None else prefix
        )
