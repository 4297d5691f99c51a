import random

import pytest
from loguru import logger

from fsakit import EPSILON, Automaton, AutomatonKind, errors
from fsakit.determinize import determinize, eliminate_epsilon
from fsakit.util import all_words, escape_state, subset_name


def random_nfa(seed, size=5, symbols="ab", epsilon=False):
    rng = random.Random(seed)
    states = [f"s{i}" for i in range(size)]
    finals = {s for s in states if rng.random() < 0.3}
    fsa = Automaton(states, set(symbols), start_state="s0", final_states=finals)
    labels = list(symbols) + ([EPSILON] if epsilon else [])
    for state in states:
        for label in labels:
            dests = {d for d in states if rng.random() < 0.25}
            fsa.add_transition(state, label, dests)
    return fsa


def assert_same_language(a, b, max_length=6):
    for word in all_words(a.alphabet, max_length):
        assert a.accepts(word) == b.accepts(word), word


def eps_chain():
    fsa = Automaton({"a", "b", "c", "d"}, {"x"}, start_state="a", final_states={"d"})
    fsa.add_transition("a", EPSILON, "b")
    fsa.add_transition("b", "x", "c")
    fsa.add_transition("c", EPSILON, "d")
    return fsa


def test_subset_name():
    assert subset_name({"q1", "q0"}) == "{q0,q1}"
    assert subset_name(["q0", "q1"]) == subset_name(("q1", "q0"))
    assert subset_name({"q0"}) == "{q0}"
    assert subset_name(set()) == "{}"


def test_subset_name_no_collisions():
    # Plain concatenation maps both of these to "abc"
    assert subset_name({"a", "bc"}) != subset_name({"ab", "c"})
    # A comma inside an identifier is escaped
    assert subset_name({"a,b"}) != subset_name({"a", "b"})
    assert subset_name({"a,b"}) == "{a\\,b}"
    assert subset_name({"{a}"}) != subset_name({"a"})


def test_escape_state():
    assert escape_state("q0") == "q0"
    assert escape_state("x{y}") == "x\\{y\\}"
    assert escape_state("a\\b") == "a\\\\b"


def test_eliminate_epsilon():
    nfa = eliminate_epsilon(eps_chain())
    assert nfa.states == {"a", "b", "c", "d"}
    assert nfa.alphabet == {"x"}
    assert nfa.start_state == "a"
    assert nfa.final_states == {"c", "d"}
    assert nfa.transitions == {("a", "x"): {"c", "d"}, ("b", "x"): {"c", "d"}}
    assert nfa.classify() is AutomatonKind.NFA
    assert nfa.accepts("x")
    assert not nfa.accepts("")


def test_eliminate_epsilon_start_becomes_final():
    fsa = Automaton({"p", "q"}, {"a"}, start_state="p", final_states={"q"})
    fsa.add_transition("p", EPSILON, "q")
    fsa.add_transition("q", "a", "q")
    nfa = fsa.eliminate_epsilon()
    assert nfa.final_states == {"p", "q"}
    assert nfa.accepts("")
    assert nfa.accepts("aaa")
    assert nfa.classify() is AutomatonKind.DFA


def test_eliminate_epsilon_preserves_language():
    for seed in range(25):
        fsa = random_nfa(seed, epsilon=True)
        if fsa.classify() is not AutomatonKind.EPSILON_NFA:
            continue
        nfa = fsa.eliminate_epsilon()
        assert nfa.classify() is not AutomatonKind.EPSILON_NFA
        assert EPSILON not in {symbol for _, symbol in nfa.transitions}
        assert_same_language(fsa, nfa)


def test_eliminate_epsilon_requires_epsilon_nfa():
    fsa = Automaton({"q0"}, {"a"}, {("q0", "a"): "q0"}, "q0", {"q0"})
    with pytest.raises(errors.InvalidAutomatonType) as excinfo:
        fsa.eliminate_epsilon()
    assert excinfo.value.actual is AutomatonKind.DFA
    assert excinfo.value.expected == (AutomatonKind.EPSILON_NFA,)


def test_determinize_names():
    nfa = Automaton({"p", "q"}, {"a"}, {("p", "a"): {"p", "q"}}, "p", {"q"})
    dfa = determinize(nfa)
    assert dfa.states == {"{p}", "{p,q}"}
    assert dfa.start_state == "{p}"
    assert dfa.final_states == {"{p,q}"}
    assert dfa.transitions == {
        ("{p}", "a"): {"{p,q}"},
        ("{p,q}", "a"): {"{p,q}"},
    }
    assert dfa.classify() is AutomatonKind.DFA


def test_determinize_partial():
    nfa = Automaton({"p", "q"}, {"a", "b"}, {("p", "a"): "q"}, "p", {"q"})
    dfa = nfa.determinize()
    assert dfa.states == {"{p}", "{q}"}
    assert ("{p}", "b") not in dfa.transitions
    assert ("{q}", "a") not in dfa.transitions
    assert dfa.accepts("a")
    assert not dfa.accepts("b")
    assert not dfa.accepts("ab")


def test_determinize_second_to_last():
    nfa = Automaton({"s", "m", "f"}, {"a", "b"}, start_state="s", final_states={"f"})
    nfa.add_transition("s", "a", {"s", "m"})
    nfa.add_transition("s", "b", "s")
    nfa.add_transition("m", "a", "f")
    nfa.add_transition("m", "b", "f")

    dfa = nfa.determinize()
    assert dfa.classify() is AutomatonKind.DFA
    assert len(dfa) == 4
    assert dfa.start_state == "{s}"
    assert dfa.final_states == {"{f,m,s}", "{f,s}"}
    assert_same_language(nfa, dfa)


def test_determinize_preserves_language():
    for seed in range(25):
        nfa = random_nfa(seed)
        dfa = nfa.determinize()
        assert dfa.classify() is AutomatonKind.DFA
        assert_same_language(nfa, dfa)


def test_determinize_is_reproducible():
    for seed in range(5):
        nfa = random_nfa(seed, size=6)
        assert determinize(nfa) == determinize(nfa.copy())


def test_determinize_dfa():
    dfa = Automaton(
        {"q0", "q1"},
        {"a"},
        {("q0", "a"): "q1", ("q1", "a"): "q0"},
        "q0",
        {"q0"},
    )
    result = dfa.determinize()
    assert result.states == {"{q0}", "{q1}"}
    assert_same_language(dfa, result)


def test_determinize_rejects_epsilon():
    with pytest.raises(errors.InvalidAutomatonType):
        eps_chain().determinize()


def test_epsilon_nfa_pipeline():
    fsa = eps_chain()
    dfa = fsa.eliminate_epsilon().determinize()
    assert dfa.classify() is AutomatonKind.DFA
    assert_same_language(fsa, dfa)


def test_results_do_not_alias_input():
    nfa = random_nfa(3)
    original = nfa.copy()
    dfa = nfa.determinize()
    snapshot = dfa.copy()
    assert nfa == original

    nfa.add_state("extra")
    nfa.add_transition("s0", "a", "extra")
    nfa.add_final_state("extra")
    assert dfa == snapshot

    fsa = eps_chain()
    nfa = fsa.eliminate_epsilon()
    nfa.add_transition("d", "x", "a")
    nfa.states.add("z")
    assert ("d", "x") not in fsa.transitions
    assert "z" not in fsa.states


def test_transformers_log_when_enabled():
    messages = []
    logger.enable("fsakit")
    handler = logger.add(messages.append, level="DEBUG", format="{message}")
    try:
        eps_chain().eliminate_epsilon().determinize()
    finally:
        logger.remove(handler)
        logger.disable("fsakit")
    assert any("Eliminated epsilon moves" in m for m in messages)
    assert any("Subset construction" in m for m in messages)
