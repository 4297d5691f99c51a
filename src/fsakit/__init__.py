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
fsakit - finite state automata over finite alphabets.

Build an automaton, run words through it, and transform it:

    >>> from fsakit import Automaton, EPSILON
    >>> fsa = Automaton({"q0", "q1"}, {"a", "b"}, start_state="q0", final_states={"q1"})
    >>> fsa.add_transition("q0", "a", {"q0", "q1"})
    >>> fsa.add_transition("q1", EPSILON, "q0")
    >>> fsa.accepts("aa")
    True
    >>> dfa = fsa.eliminate_epsilon().determinize()
    >>> small = dfa.minimize_partition_refinement()

The library logs through loguru and is silent by default; call
``logger.enable("fsakit")`` to see what the transformers do.
"""

from loguru import logger

from fsakit.automaton import DEFAULT_STATE, EPSILON, Automaton, AutomatonKind
from fsakit.determinize import determinize, eliminate_epsilon
from fsakit.errors import (
    AutomatonError,
    EmptyAlphabet,
    EmptyStateSet,
    InvalidAutomatonType,
    ReservedSymbol,
    UnknownDestinationState,
    UnknownOriginState,
    UnknownStartState,
    UnknownState,
    UnknownSymbol,
    UnnamedState,
    ValidationError,
)
from fsakit.minimize import minimize_partition_refinement, minimize_table_filling
from fsakit.version import __version__, versionstring

logger.disable("fsakit")

__all__ = [
    "Automaton",
    "AutomatonKind",
    "EPSILON",
    "DEFAULT_STATE",
    "eliminate_epsilon",
    "determinize",
    "minimize_table_filling",
    "minimize_partition_refinement",
    "AutomatonError",
    "ValidationError",
    "EmptyAlphabet",
    "EmptyStateSet",
    "UnknownStartState",
    "UnnamedState",
    "UnknownOriginState",
    "UnknownSymbol",
    "UnknownDestinationState",
    "UnknownState",
    "ReservedSymbol",
    "InvalidAutomatonType",
    "versionstring",
    "__version__",
]
