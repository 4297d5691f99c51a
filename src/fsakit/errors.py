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

"""Exceptions raised by fsakit.

Every invariant violation is reported with a subclass of
:class:`ValidationError`, raised before anything is mutated. Transformers
whose input has the wrong shape raise :class:`InvalidAutomatonType`.
"""


class AutomatonError(Exception):
    """
    Base class for every exception raised by fsakit.

    Attributes:
        message -- explanation of the error
    """

    def __init__(self, message):
        self.message = message
        super().__init__(message)


class ValidationError(AutomatonError, ValueError):
    """
    Exception raised when a construction or mutation would break one of the
    automaton invariants.

    It is a subclass of `ValueError` so callers that only care about bad
    arguments can catch it without importing fsakit.
    """


# Constructor-time failures


class EmptyAlphabet(ValidationError):
    """The alphabet has no symbols."""


class EmptyStateSet(ValidationError):
    """The state set has no states."""


class UnknownStartState(ValidationError):
    """The start state is not a member of the state set."""


class UnnamedState(ValidationError):
    """A state identifier is empty or not a string."""


# Transition failures


class UnknownOriginState(ValidationError):
    """A transition leaves from a state that is not registered."""


class UnknownSymbol(ValidationError):
    """A transition uses a symbol that is neither in the alphabet nor epsilon."""


class UnknownDestinationState(ValidationError):
    """A transition leads to a state that is not registered."""


# Other mutation failures


class UnknownState(ValidationError):
    """A final or start state is not a member of the state set."""


class ReservedSymbol(ValidationError):
    """
    Exception raised when the epsilon marker (or a non-string) is added to
    the alphabet.

    The empty string denotes a silent transition and can never be read from
    an input word.
    """


class InvalidAutomatonType(AutomatonError):
    """
    Exception raised when a transformer is applied to an automaton of the
    wrong kind, for example minimizing an NFA.

    Attributes:
        message -- explanation of the error
        expected -- description of the accepted kind(s)
        actual -- the :class:`fsakit.automaton.AutomatonKind` found
    """

    def __init__(self, message, expected=None, actual=None):
        self.expected = expected
        self.actual = actual
        super().__init__(message)
