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


import itertools

# Characters with a meaning inside a derived subset name
SPECIALS = "\\,{}"


def escape_state(state):
    """
    Backslash-escapes the characters of ``state`` that :func:`subset_name`
    uses as delimiters.

    >>> escape_state("q{1,2}")
    'q\\\\{1\\\\,2\\\\}'
    """
    if not any(c in SPECIALS for c in state):
        return state
    return "".join("\\" + c if c in SPECIALS else c for c in state)


def subset_name(states):
    """
    Returns a single state identifier standing for a set of states.

    The members are escaped, sorted and joined inside braces, so the name
    depends only on set membership (not on insertion order) and two
    different sets can never produce the same name, even when identifiers
    share prefixes:

    >>> subset_name({"q1", "q0"})
    '{q0,q1}'
    >>> subset_name({"q1", "q"}) != subset_name({"q", "1q"})
    True

    Args:
        states (iterable): The original state identifiers.

    Returns:
        str: The derived identifier.
    """
    return "{" + ",".join(sorted(escape_state(s) for s in states)) + "}"


def all_words(alphabet, max_length, min_length=0):
    """
    Yields every word over ``alphabet`` with between ``min_length`` and
    ``max_length`` symbols, in shortlex order.

    Words are yielded as tuples of symbols so alphabets with multi-character
    symbols work the same as single-character ones.

    >>> list(all_words({"b", "a"}, 1))
    [(), ('a',), ('b',)]
    """
    symbols = sorted(alphabet)
    for length in range(min_length, max_length + 1):
        yield from itertools.product(symbols, repeat=length)


class Marker:
    """
    A named sentinel that compares equal only to itself.

    Markers stand in for "no state" inside signatures and pair tables, where
    ``None`` would be easy to confuse with a missing dictionary entry.

    Example:
        >>> TRASH = Marker("TRASH")
        >>> TRASH
        <TRASH>
    """

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f"<{self.name}>"
