######################################################################
#
# rule_tables.py
#
######################################################################
#
# Rewriting rules for the arrowhead curve family. Every non-terminal
# symbol expands into exactly three children; each child carries the
# turn instruction applied when it is reached. Rules are written in
# left-to-right traversal order and reversed when pushed onto the LIFO
# work stack.

import enum
from collections import namedtuple

from headings import Rotation, Turn

class Symbol(enum.Enum):
    X = 'x'
    Y = 'y'
    Z = 'z'

# one pending unit of work on the generator's stack
Frame = namedtuple('Frame', 'remaining, symbol, turn')

# 3D axis-rotation curve: each axis symbol cycles to the next two and
# turns with the rotation belonging to the symbol being expanded
AXIS_RULES = {

    Symbol.X: ((Symbol.Y, Rotation.NONE),
               (Symbol.Z, Rotation.A),
               (Symbol.Y, Rotation.A)),

    Symbol.Y: ((Symbol.Z, Rotation.NONE),
               (Symbol.X, Rotation.B),
               (Symbol.Z, Rotation.B)),

    Symbol.Z: ((Symbol.X, Rotation.NONE),
               (Symbol.Y, Rotation.C),
               (Symbol.X, Rotation.C))

}

# planar 6-direction curve over the x/y pair, mirror-image rules
HEX_RULES = {

    Symbol.X: ((Symbol.Y, Turn.NONE),
               (Symbol.X, Turn.RIGHT),
               (Symbol.Y, Turn.RIGHT)),

    Symbol.Y: ((Symbol.X, Turn.NONE),
               (Symbol.Y, Turn.LEFT),
               (Symbol.X, Turn.LEFT))

}

######################################################################
# children of a non-terminal frame, in the order they must be pushed
# so that popping visits them left to right

def expand(rules, frame):

    if frame.remaining <= 0:
        raise ValueError('terminal frame has no children: {}'.format(frame))

    remaining = frame.remaining - 1

    return [Frame(remaining, symbol, turn)
            for symbol, turn in reversed(rules[frame.symbol])]

def branching_factor(rules):

    counts = set(len(children) for children in rules.values())

    assert len(counts) == 1, 'rules must all have the same arity'

    return counts.pop()
