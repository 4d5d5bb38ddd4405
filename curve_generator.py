######################################################################
#
# curve_generator.py
#
######################################################################
#
# Stack-driven generator for the arrowhead curves. The natural
# definition is recursive (each symbol expands into three smaller
# copies of the curve); here the recursion is replaced by an explicit
# LIFO stack of (remaining depth, symbol, turn) frames so generation
# never grows the Python call stack and can be advanced one point at a
# time.

from collections import namedtuple
import numpy as np

from headings import AxisRotationModel, HexDirectionModel, Rotation, Turn
from rule_tables import AXIS_RULES, HEX_RULES, Frame, Symbol, expand

CurveVariant = namedtuple('CurveVariant',
                          'root_symbol, root_turn, rules, make_model')

KNOWN_VARIANTS = {

    'axis3d': CurveVariant(
        root_symbol = Symbol.Y,
        root_turn = Rotation.A,
        rules = AXIS_RULES,
        make_model = AxisRotationModel
    ),

    'hex2d': CurveVariant(
        root_symbol = Symbol.X,
        root_turn = Turn.LEFT,
        rules = HEX_RULES,
        make_model = HexDirectionModel
    )

}

######################################################################

def _check_depth(depth):

    if isinstance(depth, bool) or not isinstance(depth, (int, np.integer)):
        raise ValueError('depth must be an integer, got {!r}'.format(depth))

    if depth < 0:
        raise ValueError('depth must be non-negative, got {}'.format(depth))

    return int(depth)

def get_variant(variant):

    if isinstance(variant, CurveVariant):
        return variant

    if variant not in KNOWN_VARIANTS:
        raise ValueError('unknown curve variant {!r} (expected one of {})'.format(
            variant, ', '.join(sorted(KNOWN_VARIANTS))))

    return KNOWN_VARIANTS[variant]

# number of positions generate() produces for a given depth

def expected_point_count(depth):

    depth = _check_depth(depth)

    if depth == 0:
        return 1

    return 3**depth + 1

######################################################################

class CurveState:

    """Everything needed to resume generation: the work stack, the
    current position and the current heading.

    ``step()`` advances the machine to the next emitted position. A
    frame whose turn is the no-turn sentinel moves nothing, so one step
    may pop several frames before it has a new position to report.
    """

    def __init__(self, stack, position, heading, model, rules):

        self.stack = stack
        self.position = position
        self.heading = heading
        self.model = model
        self.rules = rules

        # instrumentation
        self.frames_popped = 0
        self.max_stack_height = len(stack)

    @classmethod
    def initial(cls, depth, variant='axis3d'):

        depth = _check_depth(depth)
        variant = get_variant(variant)

        model = variant.make_model()

        # a zero-depth curve is the bare starting point
        if depth > 0:
            stack = [Frame(depth, variant.root_symbol, variant.root_turn)]
        else:
            stack = []

        return cls(stack, model.origin(), model.initial_heading(),
                   model, variant.rules)

    def is_terminal(self):
        return not self.stack

    def step(self):

        while self.stack:

            frame = self.stack.pop()
            self.frames_popped += 1

            if frame.remaining > 0:
                self.stack.extend(expand(self.rules, frame))
                self.max_stack_height = max(self.max_stack_height,
                                            len(self.stack))

            self.heading, offset = self.model.advance(self.heading, frame.turn)

            if offset is not None:
                self.position = self.position + offset
                return self.position.copy()

        return None

######################################################################
# lazily yield positions along the curve, starting at the origin.
# Arguments are checked immediately, not on the first next().

def generate(depth, variant='axis3d'):

    return _walk(CurveState.initial(depth, variant))

def _walk(state):

    yield state.position.copy()

    while True:
        pos = state.step()
        if pos is None:
            break
        yield pos

# same as above but materialized as an n-by-dim array

def curve_points(depth, variant='axis3d'):

    return np.array(list(generate(depth, variant)))
