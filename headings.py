######################################################################
#
# headings.py
#
######################################################################
#
# Heading models for the arrowhead curve generator. A heading model
# knows how a turn instruction changes the current heading and which
# displacement (if any) the turtle takes afterwards.
#
# Two models share the same interface:
#
#   AxisRotationModel - 3D, heading is a scipy Rotation composed from
#                       three fixed rotations A, B, C
#
#   HexDirectionModel - 2D, heading is an index into a table of six
#                       unit directions spaced 60 degrees apart

import enum
import numpy as np
from scipy.spatial import transform

######################################################################
# 3D model

class Rotation(enum.Enum):
    A = 'a'
    B = 'b'
    C = 'c'
    NONE = '_'

class AxisRotationModel:

    """Heading is a unit rotation; each turning instruction
    right-composes one of three fixed rotations and then steps once
    along +x as seen from the new heading.

    The three rotations turn by ``turn_angle`` about the axes
    (0, cos a, sin a) for a = 0, 120 and 240 degrees. The default
    turn angle of pi/3 is the one the reference arrowhead program
    uses.
    """

    dim = 3

    def __init__(self, turn_angle=np.pi/3):

        self.turn_angle = turn_angle
        self.step = np.array([1., 0., 0.])

        star_angle = 2*np.pi/3

        self.rotations = dict()

        for i, rot in enumerate([Rotation.A, Rotation.B, Rotation.C]):
            a = i * star_angle
            axis = np.array([0., np.cos(a), np.sin(a)])
            self.rotations[rot] = transform.Rotation.from_rotvec(
                axis * turn_angle)

    def origin(self):
        return np.zeros(3)

    def initial_heading(self):
        return transform.Rotation.identity()

    def advance(self, heading, turn):

        if turn is Rotation.NONE:
            return heading, None

        heading = heading * self.rotations[turn]

        return heading, heading.apply(self.step)

######################################################################
# 2D model

class Turn(enum.IntEnum):
    LEFT = 1
    NONE = 0
    RIGHT = -1

NUM_DIRECTIONS = 6

class HexDirectionModel:

    """Heading is an index in [0, 6) into a table of unit vectors at
    multiples of 60 degrees; LEFT/RIGHT rotate it by one slot and then
    step along the new direction."""

    dim = 2

    def __init__(self):

        theta = np.arange(NUM_DIRECTIONS) * (2*np.pi / NUM_DIRECTIONS)

        self.directions = np.column_stack((np.cos(theta), np.sin(theta)))

    def origin(self):
        return np.zeros(2)

    def initial_heading(self):
        return 0

    def advance(self, heading, turn):

        if turn is Turn.NONE:
            return heading, None

        heading = (heading + turn.value) % NUM_DIRECTIONS

        return heading, self.directions[heading]
