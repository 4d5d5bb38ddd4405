######################################################################
#
# vertex_buffers.py
#
######################################################################
#
# Turn a sequence of curve positions into a colored vertex buffer and
# an index buffer that draws consecutive positions as independent line
# segments: (0,1), (1,2), (2,3), ...

import numpy as np

def vertex_dtype(dim):
    return np.dtype([('pos', np.float32, (dim,)),
                     ('color', np.float32, (3,))])

######################################################################
# color policies: called with the vertex count, return a count-by-3
# array of RGB values in [0, 1]

def constant_color(rgb=(1., 1., 1.)):

    rgb = np.asarray(rgb, dtype=np.float64)

    if rgb.shape != (3,):
        raise ValueError('color must be an RGB triple, got {!r}'.format(rgb))

    if np.any(rgb < 0) or np.any(rgb > 1):
        raise ValueError('color components must lie in [0, 1]')

    def rule(count):
        return np.tile(rgb, (count, 1))

    return rule

# smooth gradient along the curve: |sin(pi*t + phase)| per channel
# for t running from 0 at the first vertex to 1 at the last

def gradient_color(phase=(0., np.pi/3, 2*np.pi/3)):

    phase = np.asarray(phase, dtype=np.float64)

    def rule(count):
        t = np.arange(count, dtype=np.float64) / max(count - 1, 1)
        return np.abs(np.sin(np.pi * t[:, None] + phase[None, :]))

    return rule

######################################################################
# index k of 2*(n-1) is (k+1)//2 -> 0 1 1 2 2 3 ...

def line_strip_indices(n):

    count = 2 * max(n - 1, 0)

    return ((np.arange(count, dtype=np.uint32) + 1) // 2).astype(np.uint32)

######################################################################

def build(positions, scale, color_rule=None, embed_3d=True):

    """Build ``(vertices, indices)`` from curve positions.

    Positions are multiplied by ``scale``; 2D positions get z = 0 when
    ``embed_3d`` is set. ``color_rule`` defaults to constant white.
    """

    if not scale > 0:
        raise ValueError('scale must be positive, got {!r}'.format(scale))

    if color_rule is None:
        color_rule = constant_color()

    points = np.asarray(list(positions), dtype=np.float64)

    if points.size == 0:
        points = points.reshape(0, 2)

    assert points.ndim == 2 and points.shape[1] in (2, 3)

    if embed_3d and points.shape[1] == 2:
        points = np.column_stack((points, np.zeros(len(points))))

    n, dim = points.shape

    vertices = np.zeros(n, dtype=vertex_dtype(dim))
    vertices['pos'] = points * scale
    vertices['color'] = color_rule(n)

    return vertices, line_strip_indices(n)

# n-by-2-by-dim array of segment endpoints, e.g. for a LineCollection

def segments(vertices, indices):

    pos = vertices['pos']

    return pos[indices].reshape(-1, 2, pos.shape[1])
