import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection

from vertex_buffers import line_strip_indices, segments, vertex_dtype

# draw a vertex/index buffer pair as one collection of line segments,
# colored by the first vertex of each segment

def plot_curve(vertices, indices, image_filename='segment_plot.png'):

    segs = segments(vertices, indices)

    assert len(segs.shape) == 3 and segs.shape[1] == 2

    colors = vertices['color'][indices[::2]]

    dim = segs.shape[2]
    flat = dim == 2 or not np.any(segs[:, :, 2])

    fig = plt.figure()

    if flat:

        lc = LineCollection(segs[:, :, :2], colors=colors)

        ax = fig.add_subplot(111)
        ax.add_collection(lc)
        ax.autoscale()
        ax.set_aspect('equal')

    else:

        from mpl_toolkits.mplot3d.art3d import Line3DCollection

        lc = Line3DCollection(segs, colors=colors)

        ax = fig.add_subplot(111, projection='3d')
        ax.add_collection3d(lc)

        lo = segs.reshape(-1, 3).min(axis=0)
        hi = segs.reshape(-1, 3).max(axis=0)
        ax.set_xlim(lo[0], hi[0])
        ax.set_ylim(lo[1], hi[1])
        ax.set_zlim(lo[2], hi[2])

    ax.set_facecolor('k')
    ax.axis('off')

    fig.savefig(image_filename, facecolor='k')
    plt.close(fig)

    print('wrote {}'.format(image_filename))


if __name__ == '__main__':

    # columns are x y z r g b, as written by arrowhead.py -t
    data = np.atleast_2d(np.genfromtxt('vertices.txt'))

    vertices = np.zeros(len(data), dtype=vertex_dtype(3))
    vertices['pos'] = data[:, :3]
    vertices['color'] = data[:, 3:]

    plot_curve(vertices, line_strip_indices(len(vertices)))
