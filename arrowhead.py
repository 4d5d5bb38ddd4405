#!/usr/bin/env python
######################################################################
#
# arrowhead.py
#
######################################################################
#
# Generate a Sierpinski arrowhead-family curve, build vertex and index
# buffers for it and plot them (or dump them as text).
#
# Based on https://en.wikipedia.org/wiki/Sierpi%C5%84ski_curve and
# http://paulbourke.net/fractals/lsys/

import argparse
from datetime import datetime
import numpy as np

from curve_generator import KNOWN_VARIANTS, generate
from plot_segments import plot_curve
from vertex_buffers import build, constant_color, gradient_color

######################################################################
# parse "r,g,b" into a float triple in [0, 1]

def parse_color(text):

    try:
        rgb = tuple(float(c) for c in text.split(','))
    except ValueError:
        raise argparse.ArgumentTypeError('invalid color: ' + text)

    if len(rgb) != 3:
        raise argparse.ArgumentTypeError('color needs 3 components: ' + text)

    if any(c < 0 or c > 1 for c in rgb):
        raise argparse.ArgumentTypeError(
            'color components must lie in [0, 1]: ' + text)

    return rgb

######################################################################
# parse command-line options for this program

def parse_options(argv=None):

    parser = argparse.ArgumentParser(
        description='Sierpinski arrowhead curve generator')

    parser.add_argument('variant', metavar='VARIANT', nargs=1,
                        help='curve variant to generate',
                        type=str,
                        choices=KNOWN_VARIANTS)

    parser.add_argument('max_depth', metavar='MAXDEPTH', nargs=1,
                        help='recursion depth to evaluate', type=int)

    parser.add_argument('-s', dest='scale', metavar='SCALE',
                        type=float, default=0.05,
                        help='uniform scale applied to vertices')

    parser.add_argument('-c', dest='color', metavar='R,G,B',
                        type=parse_color, default=(1., 1., 1.),
                        help='constant vertex color')

    parser.add_argument('-g', dest='gradient', action='store_true',
                        help='color vertices with a gradient along the curve')

    parser.add_argument('-x', dest='max_segments', metavar='MAXSEGMENTS',
                        type=int, default=100000,
                        help='maximum number of segments to plot')

    parser.add_argument('-t', dest='text_only', action='store_true',
                        help='use text output instead of PNG')

    parser.add_argument('-o', dest='image_filename', metavar='FILE',
                        default='segment_plot.png',
                        help='image file to write')

    opts = parser.parse_args(argv)

    opts.variant = opts.variant[0]
    opts.max_depth = opts.max_depth[0]

    if opts.max_depth < 0:
        parser.error('MAXDEPTH must be non-negative')

    if not opts.scale > 0:
        parser.error('SCALE must be positive')

    if opts.gradient:
        opts.color_rule = gradient_color()
    else:
        opts.color_rule = constant_color(opts.color)

    return opts

######################################################################
# main function

def main(argv=None):

    opts = parse_options(argv)

    # time curve generation
    start = datetime.now()

    vertices, indices = build(generate(opts.max_depth, opts.variant),
                              opts.scale, opts.color_rule)

    # print elapsed time
    elapsed = (datetime.now() - start).total_seconds()

    print('generated {} vertices in {:.6f} s ({:.3f} us/vertex)'.format(
        len(vertices), elapsed, 1e6 * elapsed/len(vertices)))

    nseg = len(indices) // 2

    if opts.max_segments >= 0 and nseg > opts.max_segments:
        print('...maximum of {} segments exceeded, skipping output!'.format(
            opts.max_segments))
        return

    if opts.text_only:
        np.savetxt('vertices.txt',
                   np.hstack((vertices['pos'], vertices['color'])))
        print('wrote vertices.txt')
    else:
        plot_curve(vertices, indices, opts.image_filename)

if __name__ == '__main__':
    main()
