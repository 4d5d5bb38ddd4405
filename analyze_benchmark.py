#!/usr/bin/env python

import matplotlib.pyplot as plt
import numpy as np

def load_results(filename='benchmark_results.txt'):

    results = dict()

    with open(filename, 'r') as istr:

        for line in istr:

            line = line.rstrip()

            if not line:
                continue

            variant, depth, period = line.split()
            depth = int(depth)
            period = float(period)

            if variant not in results:
                results[variant] = dict()

            # keep the fastest of repeated runs
            prev = results[variant].get(depth, period)
            results[variant][depth] = min(prev, period)

    return results

def main():

    results = load_results()

    plt.grid(color=[.9, .9, .9], zorder=-1, linewidth=.5)

    for variant in sorted(results.keys()):

        vresults = results[variant]

        depths = np.array(sorted(vresults.keys()))
        result_data = np.array([vresults[d] for d in depths]) * 1e6

        mtime = np.power(result_data.prod(), 1.0/len(result_data))

        unit = 'μs'
        if mtime < 1:
            mtime *= 1e3
            unit = 'ns'
        print('{} {:.4g} {}'.format(variant, mtime, unit))

        plt.plot(depths, result_data, '.-', zorder=2, label=variant)

    plt.legend(loc='upper right')
    plt.xlabel('depth')
    plt.ylabel('μs / vertex')
    plt.title('arrowhead curve benchmark results')

    plt.gca().set_axisbelow(True)

    plt.yscale('log')

    plt.savefig('benchmark_results.png', dpi=300, facecolor=(1., 1., 1., 0.))
    print('wrote benchmark_results.png')


if __name__ == '__main__':
    main()
