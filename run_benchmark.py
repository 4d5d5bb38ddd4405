#!/usr/bin/env python

import subprocess
import sys
import re

def main():

    test_cases = [
        ('axis3d', 8),
        ('axis3d', 10),
        ('axis3d', 12),
        ('hex2d', 8),
        ('hex2d', 10),
        ('hex2d', 12)
    ]

    expr = re.compile(r'generated (.*) vertices in (.*) s \(')

    ostr = open('benchmark_results.txt', 'a')

    first = True

    for variant, max_depth in test_cases:

        print(variant, max_depth)

        args = [ sys.executable, 'arrowhead.py',
                 '-x', '0', variant, str(max_depth) ]

        if first:
            print('throwing away first run...')
            subprocess.run(args, capture_output=True, text=True)
            first = False

        print(args)

        result = subprocess.run(args, capture_output=True, text=True)

        output = result.stdout

        print(output)

        match = re.search(expr, output)

        assert match

        nvert = int(match.group(1))
        time = float(match.group(2))

        period = time / nvert
        ostr.write('{} {} {}\n'.format(variant, max_depth, repr(period)))
        ostr.flush()

    ostr.close()

if __name__ == '__main__':
    main()
