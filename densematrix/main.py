import argparse
import logging
import sys

import tabulate

from densematrix import config
from densematrix.matrix import Matrix, MatrixException
from densematrix.square import IdentityMatrix, SquareMatrix
from densematrix.utils import logger

demo_logger = logger.get_logger("densematrix.main")


def build_steps():
    """Returns the demonstration as (title, callable) pairs.

    Steps share state through `env`, later steps reuse earlier matrices.
    """
    env = {}

    def create():
        env['m1'] = Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        return env['m1']

    def transpose():
        env['m2'] = env['m1'].transpose()
        return env['m2']

    def invert_square():
        m9 = SquareMatrix(2)
        m9[0, 0] = 4
        m9[0, 1] = 7
        m9[1, 0] = 2
        m9[1, 1] = 6
        return m9.inverse()

    def add_row():
        env['m1'].add_row([10, 11, 12])
        return env['m1']

    def remove_row():
        env['m1'].remove_row()
        return env['m1']

    def add_column():
        env['m1'].add_column([13, 14, 15])
        return env['m1']

    def remove_column():
        env['m1'].remove_column()
        return env['m1']

    def fill_square():
        env['square'] = SquareMatrix(3).fill(3.0)
        return env['square']

    def identity():
        env['identity'] = IdentityMatrix(3)
        return env['identity']

    return [
        ("Creating a matrix", create),
        ("Transposing the matrix", transpose),
        ("Adding matrices", lambda: env['m1'] + env['m2']),
        ("Subtracting matrices", lambda: env['m1'] - env['m2']),
        ("Multiplying matrices", lambda: env['m1'] * env['m2']),
        ("Dividing one matrix by another matrix",
         lambda: Matrix([[8, 0], [0, 8]]) / Matrix([[2, 0], [0, 2]])),
        ("Determinant of a matrix", lambda: env['m1'].determinant()),
        ("Inverting a matrix", invert_square),
        ("Adding a row to the matrix", add_row),
        ("Removing a row from the matrix", remove_row),
        ("Adding a column to the matrix", add_column),
        ("Removing a column from the matrix", remove_column),
        ("Filling a square matrix with a single value", fill_square),
        ("Operations on a square matrix", lambda: env['square'] + env['m2']),
        ("Identity matrix", identity),
        ("Operations on the identity matrix", lambda: env['identity'] + env['m2']),
    ]


def show(result, stream, width):
    if isinstance(result, Matrix):
        result.display(stream, width)
    else:
        stream.write("%s\n" % result)


def run_demo(steps=None, stream=None, width=None, keep_going=False):
    """Runs each step, printing its title and result.

    Returns the (title, result) pairs of the steps that succeeded.
    """
    steps = build_steps() if steps is None else steps
    stream = stream or sys.stdout
    results = []
    for number, (title, step) in enumerate(steps, 1):
        stream.write("Step %s: %s\n" % (number, title))
        try:
            result = step()
        except MatrixException as e:
            demo_logger.error("Step %s failed: %s", number, e)
            if keep_going:
                continue
            break
        show(result, stream, width)
        stream.write("\n")
        results.append((title, result))
    return results


def summarize(results):
    rows = []
    for title, result in results:
        if isinstance(result, Matrix):
            rows.append([title, "%sx%s" % result.shape, ""])
        else:
            rows.append([title, "scalar", result])
    return tabulate.tabulate(
        rows, headers=["step", "shape", "value"], numalign="right", stralign="left")


def main(args):
    if args.verbose:
        logger.set_level(logging.DEBUG)
    steps = build_steps()
    results = run_demo(steps, width=args.width, keep_going=args.keep_going)
    if args.summary:
        print(summarize(results))
    return 0 if len(results) == len(steps) else 1


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Dense matrix demonstration')
    parser.add_argument('-w', '--width', default=config.DISPLAY_WIDTH, type=int,
                        help='Field width of each printed element')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log at DEBUG level')
    parser.add_argument('-s', '--summary', action='store_true',
                        help='Print a table of step results after the run')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('-f', '--fail-fast', dest='keep_going', action='store_false',
                       help='Stop at the first failing step (default)')
    group.add_argument('-k', '--keep-going', dest='keep_going', action='store_true',
                       help='Log failing steps and continue')
    parser.set_defaults(keep_going=False)
    return parser.parse_args(argv)


def run():
    sys.exit(main(parse_args()))


if __name__ == '__main__':
    run()
