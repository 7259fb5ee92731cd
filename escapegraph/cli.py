import argparse
import sys
from concurrent.futures import ProcessPoolExecutor
from functools import partial

from loguru import logger

from .cases import InputFormatError, format_answers, read_cases
from .config import DEFAULT_LOG_LEVEL, HULL_EDGE_ESCAPE_WIDTH, HULL_EDGE_WEIGHTS, LOG_LEVELS, EscapeConfig
from .planner import EscapePlanner


def solve_case(case, config=None):
    """Preprocess one test case and return its 'y'/'n' answer line."""
    planner = EscapePlanner(case.obstacles, config)
    return format_answers(planner.answer(case.queries, case.radius))


def solve_cases(cases, config=None, jobs=1):
    """
    Solve independent test cases, optionally in a process pool.

    Returns:
        list of str: Answer lines in input order.
    """
    solve = partial(solve_case, config=config)
    if jobs <= 1 or len(cases) <= 1:
        return [solve(case) for case in cases]
    with ProcessPoolExecutor(max_workers=jobs) as executor:
        return list(executor.map(solve, cases))


def build_parser():
    parser = argparse.ArgumentParser(
        prog='escapegraph',
        description='Decide whether disc agents can escape a field of point obstacles.',
    )
    parser.add_argument('input', nargs='?', type=argparse.FileType('r'), default=sys.stdin,
                        help='test-case file (default: stdin)')
    parser.add_argument('-o', '--output',
                        help='answer file (default: stdout)')
    parser.add_argument('--hull-edge-weight', choices=HULL_EDGE_WEIGHTS, default=HULL_EDGE_ESCAPE_WIDTH,
                        help='weight of edges from hull faces to open space')
    parser.add_argument('--no-escape-edge', action='store_true',
                        help='do not link every face directly to open space')
    parser.add_argument('-j', '--jobs', type=int, default=1,
                        help='number of worker processes for independent test cases')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS, default=DEFAULT_LOG_LEVEL,
                        help='loguru level for diagnostics on stderr')
    return parser


def main(args=None):
    """Console entry point: read all test cases, print one answer line each."""
    options = build_parser().parse_args(args)

    logger.remove()
    logger.add(sys.stderr, level=options.log_level)

    config = EscapeConfig(
        hull_edge_weight=options.hull_edge_weight,
        universal_escape_edge=not options.no_escape_edge,
    )

    text = options.input.read()
    if options.input is not sys.stdin:
        options.input.close()
    try:
        cases = read_cases(text)
    except InputFormatError as error:
        logger.error(f'Malformed input: {error}')
        return 1

    logger.info(f'Read {len(cases)} test case(s)')
    answers = ''.join(line + '\n' for line in solve_cases(cases, config, options.jobs))
    # The output file is only created once every case is solved
    if options.output is None:
        sys.stdout.write(answers)
        sys.stdout.flush()
    else:
        with open(options.output, 'w') as target:
            target.write(answers)
    return 0


if __name__ == '__main__':
    sys.exit(main())
