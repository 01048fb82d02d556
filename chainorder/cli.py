"""
chainorder Command Line Interface.

Commands:
    chainorder solve D0 D1 ... Dn    Solve one chain
    chainorder solve < input.txt     Read "N d0 ... d(N-1)" from stdin
    chainorder run <config.yaml>     Solve every chain in a config
"""

import argparse
import sys
import os


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description='chainorder - optimal matrix chain multiplication order',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  chainorder solve 2 5 4 1 10
  chainorder solve 30 35 15 5 10 20 25 --show-table --show-dims
  echo "5 2 5 4 1 10" | chainorder solve
  chainorder run chains.yaml
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Solve subcommand
    solve_parser = subparsers.add_parser('solve', help='Solve a single chain',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Dimensions:
  D0 D1 ... Dn describe n matrices, matrix i being D(i-1) x Di.
  With no dimensions on the command line, stdin is read as a count N
  followed by N dimension values.
        """
    )
    solve_parser.add_argument('dims', nargs='*', type=int,
                       help='Chain dimensions d0 d1 ... dn')
    solve_parser.add_argument('--no-order', action='store_true',
                       help='Do not print the optimal parenthesization')
    solve_parser.add_argument('--show-table', action='store_true',
                       help='Print the DP cost table')
    solve_parser.add_argument('--show-dims', action='store_true',
                       help='Print rows and columns of each matrix')
    solve_parser.add_argument('-v', '--verbose', action='store_true')

    # Run subcommand
    run_parser = subparsers.add_parser('run', help='Solve chains from a YAML config')
    run_parser.add_argument('config', help='YAML configuration file')
    run_parser.add_argument('-v', '--verbose', action='store_true')

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == 'solve':
        run_solve(args)
    elif args.command == 'run':
        run_batch(args)


def read_stdin_dims(stream) -> list:
    """
    Read the console format: a count N followed by N dimension values.
    """
    from .core.errors import InvalidInputShape, NonIntegerDimension

    tokens = stream.read().split()
    if not tokens:
        raise InvalidInputShape("No dimensions given")

    try:
        values = [int(t) for t in tokens]
    except ValueError:
        raise NonIntegerDimension(f"Expected integers on stdin, got: {' '.join(tokens)}") from None

    count, dims = values[0], values[1:]
    if count != len(dims):
        raise InvalidInputShape(
            f"Count says {count} dimensions but {len(dims)} were given"
        )
    return dims


def run_solve(args):
    """Solve one chain and print the result."""
    from .core.chain_solver import ChainSolver
    from .core.errors import ChainInputError
    from .utils.formatting import format_dimensions, format_cost_table

    try:
        dims = args.dims if args.dims else read_stdin_dims(sys.stdin)

        solver = ChainSolver(verbose=args.verbose)
        result = solver.solve(dims, parenthesize=not args.no_order)

    except ChainInputError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    if args.show_dims:
        print(format_dimensions(result.dims))
    if result.order is not None:
        print(result.order)
    if args.show_table:
        print(format_cost_table(result.cost_table))
    print(result.min_cost)

    sys.exit(0)


def run_batch(args):
    """Run config-based batch solve."""
    from .pipeline.config_parser import load_config
    from .pipeline.runner import BatchRunner
    from .utils.formatting import format_cost_table
    import yaml

    if not os.path.exists(args.config):
        print(f"ERROR: Config file not found: {args.config}", file=sys.stderr)
        sys.exit(1)

    try:
        config = load_config(args.config)
        results = BatchRunner(config, verbose=args.verbose).run_all()
    except (ValueError, yaml.YAMLError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    for entry, result in zip(config.chains, results):
        line = f"{entry.name}: {result.min_cost}"
        if result.order is not None:
            line += f" {result.order}"
        print(line)
        if entry.show_table:
            print(format_cost_table(result.cost_table))

    sys.exit(0)


if __name__ == '__main__':
    main()
