import argparse
import logging
import sys

from . import graph
from . import panels
from .session import Session

PROMPT = 'gitsim@repo ➜ '


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')
    return args.func(args)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog='gitsim')
    parser.add_argument('--log-level', default='warning',
                        choices=['debug', 'info', 'warning', 'error'])
    commands = parser.add_subparsers(dest='command')
    commands.required = True

    repl_parser = commands.add_parser('repl')
    repl_parser.set_defaults(func=repl)

    run_parser = commands.add_parser('run')
    run_parser.set_defaults(func=run)
    run_parser.add_argument('script', type=argparse.FileType('r'))
    run_parser.add_argument('--panels', action='store_true')

    graph_parser = commands.add_parser('graph')
    graph_parser.set_defaults(func=graph_)
    graph_parser.add_argument('script', type=argparse.FileType('r'))

    return parser.parse_args(argv)


def _run_script(session, script, echo):
    with script:
        for line in script:
            line = line.strip()
            if not line:
                continue
            output = session.run(line)
            if echo:
                print(f'$ {line}')
                print(output)


def run(args):
    session = Session()
    _run_script(session, args.script, echo=True)
    if args.panels:
        print('')
        print(panels.state_panel(session.state))


def graph_(args):
    session = Session()
    _run_script(session, args.script, echo=False)
    print(graph.to_dot(session.state))


def repl(args):
    session = Session()
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print('')
            break

        line = line.strip()
        if line in ('exit', 'quit'):
            break
        elif line == 'undo':
            print('Undone.' if session.undo() else 'Nothing to undo.')
        elif line == 'history':
            print('\n'.join(session.commands()))
        elif line == 'graph':
            print(graph.to_dot(session.state))
        elif line == 'panels':
            print(panels.state_panel(session.state))
        elif line:
            print(session.run(line))


if __name__ == '__main__':
    sys.exit(main())
