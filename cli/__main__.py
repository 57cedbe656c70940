"""Entry point for woord CLI client."""

import argparse
import logging
import os
import sys

from core.config import ANSWER_MODES, REVIEW_SUB_MODES, LEVELS, CUSTOM_LEVEL
from cli.api_client import WoordAPIClient
from cli.console import ConsoleUI


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Woord - Dutch vocabulary practice')
    parser.add_argument(
        '--server',
        default='http://localhost:8000',
        help='Server URL (default: http://localhost:8000)'
    )
    parser.add_argument(
        '--lang',
        default='en',
        choices=['en', 'ru', 'uk'],
        help='Translation language to show (default: en)'
    )
    commands = parser.add_subparsers(dest='command', required=True)

    study = commands.add_parser('study', help='Practice flashcards')
    study.add_argument('--mode', default='new', choices=ANSWER_MODES)
    study.add_argument('--level', default='A1', choices=LEVELS)
    study.add_argument('--sub-mode', default='weak', choices=REVIEW_SUB_MODES)

    commands.add_parser('search', help='Search example sentences')

    learned = commands.add_parser('learned', help='List learned words')
    learned.add_argument('--level', default='A1', choices=LEVELS + [CUSTOM_LEVEL])
    learned.add_argument('--undo', type=int, metavar='WORD_ID',
                         help='Send a learned word back to study')

    add = commands.add_parser('add', help='Add your own word')
    add.add_argument('dutch')
    add.add_argument('--en', default='')
    add.add_argument('--ru', default='')
    add.add_argument('--uk', default='')
    add.add_argument('--level', choices=LEVELS + [CUSTOM_LEVEL])
    add.add_argument('--repeat', action='store_true', help='Put the word on the repetition list')
    return parser


def main():
    logging.basicConfig(level=os.environ.get('LOG_LEVEL', 'WARNING'))
    args = build_parser().parse_args()

    client = WoordAPIClient(base_url=args.server)
    ui = ConsoleUI(client, lang=args.lang)
    if not ui.connect():
        sys.exit(2)

    try:
        if args.command == 'study':
            sub_mode = args.sub_mode if args.mode == 'review' else None
            failures = ui.study(args.mode, args.level, sub_mode)
            sys.exit(1 if failures else 0)
        elif args.command == 'search':
            ui.search_loop()
        elif args.command == 'learned':
            if args.undo is not None:
                ui.undo_learned(args.undo)
            else:
                ui.show_learned(args.level)
        elif args.command == 'add':
            word = ui.add_word(args.dutch, {'en': args.en, 'ru': args.ru, 'uk': args.uk},
                               level=args.level, in_repeat_list=args.repeat)
            sys.exit(0 if word else 1)
    except KeyboardInterrupt:
        print('\nGoodbye!')
        sys.exit(0)


if __name__ == '__main__':
    main()
