import sys
import argparse
import traceback

from fluentdt import CalendarWeek, FluentConfig, WeekNumbering, WeekRule
from fluentdt.datetime_utils.parser import parse_date_string
from fluentdt.logging import logger, setup_logging

def _rule_from_args(args) -> WeekRule:
    if args.locale:
        return WeekRule.from_locale(args.locale)
    if args.first_day is not None or args.min_days is not None:
        default = FluentConfig.week_rule
        return WeekRule(
            default.first_day_of_week if args.first_day is None else args.first_day,
            default.min_days_in_first_week if args.min_days is None else args.min_days,
        )
    return FluentConfig.week_rule

def _add_rule_options(parser):
    parser.add_argument('--locale', help='Take the week rule from a locale, e.g. de_DE or en_US')
    parser.add_argument('--first-day', type=int, choices=range(7), metavar='0-6',
                        help='First day of the week, 0 = Monday .. 6 = Sunday')
    parser.add_argument('--min-days', type=int, choices=range(1, 8), metavar='1-7',
                        help='Days of the new year the first week must hold (4 = ISO 8601)')

def build_parser():
    parser = argparse.ArgumentParser(prog='fluentdt', description="Calendar week calculations.")
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    commands = parser.add_subparsers(dest='command', required=True)

    week = commands.add_parser('week', help='Print the calendar week of a date')
    week.add_argument('date', help='Date as YYYY-MM-DD, DD.MM.YYYY, DD/MM/YYYY or YYYY/MM/DD')
    week.add_argument('--rule', choices=[m.value for m in WeekNumbering],
                      default=FluentConfig.numbering.value,
                      help='Week numbering: international (default) or german')
    _add_rule_options(week)

    monday = commands.add_parser('monday', help='Print the Monday of a week token')
    monday.add_argument('token', help='YYYY/WW or WW/YYYY')

    add = commands.add_parser('add', help='Shift a week token by whole weeks')
    add.add_argument('token', help='YYYY/WW or WW/YYYY')
    add.add_argument('weeks', type=int, help='Number of weeks, may be negative')
    _add_rule_options(add)

    diff = commands.add_parser('diff', help='Print the number of weeks between two tokens')
    diff.add_argument('first', help='YYYY/WW or WW/YYYY')
    diff.add_argument('second', help='YYYY/WW or WW/YYYY')

    return parser

def run(args) -> str:
    if args.command == 'week':
        value = parse_date_string(args.date)
        numbering = WeekNumbering.from_string(args.rule)
        return str(CalendarWeek.from_date(value, numbering, _rule_from_args(args)))
    if args.command == 'monday':
        return CalendarWeek.parse(args.token).monday().isoformat()
    if args.command == 'add':
        return str(CalendarWeek.parse(args.token).add(args.weeks, _rule_from_args(args)))
    if args.command == 'diff':
        return str(CalendarWeek.parse(args.first) - CalendarWeek.parse(args.second))
    raise ValueError(f"Unknown command: {args.command}")

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level="DEBUG" if args.debug or FluentConfig.verbosity > 1 else "WARNING")
    try:
        result = run(args)
        logger.debug(f"{args.command}: {result}")
        print(result)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.debug:
            traceback.print_exc(file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
