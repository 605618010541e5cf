"""主程序入口 - 构造布尔表达式、求值并输出真值表"""
import argparse
import logging
import sys

from config.config import LOGGING_CONFIG, TABLE_CONFIG, validate_config
from logic import (
    FREE_VARIABLES, PALETTE, format_tokens, loads_tokens,
    token_to_dict, tokenize, validate_and_evaluate
)
from truthtable import build_truth_table, export_csv, format_dataframe, result_counts, to_dataframe

logger = logging.getLogger(__name__)

TRUE_WORDS = {"1", "true", "t", "yes", "on"}
FALSE_WORDS = {"0", "false", "f", "no", "off"}


def parse_assignment(items):
    """把 ["A=true", "B=0"] 解析为环境字典，未给出的变量为 False"""
    env = {name: False for name in FREE_VARIABLES}
    for item in items or []:
        name, sep, raw = item.partition("=")
        name = name.strip().upper()
        raw = raw.strip().lower()
        if not sep or name not in env:
            raise ValueError(f"Invalid assignment '{item}', expected one of {', '.join(FREE_VARIABLES)}=true|false")
        if raw in TRUE_WORDS:
            env[name] = True
        elif raw in FALSE_WORDS:
            env[name] = False
        else:
            raise ValueError(f"Invalid boolean value '{raw}' for {name}")
    return env


def load_tokens(args):
    if args.tokens_file:
        logger.info(f"Loading tokens from {args.tokens_file}")
        with open(args.tokens_file, encoding="utf-8") as f:
            return loads_tokens(f.read())
    return tokenize(args.expression)


def print_palette():
    for tk in PALETTE:
        print(f"{tk.symbol:<6} {token_to_dict(tk)}")


def main(args):
    validate_config()

    if args.palette:
        print_palette()
        return 0

    if not args.expression and not args.tokens_file:
        logger.error("No expression given (use EXPRESSION or --tokens-file)")
        return 2

    try:
        env = parse_assignment(args.set)
        tokens = load_tokens(args)
    except (ValueError, OSError) as e:
        # ExpressionError 也是 ValueError
        logger.error(str(e))
        return 2

    logger.info(f"Expression: {format_tokens(tokens)}")
    result = validate_and_evaluate(tokens, env)
    inputs = ", ".join(f"{name}={str(env[name]).lower()}" for name in FREE_VARIABLES)
    if result.ok:
        print(f"Result: {str(result.value).upper()}  (evaluated under {inputs})")
    else:
        print(f"Error: {result.error}")

    if args.table or args.output:
        rows = build_truth_table(tokens)
        if not rows:
            print(TABLE_CONFIG["empty_table_message"])
        else:
            counts = result_counts(rows)
            logger.info(f"Truth table: {len(rows)} rows, {counts['true']} true, "
                        f"{counts['false']} false, {counts['error']} errors")
            if args.table:
                print(format_dataframe(to_dataframe(rows)).to_string(index=False))
            if args.output:
                export_csv(rows, args.output)

    return 0 if result.ok else 1


def build_parser():
    parser = argparse.ArgumentParser(description="Logic Circuit Playground - boolean expression evaluator")

    parser.add_argument(
        "expression",
        nargs="?",
        help="Expression built from A, B, C, TRUE, FALSE, !, &&, ||, ( and ), e.g. \"!(A && B) || C\""
    )
    parser.add_argument(
        "--tokens-file",
        type=str,
        default=None,
        help="JSON file with a list of tokens ({\"type\": \"VAR\", \"value\": \"A\"}, ...)"
    )
    parser.add_argument(
        "--set",
        action="append",
        metavar="VAR=BOOL",
        help="Set an input, e.g. --set A=true (repeatable, unset inputs are false)"
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Print the truth table over the variables used in the expression"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Path to save the truth table as CSV"
    )
    parser.add_argument(
        "--palette",
        action="store_true",
        help="List the available tokens and exit"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    return parser


def cli():
    args = build_parser().parse_args()
    logging.basicConfig(level=args.log_level, format=LOGGING_CONFIG["format"])
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
