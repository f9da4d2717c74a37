import sys
import logging

from expr_config import CONFIG_FILE, Config, ConfigError, load_config
from expr_errors import ParseError
from expr_parser import ParseResult, parse
from expr_tree import render_tree

logger = logging.getLogger(__name__)

# ------------------------------------------------------------
# Output helpers
# ------------------------------------------------------------

def report_error(text: str, err: ParseError):
    print(f"Error: {err}")
    if text:
        print(f"  {text}")
        print("  " + " " * err.offset + "^")


def print_result(result: ParseResult, indent: str = "  "):
    print("Parse Tree:")
    for line in render_tree(result.tree, indent):
        print(line)

    print("\nSymbol Table:")
    for lexeme, kind in result.symbols:
        print(f"{lexeme} -> {kind}")

    print(f"\nInput accepted based on Grammar: {str(result.valid).lower()}")


def parse_once(text: str, config: Config) -> bool:
    try:
        result = parse(text, max_depth=config.max_depth)
    except ParseError as e:
        report_error(text, e)
        return False

    print_result(result, config.indent)
    return True


# ------------------------------------------------------------
# Interactive shell
# ------------------------------------------------------------

def run_shell(config: Config, read=None):
    read = read or input
    exit_word = config.exit_word.casefold()
    attempts = 0

    while True:
        try:
            line = read(config.prompt)
        except EOFError:
            print()
            break

        if line.casefold() == exit_word:
            break

        attempts += 1
        parse_once(line, config)

    logger.info("shell finished after %d attempt(s)", attempts)


# ------------------------------------------------------------
# CLI helpers
# ------------------------------------------------------------

def print_help():
    print(f"""
Expression Parser CLI
Usage: exprparse [--config PATH] <command> [args]

Commands:
  shell         Read expressions interactively (default)
  parse EXPR    Parse a single expression and print the result
  help          Show this help message

Options:
  --config PATH Read settings from PATH instead of ./{CONFIG_FILE}
    """)


def _split_config_option(argv: list[str]):
    if "--config" not in argv:
        return CONFIG_FILE, argv

    i = argv.index("--config")
    if i + 1 >= len(argv):
        raise ConfigError("--config requires a path")
    return argv[i + 1], argv[:i] + argv[i + 2:]


# ------------------------------------------------------------
# Entry point
# ------------------------------------------------------------

def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        config_path, args = _split_config_option(list(argv))
        config = load_config(config_path)
    except ConfigError as e:
        print(f"Config error: {e}")
        return 2

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("loaded config from %s: %r", config_path, config)

    cmd = args[0] if args else "shell"

    if cmd == "shell":
        run_shell(config)
        return 0
    if cmd == "parse":
        if len(args) != 2:
            print("Usage: exprparse parse EXPR")
            return 2
        return 0 if parse_once(args[1], config) else 1
    if cmd == "help":
        print_help()
        return 0

    print(f"Unknown command: {cmd}")
    print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
