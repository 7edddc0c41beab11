"""
Indy-lang Interpreter

This is the main entry point for the Indy-lang interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer classifies every source line into a token.
3. The Parser builds the nested block tree, failing fast on structural errors.
4. The Interpreter walks the tree, printing output, prompting and waiting.

Set the ``INDYDEBUG`` environment variable to dump tokens and the tree
before execution.
"""
import os
import sys

from indylang import __version__
from indylang.runner import run_source


def print_usage(stream=None):
    """
    Print usage.
    """
    out = stream if stream is not None else sys.stdout
    print(file=out)
    print("Indy-lang Interpreter", file=out)
    print(file=out)
    print("Usage:", file=out)
    print("    indy <script.indy> [--verbose]", file=out)
    print(file=out)
    print("Arguments:", file=out)
    print("    <script.indy>", file=out)
    print("        Path to an Indy-lang source file to execute. Executable lines", file=out)
    print("        must sit between a 'start' line and a final 'end' line.", file=out)
    print(file=out)
    print("Example:", file=out)
    print("    indy hello.indy --verbose", file=out)
    print(file=out)
    print("Options:", file=out)
    print("    --verbose", file=out)
    print("        Print engine diagnostics while the script runs.", file=out)
    print("    -h, --help", file=out)
    print("        Show this help message and exit.", file=out)


def debug_print_tokens_tree(tokens, tree):
    """
    Print classified lines and the block tree
    """
    print("\nTokens:\n")
    for tok in tokens:
        print(tok)
    print("\nTree:\n")
    print(tree)
    print(" ")


def run_script(script_name: str, verbose: bool = False) -> int:
    """
    Run an Indy-lang script and return the process exit code.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"[Error] Could not read file {script_name}: {e}", file=sys.stderr)
        return 1

    on_parsed = debug_print_tokens_tree if os.environ.get('INDYDEBUG') else None
    try:
        finished = run_source(code, script_name, verbose, on_parsed=on_parsed)
    except SyntaxError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    return 0 if finished else 1


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - ``-h`` or ``--help`` anywhere: print usage and exit.
    - ``--verbose`` anywhere: enable engine diagnostics.
    - The first argument that is not an option is the script path.
    - No script path: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if any(arg in ('-h', '--help') for arg in args):
        print_usage()
        return 0

    verbose = '--verbose' in args
    paths = [arg for arg in args if not arg.startswith('-')]

    print(f"--- Indy-lang Interpreter v{__version__} ---")
    if not paths:
        print("Error: Missing input file.", file=sys.stderr)
        print_usage(sys.stderr)
        return 1
    return run_script(paths[0], verbose)


def console_main() -> int:
    """
    Console script entry point.
    """
    return main(sys.argv)


if __name__ == "__main__":
    sys.exit(main(sys.argv))
