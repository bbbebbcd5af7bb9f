"""Interactive shell and file runner for Monkey. Uses cmd as backend."""

from __future__ import annotations

import argparse
import cmd
import logging
import sys
from typing import Optional, TextIO

from termcolor import colored

from monkey import __version__
from monkey.config import get_log_level, get_prompt, get_recursion_limit, use_color
from monkey.errors import MonkeyError, MonkeyMacroContractError, MonkeySyntaxError
from monkey.interpreter import Interpreter

logger = logging.getLogger(__name__)

ERROR = "red"


def format_error(error: MonkeyError, color: Optional[bool] = None) -> str:
    """One message per line; internal errors are tagged."""
    if color is None:
        color = use_color()

    if isinstance(error, MonkeySyntaxError):
        label, lines = "parse error: ", error.diagnostics
    elif isinstance(error, MonkeyMacroContractError):
        label, lines = "[internal] ", [str(error)]
    else:
        label, lines = "error: ", [str(error)]

    if color:
        label = colored(label, ERROR, attrs=["bold"])
    return "\n".join(label + line for line in lines)


class Shell(cmd.Cmd):
    """Monkey interpreter shell."""
    intro = f"Monkey {__version__}\nType 'exit' or press Ctrl-D to leave."

    def __init__(self, interpreter: Optional[Interpreter] = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter if interpreter is not None else Interpreter()
        self.prompt = get_prompt()

    def default(self, line):
        """Evaluates one line of Monkey."""
        # cmd.Cmd leaves the loop on an uncaught exception
        try:
            result = self.interpreter.eval(line)
        except MonkeyError as e:
            print(format_error(e), file=self.stdout)
            return
        except RecursionError:
            print(format_error(MonkeyError("maximum recursion depth exceeded")), file=self.stdout)
            return
        print(result.inspect(), file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True


def run_file(path: str, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """Evaluate a whole file as one program; return the process exit status."""
    out = out or sys.stdout
    err = err or sys.stderr
    with open(path, encoding="utf-8") as f:
        source = f.read()
    try:
        result = Interpreter().eval(source)
    except MonkeyError as e:
        print(format_error(e), file=err)
        return 1
    except RecursionError:
        print(format_error(MonkeyError("maximum recursion depth exceeded")), file=err)
        return 1
    print(result.inspect(), file=out)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="monkey")
    parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    limit = get_recursion_limit()
    if limit is not None:
        logger.debug("recursion limit set to %d", limit)
        sys.setrecursionlimit(limit)

    if args.file is not None:
        return run_file(args.file)

    Shell().cmdloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
