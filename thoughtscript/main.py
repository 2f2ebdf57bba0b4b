"""Runs .ts files or the command-line shell of the ThoughtScript interpreter, inside the error handling context manager.
Called from the thoughtscript console script.
"""

import argparse

from thoughtscript import __version__
from thoughtscript.lang.error import ErrorHandler
from thoughtscript.lang.lexical import tokenize
from thoughtscript.lang.parser import parse
from thoughtscript.lang.session import Session
from thoughtscript.lang.shell import Shell


def main(argv=None):
    """Runs the ThoughtScript interpreter. Exits with status 1 if a file fails."""
    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="thoughtscript")
        parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
        parser.add_argument("--tokens", action="store_true", help="print the file's tokens instead of running it")
        parser.add_argument("--ast", action="store_true", help="print the file's syntax tree instead of running it")
        parser.add_argument("--version", action="version", version=f"ThoughtScript {__version__}")
        args = parser.parse_args(argv)

        if args.file is None:
            if args.tokens or args.ast:
                parser.error("--tokens and --ast need a file")
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True)).cmdloop()
            return

        sess = Session(error_handler, args.file, cmd_line=False)

        if args.tokens:
            for token in tokenize(sess.source):
                print(token)
        elif args.ast:
            print(parse(sess.source).display())
        else:
            sess.run()
