"""Session control for ThoughtScript. Runs a .ts file or command-line input against one Interpreter, reporting warnings
through the session's ErrorHandler.
"""

from thoughtscript.lang.error import ThoughtException
from thoughtscript.lang.interpreter import Interpreter


class Session:
    """Governs a ThoughtScript session: one interpreter whose globals and memories live as long as the session."""
    SH_FILE = "<in>"  # command-line interpreter filename

    def __init__(self, error_handler, path, cmd_line):
        self.error_handler = error_handler
        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode

        self.interpreter = Interpreter()
        self.results = []  # values of the sources run so far
        self.source = ""

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            try:
                with open(path, "r", encoding="utf-8") as file:
                    self.source = file.read()
            except OSError:
                raise ThoughtException("'{}' could not be opened", path, diagnosis=False)

        elif not cmd_line:
            raise ThoughtException("'<in>' is a reserved filename", diagnosis=False)

        self.error_handler.register_source(path, self.source)

    @staticmethod
    def preprocess_line(line, pending=""):
        """Joins command-line input into runnable source. A line ending with ':' opens a block that continues until a
        blank line. Returns the source so far and whether more lines are needed.
        """
        if pending:
            if not line.strip():
                return pending, False
            return pending + line + "\n", True

        if line.rstrip().endswith(":"):
            return line + "\n", True
        return line, False

    def run(self, source=None):
        """Runs source (the session's file if None), records and returns its value. Will raise any errors that are
        encountered.
        """
        if source is None:
            source = self.source
        self.error_handler.register_source(self.path, source)

        try:
            result = self.interpreter.interpret(source)
        finally:
            for warning in self.interpreter.warnings:
                self.error_handler.warn(warning)

        self.results.append(result)
        return result

    def output(self):
        """Lines written by the last run."""
        return self.interpreter.get_output()

    def pop(self):
        return self.results.pop()

    def reset(self):
        """Forgets all variables, intentions and memories."""
        self.interpreter = Interpreter()
        self.results = []
