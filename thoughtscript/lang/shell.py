"""Handles interactive/command-line mode for the ThoughtScript interpreter. Uses cmd as backend."""

import cmd

from termcolor import colored

from thoughtscript.lang.interpreter import format_memories
from thoughtscript.lang.values import to_display


class Shell(cmd.Cmd):
    """ThoughtScript interpreter shell."""
    intro = "ThoughtScript interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "think> "
    secondary_prompt = "...    "  # used for block continuations
    _tmp_prompt = "think> "       # also used for prompt swapping in block continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sess = sess
        self._tmp_source = ""

    def onecmd(self, line):
        """Block continuation lines bypass command parsing, which would strip their indentation."""
        if self._tmp_source and line != "EOF":
            return self.default(line)
        return super().onecmd(line)

    def default(self, line):
        """Executes arbitrary ThoughtScript source."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            source, add_to_prev = self.sess.preprocess_line(line, self._tmp_source)

            if add_to_prev:
                self._tmp_source = source
                self.prompt = self.secondary_prompt
                return

            self._tmp_source = ""
            self.prompt = self._tmp_prompt

            if not source.strip():
                return

            result = self.sess.run(source)
            if result is not None and not self.sess.output():
                print(colored("→", "green"), to_display(result))

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the ThoughtScript interpreter!\n\n"
              "  think <expression> as <variable>   declare a variable\n"
              "  express <expression>               print a value\n"
              "  consider <var> from <n> to <m>:    loop from n to m\n"
              "  if <condition>:  /  otherwise:     branch\n"
              "  remember <value> as <key>          store a memory\n"
              "  show <expression>                  display a value ('show memories' lists memories)\n"
              "  define intention <name> with <params>:   define a function\n\n"
              "Builtins: add subtract multiply divide length type isEven isOdd uppercase lowercase\n\n"
              "A line ending with ':' starts a block; finish it with an empty line. Shell commands: 'memories',\n"
              "'reset' (forget everything), 'exit'.")

    def do_memories(self, arg):
        """Lists everything remembered so far."""
        print(format_memories(self.sess.interpreter.globals.all_memories()))

    def do_reset(self, arg):
        """Forgets all variables, intentions and memories."""
        self.sess.reset()
        print(colored("Session reset.", "yellow"))

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
