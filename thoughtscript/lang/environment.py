"""Lexical scopes. Each Environment holds variable bindings, its own memory store and a link to one parent (None at
the global root).

Memories are never looked up like variables, only listed. A scope lists the memories of its ancestors, its own, and
those it recollects from finished child scopes; later (more specific) entries override earlier ones on key clashes. A
recollected memory stands until the scope remembers the same key again.
"""

from thoughtscript.lang.error import UndefinedNameError


class Environment:

    def __init__(self, parent=None):
        self.parent = parent
        self.variables = {}
        self.memories = {}
        self.recollections = {}  # memories handed up by finished child scopes

    def define(self, name, value):
        """Creates or overwrites name in this scope."""
        self.variables[name] = value

    def lookup(self, name):
        """Returns the value bound to name in this scope or the nearest ancestor that binds it."""
        env = self
        while env is not None:
            if name in env.variables:
                return env.variables[name]
            env = env.parent
        raise UndefinedNameError("undefined variable '{}'", name)

    def remember(self, key, value):
        """Stores a memory in this scope. It replaces any value recollected under key from a finished child scope."""
        self.recollections.pop(key, None)
        self.memories[key] = value

    def all_memories(self):
        """Merged memories visible from this scope, from the root down."""
        merged = self.parent.all_memories() if self.parent is not None else {}
        merged.update(self.memories)
        merged.update(self.recollections)
        return merged

    def close(self):
        """Hands this scope's memories up to its parent. Called when the scope has finished running."""
        if self.parent is None:
            return

        surfaced = dict(self.memories)
        surfaced.update(self.recollections)
        self.parent.recollections.update(surfaced)
