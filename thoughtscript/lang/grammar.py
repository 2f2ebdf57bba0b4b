"""ThoughtScript abstract syntax tree. Nodes are built once by the parser and only read during interpretation; every
node records the line and column of its first token for error messages.

Statement grammar, as accepted by parser.py:

```
<program>   ::= <statement>*
<statement> ::= "think" <expr> ["as" <identifier>]
              | "express" <expr>
              | "consider" <identifier> "from" <expr> "to" <expr> ":" <block>
              | "if" <expr> ":" <block> ["otherwise" ":" <block>]
              | "remember" <expr> "as" <expr>
              | "show" <expr>
              | "define" "intention" <identifier> ["with" <identifier> ("," <identifier>)*] ":" <block>
              | <expr>
<block>     ::= <statement>                     ; on the same line as ":"
              | NEWLINE <statement>+            ; indented deeper than the line that opened the block
```
"""

from dataclasses import dataclass, fields
from typing import Any, List, Optional


@dataclass
class Node:
    line: int
    column: int

    def display(self, indents=0):
        """Recursively displays the tree with readable format.

        Format:
        <Node>(<field>=<value>, <field>=[
            <Node>(...),
            ...
        ])
        """
        pad = "    " * indents
        segments = []

        for field in fields(self):
            if field.name in ("line", "column"):
                continue

            value = getattr(self, field.name)
            nodes = [value] if isinstance(value, Node) else value

            if isinstance(nodes, list) and nodes and all(isinstance(node, Node) for node in nodes):
                inner = ",\n".join(node.display(indents + 1) for node in nodes)
                segments.append(f"{field.name}=[\n{inner}\n{pad}]")
            else:
                segments.append(f"{field.name}={value!r}")

        return f"{pad}{type(self).__name__}({', '.join(segments)})"


# Expressions
@dataclass
class Literal(Node):
    value: Any
    kind: str  # 'number', 'string', 'boolean' or 'null'


@dataclass
class Identifier(Node):
    name: str


@dataclass
class BinaryOp(Node):
    left: Node
    operator: str
    right: Node


@dataclass
class UnaryOp(Node):
    operator: str
    operand: Node


@dataclass
class Call(Node):
    name: str
    args: List[Node]


# Statements
@dataclass
class Block(Node):
    statements: List[Node]


@dataclass
class Program(Node):
    statements: List[Node]


@dataclass
class Think(Node):
    expression: Node
    variable: Optional[str]


@dataclass
class Express(Node):
    expression: Node


@dataclass
class Consider(Node):
    variable: str
    start: Node
    end: Node
    body: Block


@dataclass
class If(Node):
    condition: Node
    then_body: Block
    else_body: Optional[Block]


@dataclass
class Remember(Node):
    value: Node
    key: Node


@dataclass
class Show(Node):
    target: Node


@dataclass
class Intention(Node):
    name: str
    params: List[str]
    body: Block
