"""LC pretty printer: source text and structural dumps of an AST."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from lc.lc_ast import LCASTAbstraction, LCASTApplication, LCASTName, LCASTNode


@dataclass
class FormatOptions:
    """Options for controlling pretty-printer behavior."""
    indent_size: int = 2
    space_after_dot: bool = False
    parenthesize_applications: bool = False


class LCPrettyPrinter:
    """
    Prints LC trees.

    `format()` produces source that parses back to an equal tree, using the
    fewest parentheses the grammar allows unless told otherwise:

    - application is left-associative, so only an application in argument
      position needs parentheses
    - abstraction bodies are greedy, so an abstraction needs parentheses
      whenever anything follows it
    """

    def __init__(self, options: Optional[FormatOptions] = None):
        self.options = options or FormatOptions()

    def format(self, node: LCASTNode) -> str:
        """Format a tree as lambda calculus source."""
        return self._format_node(node, trailing=False)

    def format_tree(self, node: LCASTNode) -> str:
        """Format a tree as an indented outline, one node per line."""
        lines: List[str] = []
        self._outline(node, lines)
        return "\n".join(lines)

    def _format_node(self, node: LCASTNode, trailing: bool) -> str:
        """
        Format one node.

        `trailing` is True when more source follows this node in the same group.
        Application chains are formatted by walking the callee spine, so only
        real nesting (groups and abstraction bodies) recurses.
        """
        if isinstance(node, LCASTName):
            return node.name

        if isinstance(node, LCASTAbstraction):
            separator = ". " if self.options.space_after_dot else "."
            text = f"λ{''.join(node.params)}{separator}{self._format_node(node.body, trailing=False)}"
            return f"({text})" if trailing else text

        assert isinstance(node, LCASTApplication), f"Unknown AST node: {type(node).__name__}"
        head, arguments = node.spine()
        text = self._format_node(head, trailing=True)
        last = len(arguments) - 1
        for index, argument_node in enumerate(arguments):
            if isinstance(argument_node, LCASTApplication):
                argument = self._format_node(argument_node, trailing=False)
                if not self.options.parenthesize_applications:
                    argument = f"({argument})"

            else:
                # Only the final argument inherits the enclosing position
                argument = self._format_node(argument_node, trailing=trailing if index == last else True)

            text = f"{text} {argument}"
            if self.options.parenthesize_applications:
                text = f"({text})"

        return text

    def _outline(self, root: LCASTNode, lines: List[str]) -> None:
        stack: List[Tuple[LCASTNode, int]] = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            indent = " " * (self.options.indent_size * depth)

            if isinstance(node, LCASTName):
                lines.append(f"{indent}Name {node.name}")
                continue

            if isinstance(node, LCASTAbstraction):
                lines.append(f"{indent}Abstraction {', '.join(node.params)}")

            else:
                assert isinstance(node, LCASTApplication), f"Unknown AST node: {type(node).__name__}"
                lines.append(f"{indent}Application")

            stack.extend((child, depth + 1) for child in reversed(node.children()))
