"""LC AST node hierarchy.

Every node exclusively owns its children, so a tree has no shared or cyclic
references. Nodes carry a keyword-only source span for diagnostics and tooling;
spans are metadata and are ignored when comparing trees, which makes
`(a)` and `a` structurally equal.

Application chains such as `a b c ... z` produce trees as deep as the chain is
long, so equality, hashing and description walk the tree iteratively (or
unroll the callee spine) rather than recursing once per application.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Tuple

from lc.lc_token import LCSpan


@dataclass(frozen=True, eq=False, repr=False)
class LCASTNode(ABC):
    """Abstract base class for all LC AST nodes."""
    span: LCSpan | None = field(default=None, kw_only=True, compare=False)

    @abstractmethod
    def describe(self) -> str:
        """Describe the node as lambda calculus source text."""

    @abstractmethod
    def type_name(self) -> str:
        """Return the node kind for messages."""

    @abstractmethod
    def children(self) -> Tuple['LCASTNode', ...]:
        """Return the direct subtrees, in source order."""

    @abstractmethod
    def _label(self) -> Tuple[Any, ...]:
        """Everything that identifies this node apart from its children."""

    def walk(self) -> Iterator['LCASTNode']:
        """Yield every node of the tree in pre-order."""
        stack: List[LCASTNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children()))

    def __eq__(self, other: Any) -> bool:
        """Compare tree structure, ignoring spans."""
        if not isinstance(other, LCASTNode):
            return NotImplemented

        pending: List[Tuple[LCASTNode, LCASTNode]] = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue

            if type(left) is not type(right) or left._label() != right._label():
                return False

            pending.extend(zip(left.children(), right.children()))

        return True

    def __hash__(self) -> int:
        return hash(tuple(node._label() for node in self.walk()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.describe()!r})"


@dataclass(frozen=True, eq=False, repr=False)
class LCASTName(LCASTNode):
    """A reference to a (free or bound) variable."""
    name: str

    def describe(self) -> str:
        return self.name

    def type_name(self) -> str:
        return "name"

    def children(self) -> Tuple[LCASTNode, ...]:
        return ()

    def _label(self) -> Tuple[Any, ...]:
        return ("name", self.name)


@dataclass(frozen=True, eq=False, repr=False)
class LCASTApplication(LCASTNode):
    """Juxtaposition of a callee and its argument; `a b c` nests as `(a b) c`."""
    callee: LCASTNode
    argument: LCASTNode

    def spine(self) -> Tuple[LCASTNode, List[LCASTNode]]:
        """
        Unroll the left-nested callee chain.

        Returns:
            Tuple of (head, arguments): `a b c` gives (a, [b, c])
        """
        arguments: List[LCASTNode] = []
        node: LCASTNode = self
        while isinstance(node, LCASTApplication):
            arguments.append(node.argument)
            node = node.callee

        arguments.reverse()
        return node, arguments

    def describe(self) -> str:
        head, arguments = self.spine()
        parts = [f"({head.describe()})" if isinstance(head, LCASTAbstraction) else head.describe()]
        for argument in arguments:
            text = argument.describe()
            if isinstance(argument, (LCASTApplication, LCASTAbstraction)):
                text = f"({text})"

            parts.append(text)

        return " ".join(parts)

    def type_name(self) -> str:
        return "application"

    def children(self) -> Tuple[LCASTNode, ...]:
        return (self.callee, self.argument)

    def _label(self) -> Tuple[Any, ...]:
        return ("application",)


@dataclass(frozen=True, eq=False, repr=False)
class LCASTAbstraction(LCASTNode):
    """
    A lambda abstraction.

    `params` holds single-character parameter names. `λab.x` binds both `a`
    and `b`, and is shorthand for `λa.λb.x`.
    """
    params: Tuple[str, ...]
    body: LCASTNode

    def describe(self) -> str:
        return f"λ{''.join(self.params)}.{self.body.describe()}"

    def type_name(self) -> str:
        return "abstraction"

    def children(self) -> Tuple[LCASTNode, ...]:
        return (self.body,)

    def _label(self) -> Tuple[Any, ...]:
        return ("abstraction", self.params)
