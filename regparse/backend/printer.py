"""
AST rendering for regparse.

Turns a parsed tree into either an indented text dump (for people) or a
nested dict that json.dumps can serialise (for tools).
"""

from typing import Any, Dict, FrozenSet, List

from ..ir import (
    Regexp, Concatenation, Or, CharMatcher, ZeroOrMoreTimes, OneOrMoreTimes, ZeroOrOneTime, Group,
    Symbol, RawCharacter, Dot, AnyOf, NoneOf, LogicalNot,
)


def _char_runs(chars: FrozenSet[str]) -> List[str]:
    """Render a character set as sorted runs, e.g. ['a'-'z', '_']."""
    codes = sorted(ord(c) for c in chars)
    runs: List[str] = []
    i = 0
    while i < len(codes):
        j = i
        while j + 1 < len(codes) and codes[j + 1] == codes[j] + 1:
            j += 1
        if j - i >= 2:
            runs.append(f"{chr(codes[i])!r}-{chr(codes[j])!r}")
            i = j + 1
        else:
            runs.append(repr(chr(codes[i])))
            i += 1
    return runs


def describe_symbol(symbol: Symbol) -> str:
    """Describe a symbol on one line.

    Args:
        symbol: The symbol to describe

    Returns:
        str: A short description such as "'a'" or "AnyOf['0'-'9']"
    """
    if isinstance(symbol, RawCharacter):
        return repr(symbol.char)
    if isinstance(symbol, Dot):
        return "Dot"
    if isinstance(symbol, AnyOf):
        return f"AnyOf[{', '.join(_char_runs(symbol.chars))}]"
    if isinstance(symbol, NoneOf):
        return f"NoneOf[{', '.join(_char_runs(symbol.chars))}]"
    if isinstance(symbol, LogicalNot):
        return f"Not({describe_symbol(symbol.symbol)})"
    raise TypeError(f"Unknown symbol type: {type(symbol).__name__}")


def _children(node: Regexp) -> List[Regexp]:
    if isinstance(node, Concatenation):
        return list(node.items)
    if isinstance(node, Or):
        return [node.left, node.right]
    if isinstance(node, (ZeroOrMoreTimes, OneOrMoreTimes, ZeroOrOneTime, Group)):
        return [node.expr]
    if isinstance(node, CharMatcher):
        return []
    raise TypeError(f"Unknown node type: {type(node).__name__}")


def format_tree(node: Regexp, indent: int = 2) -> str:
    """Render a tree with one node per line, children indented below parents.

    Args:
        node: Root of the tree
        indent: Spaces per nesting level

    Returns:
        str: The rendered tree, without a trailing newline
    """
    lines: List[str] = []

    def emit(current: Regexp, depth: int) -> None:
        pad = " " * (indent * depth)
        if isinstance(current, CharMatcher):
            lines.append(f"{pad}CharMatcher {describe_symbol(current.symbol)}")
            return
        if isinstance(current, Concatenation) and current.is_empty:
            lines.append(f"{pad}Concatenation (empty)")
            return
        lines.append(f"{pad}{type(current).__name__}")
        for child in _children(current):
            emit(child, depth + 1)

    emit(node, 0)
    return "\n".join(lines)


def _symbol_to_dict(symbol: Symbol) -> Dict[str, Any]:
    if isinstance(symbol, RawCharacter):
        return {"type": "RawCharacter", "char": symbol.char}
    if isinstance(symbol, Dot):
        return {"type": "Dot"}
    if isinstance(symbol, (AnyOf, NoneOf)):
        return {"type": type(symbol).__name__, "chars": sorted(symbol.chars)}
    if isinstance(symbol, LogicalNot):
        return {"type": "LogicalNot", "symbol": _symbol_to_dict(symbol.symbol)}
    raise TypeError(f"Unknown symbol type: {type(symbol).__name__}")


def to_dict(node: Regexp) -> Dict[str, Any]:
    """Convert a tree into nested dicts of JSON-compatible values.

    Args:
        node: Root of the tree

    Returns:
        dict: Every node as {"type": <class name>, ...fields}
    """
    if isinstance(node, CharMatcher):
        return {"type": "CharMatcher", "symbol": _symbol_to_dict(node.symbol)}
    if isinstance(node, Concatenation):
        return {"type": "Concatenation", "items": [to_dict(item) for item in node.items]}
    if isinstance(node, Or):
        return {"type": "Or", "left": to_dict(node.left), "right": to_dict(node.right)}
    if isinstance(node, (ZeroOrMoreTimes, OneOrMoreTimes, ZeroOrOneTime, Group)):
        return {"type": type(node).__name__, "expr": to_dict(node.expr)}
    raise TypeError(f"Unknown node type: {type(node).__name__}")
