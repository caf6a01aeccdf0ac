"""Grammar check — parse translated output with the target's real grammar.

This goes one step beyond the substring validators: the output is handed to
the target's tree-sitter grammar and any ERROR or MISSING nodes are reported
as a single extra warning.
"""

from __future__ import annotations

import logging
from typing import Optional

from tree_sitter import Node

from .parser import ParserFactory, TargetParser

logger = logging.getLogger(__name__)


def count_syntax_errors(node: Node) -> int:
    """Count ERROR and MISSING nodes in the subtree rooted at *node*."""
    if not node.has_error and not node.is_missing:
        return 0
    own = 1 if node.is_error or node.is_missing else 0
    return own + sum(count_syntax_errors(child) for child in node.children)


def grammar_warnings(
    text: str,
    target: str,
    parser_factory: Optional[ParserFactory] = None,
) -> list[str]:
    """Parse *text* as *target* and describe any syntax errors found.

    Returns an empty list for clean parses and for targets without a
    registered grammar.
    """
    if not TargetParser.supports(target):
        return []
    tree = TargetParser(parser_factory).parse(text, target)
    errors = count_syntax_errors(tree.root_node)
    logger.debug("%s grammar check: %d syntax error(s)", target, errors)
    if not errors:
        return []
    return [f"{target} grammar reports {errors} syntax error(s)"]
