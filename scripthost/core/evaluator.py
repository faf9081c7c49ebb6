from __future__ import annotations

import ast
from typing import Any, Protocol


class Evaluator(Protocol):
    def __call__(
        self,
        source: str | bytes,
        namespace: dict[str, Any],
        *,
        filename: str = "<string>",
        line_offset: int = 0,
    ) -> Any: ...


def evaluate_source(
    source: str | bytes,
    namespace: dict[str, Any],
    *,
    filename: str = "<string>",
    line_offset: int = 0,
) -> Any:
    """Run ``source`` in ``namespace`` and return the value of a trailing expression."""

    tree = ast.parse(source, filename=filename, mode="exec")
    if line_offset:
        ast.increment_lineno(tree, line_offset)

    trailing: ast.expr | None = None
    if tree.body and isinstance(tree.body[-1], ast.Expr):
        trailing = tree.body.pop().value

    exec(compile(tree, filename, "exec"), namespace)
    if trailing is None:
        return None
    return eval(compile(ast.Expression(body=trailing), filename, "eval"), namespace)
