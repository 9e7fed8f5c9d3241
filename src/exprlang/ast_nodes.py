"""AST node models for the expression language.

Every node is an immutable Pydantic model tagged with a ``type`` literal, and
``Expr`` is the discriminated union over that tag. Field aliases follow the
object shape used by external AST producers (``then``/``else``,
``argumentName``, ``function``), so a nested dict or JSON document can be
validated straight into a tree with ``expr_from_dict``/``expr_from_json``.
"""
from typing import Annotated, Any, Dict, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

BinaryOperator = Literal["+", "<", "||", "&&"]
"""
Binary operators
"""

UnaryOperator = Literal["!", "-"]
"""
Unary operators
"""


class ExprNode(BaseModel):
    """Common base for all expression nodes."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def __str__(self) -> str:
        from exprlang.printer import format_expr
        return format_expr(self)


class Variable(ExprNode):
    """Reference to a bound identifier."""
    type: Literal["variable"] = "variable"
    name: str


class NumberLiteral(ExprNode):
    """Numeric constant with float semantics."""
    type: Literal["number"] = "number"
    value: float


class BooleanLiteral(ExprNode):
    type: Literal["boolean"] = "boolean"
    value: bool


class BinaryOp(ExprNode):
    """
    Binary operator application. Operands are unevaluated sub-expressions;
    ``||`` and ``&&`` may leave the right operand unevaluated.
    """
    type: Literal["binop"] = "binop"
    left: "Expr"
    operator: BinaryOperator
    right: "Expr"


class UnaryOp(ExprNode):
    type: Literal["unop"] = "unop"
    operator: UnaryOperator
    argument: "Expr"


class Conditional(ExprNode):
    """Ternary ``condition ? then : else``. Only the chosen branch is evaluated."""
    type: Literal["if"] = "if"
    condition: "Expr"
    then_branch: "Expr" = Field(alias="then")
    else_branch: "Expr" = Field(alias="else")


class FunctionLiteral(ExprNode):
    """Single-parameter anonymous function ``parameter_name => body``."""
    type: Literal["function"] = "function"
    parameter_name: str = Field(alias="argumentName")
    body: "Expr"


class Call(ExprNode):
    """Application of ``callee`` to exactly one argument."""
    type: Literal["function-call"] = "function-call"
    callee: "Expr" = Field(alias="function")
    argument: "Expr"


Expr = Annotated[
    Union[
        Variable,
        NumberLiteral,
        BooleanLiteral,
        BinaryOp,
        UnaryOp,
        Conditional,
        FunctionLiteral,
        Call,
    ],
    Field(discriminator="type"),
]
"""
The type of the abstract syntax tree. Represents an expression.
"""

for _node_model in (BinaryOp, UnaryOp, Conditional, FunctionLiteral, Call):
    _node_model.model_rebuild()

_EXPR_ADAPTER: TypeAdapter = TypeAdapter(Expr)


def expr_from_dict(data: Dict[str, Any]) -> Expr:
    """
    Validates a nested mapping into an expression tree.

    Raises:
        pydantic.ValidationError: If a node has an unknown ``type`` tag, an
            unknown operator or a missing field.
    """
    return _EXPR_ADAPTER.validate_python(data)


def expr_from_json(text: Union[str, bytes]) -> Expr:
    """Like expr_from_dict, but reads a JSON document."""
    return _EXPR_ADAPTER.validate_json(text)


def expr_to_dict(expr: Expr) -> Dict[str, Any]:
    """Dumps an expression tree using the external field names (round-trips through expr_from_dict)."""
    return expr.model_dump(by_alias=True)
