"""Immutable AST node models for the statement renderer."""

from render_engine.models.expressions import (
    AssignExpr,
    AstModel,
    BinaryExpr,
    BoolLiteral,
    ColumnDefinition,
    ColumnRef,
    DataType,
    Expression,
    ExprList,
    FunctionCall,
    IdentifierExpr,
    LiteralValue,
    NullLiteral,
    NumberLiteral,
    OriginExpr,
    StringLiteral,
    TableRef,
    UnaryExpr,
    VarExpr,
)
from render_engine.models.statements import (
    CallStatement,
    CommonCommandStatement,
    DeallocateStatement,
    Declaration,
    DeclarationKind,
    DeclareStatement,
    DescribeStatement,
    GrantObject,
    GrantOn,
    GrantStatement,
    IfBranch,
    IfStatement,
    LockMode,
    LockTable,
    LockType,
    LockUnlockStatement,
    PrivLevel,
    Program,
    RenameStatement,
    SetVariableStatement,
    Statement,
    StatementKind,
    TriggerName,
    UserOrRole,
    UseStatement,
)

__all__ = [
    # Expressions
    "AstModel",
    "AssignExpr",
    "BinaryExpr",
    "BoolLiteral",
    "ColumnRef",
    "Expression",
    "ExprList",
    "FunctionCall",
    "IdentifierExpr",
    "LiteralValue",
    "NullLiteral",
    "NumberLiteral",
    "OriginExpr",
    "StringLiteral",
    "UnaryExpr",
    "VarExpr",
    # Fragments
    "ColumnDefinition",
    "DataType",
    "TableRef",
    # Statements
    "Statement",
    "StatementKind",
    "Program",
    "CallStatement",
    "CommonCommandStatement",
    "TriggerName",
    "DescribeStatement",
    "RenameStatement",
    "UseStatement",
    "SetVariableStatement",
    "LockUnlockStatement",
    "LockTable",
    "LockType",
    "LockMode",
    "DeallocateStatement",
    "DeclareStatement",
    "Declaration",
    "DeclarationKind",
    "IfStatement",
    "IfBranch",
    "GrantStatement",
    "GrantObject",
    "GrantOn",
    "PrivLevel",
    "UserOrRole",
]
