"""godelnum: Gödel numbering and diagonalization for Peano arithmetic."""

from .errors import (
    GodelError,
    InvalidArgument,
    InvalidVariable,
    NumeralTooLarge,
    SymbolTableError,
    Unsubstitutable,
)
from .terms import (
    Add,
    And,
    Eq,
    Exists,
    Expr,
    ForAll,
    Formula,
    Lt,
    Mul,
    Not,
    Or,
    Proof,
    Succ,
    Term,
    Var,
    Zero,
    var_named,
)
from .symbols import SEPARATOR, SYMBOL_CODES, Symbol, check_symbol_table
from .encode import (
    encode_to_integer,
    godel_string,
    tokenize,
    tokenize_formula,
    tokenize_term,
)
from .numerals import (
    NumeralStyle,
    compact_numeral,
    evaluate,
    numeral,
    numeral_value,
    quote,
)
from .substitution import (
    bound_variables,
    free_variables,
    is_sentence,
    substitute,
    substitute_term,
)
from .diagonal import diagonalize, godel_sentence, provability_schema
from .render import format_expr, format_formula, format_term
from .result import Ok, Err, Result

__all__ = [
    # Errors
    "GodelError", "InvalidArgument", "InvalidVariable", "NumeralTooLarge",
    "SymbolTableError", "Unsubstitutable",
    # Terms
    "Add", "Mul", "Succ", "Term", "Var", "Zero", "var_named",
    # Formulas
    "And", "Eq", "Exists", "ForAll", "Formula", "Lt", "Not", "Or", "Proof",
    "Expr",
    # Symbol table
    "SEPARATOR", "SYMBOL_CODES", "Symbol", "check_symbol_table",
    # Encoding
    "encode_to_integer", "godel_string", "tokenize", "tokenize_formula",
    "tokenize_term",
    # Numerals
    "NumeralStyle", "compact_numeral", "evaluate", "numeral", "numeral_value",
    "quote",
    # Substitution
    "bound_variables", "free_variables", "is_sentence", "substitute",
    "substitute_term",
    # Diagonalization
    "diagonalize", "godel_sentence", "provability_schema",
    # Rendering
    "format_expr", "format_formula", "format_term",
    # Result
    "Ok", "Err", "Result",
]
