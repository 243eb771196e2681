MODIFIERS = ["public", "private", "protected", "static", "var", "readonly"]

# Types that won't be recognised as valid type hints
PSEUDO_TYPES = ["mixed", "number", "callback", "object", "void"]

# Inferred from a `null` default; never a concrete type
NULL_TYPE = "null"

STATEMENT_KEY_WORDS = [
    "return", "echo", "print", "global", "unset", "throw", "yield", "new",
    "clone", "include", "include_once", "require", "require_once", "case",
    "else", "elseif", "const", "function", "fn", "use", "namespace", "goto",
    "abstract", "final", "class", "interface", "trait", "enum",
]


def is_modifier(token: str) -> bool:
    """Return True if the token is a visibility or storage modifier."""
    return token.lower() in MODIFIERS


def is_pseudo_type(type_name: str) -> bool:
    """Return True if the type, nullable or not, is documentation-only and not a valid hint."""
    return type_name.lstrip("?").lower() in PSEUDO_TYPES


def is_statement_key_word(token: str) -> bool:
    """Return True if the token starts a statement rather than a declaration."""
    return token.lower() in STATEMENT_KEY_WORDS
