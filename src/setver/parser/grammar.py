setver_grammar = r"""
    version: _LBRACE version* _RBRACE

    _LBRACE: "{"
    _RBRACE: "}"
"""

LBRACE = "_LBRACE"
RBRACE = "_RBRACE"
