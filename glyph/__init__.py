# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
glyph: token tree to AST construction for two small languages.

Modules:
  literals:   numeric literal normalization (`_` sign, `_` separators)
  precedence: declarative operator table
  pratt:      precedence-climbing expression builder (calculator)
  verbs:      verb/adverb compiler (J subset)
  calc, jlang: lark front ends
  printer:    s-expression rendering of ASTs
  cli:        line-based host (`glyph calc`, `glyph j`)
"""

__all__ = ["ast", "errors", "literals", "precedence", "pratt", "verbs", "calc", "jlang", "printer", "cli"]
