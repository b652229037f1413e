"""
beehive: rule engine for the seven-letter "spelling bee" puzzle.

Subpackages:
  - engine    : puzzle rules, word table, scoring and session state
  - datasets  : dictionary / candidate-list readers and validation
  - generator : random puzzle selection and board shuffling
"""

__version__ = "0.1.0"
