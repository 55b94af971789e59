"""
Actor Input - Interpret text-adventure command lines.

This package provides tools for:
- Tokenizing and normalizing raw actor input
- Splitting commands into intent, target spans and relation words
- Resolving abbreviated movement words against a room's exits
- Running command scenarios against a small room graph
"""

__version__ = "0.1.0"
