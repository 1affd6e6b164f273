# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

__all__ = [
    "MergePatchError", "ParseError", "TypeMismatchError",
    "LengthMismatchError", "NestingDepthError",
]


class MergePatchError(ValueError):
    pass


class ParseError(MergePatchError):
    """Input could not be decoded as JSON.

    `argument` names the offending input ("target", "patch", ...).
    """
    def __init__(self, message, argument=None):
        super(ParseError, self).__init__(message)
        self.argument = argument


class TypeMismatchError(MergePatchError):
    "Compared values have shapes a merge patch cannot describe."
    pass


class LengthMismatchError(MergePatchError):
    "Arrays of different lengths cannot be diffed positionally."
    pass


class NestingDepthError(MergePatchError):
    "Input nesting is deeper than the configured limit."
    pass
