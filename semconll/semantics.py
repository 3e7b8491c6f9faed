# Author: Eric Kow
# License: BSD3

"""
Shallow semantic predicate-argument structure (as produced by semantic
role labellers): a predicate points to its arguments through role
links.
"""

from semconll.annotation import AnnoType, Unit


class SemArg(Unit):
    """
    Surface realisation of a semantic argument
    """
    def __init__(self, span, features=None):
        Unit.__init__(self, span, AnnoType.SEM_ARG, features)


class SemArgLink(object):
    """
    Role that an argument plays for a predicate. Links are not spans
    themselves; they only live in the argument list of their predicate.
    """
    def __init__(self, role, target):
        self.role = role
        self.target = target

    def __repr__(self):
        return 'SemArgLink(%r, %r)' % (self.role, self.target)


class SemPred(Unit):
    """
    A semantic predicate

    Attributes
    ----------
    category : str
        Sense identifier, eg. `eat.01`
    arguments : list of SemArgLink
    """
    def __init__(self, span, category, arguments=None, features=None):
        Unit.__init__(self, span, AnnoType.SEM_PRED, features)
        self.category = category
        self.arguments = list(arguments or [])
