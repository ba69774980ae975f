#!/usr/bin/env python3
#
# @file    potential_split.py
# @brief   Candidate splits, softwords and expansions used by GenTest
# @author  Michael Hucka
#
# <!---------------------------------------------------------------------------
# Copyright (C) 2015 by the California Institute of Technology.
# This software is part of CASICS, the Comprehensive and Automated Software
# Inventory Creation System.  For more information, visit http://casics.org.
# ------------------------------------------------------------------------- -->

from collections import namedtuple

from .constants import marker


# Expansions.
# .............................................................................
# An expansion is a dictionary word that a softword may stand for, with a
# cohesion value saying how good a match it is.  Cohesion is unbounded and
# may be zero or negative.

Expansion = namedtuple('Expansion', ['word', 'cohesion'])


# Softwords.
# .............................................................................

class Softword(object):
    def __init__(self, word, expansions=None):
        self.word = word
        self.expansions = list(expansions) if expansions else []


    def __eq__(self, other):
        return (isinstance(other, Softword) and self.word == other.word
                and self.expansions == other.expansions)


    def __repr__(self):
        return 'Softword({!r}, {!r})'.format(self.word, self.expansions)


    def highest_cohesion(self):
        '''Return the highest cohesion of any expansion, or 0.'''
        if not self.expansions:
            return 0
        return max(e.cohesion for e in self.expansions)


    def best_expansion(self):
        '''Return the expansion with the highest cohesion.  The first one
        wins in case of ties.  Without expansions, returns the softword.'''
        if not self.expansions:
            return self.word
        # max() returns the first maximal element it sees.
        return max(self.expansions, key=lambda e: e.cohesion).word


# Potential splits.
# .............................................................................

class PotentialSplit(object):
    def __init__(self, split='', softwords=None):
        self.split = split
        self.softwords = list(softwords) if softwords else []


    @classmethod
    def from_split(cls, split):
        '''Create a potential split from a marked string like "foo_bar".'''
        words = [Softword(w) for w in split.split(marker) if w]
        return cls(split, words)


    def __eq__(self, other):
        return (isinstance(other, PotentialSplit) and self.split == other.split
                and self.softwords == other.softwords)


    def __repr__(self):
        return 'PotentialSplit({!r}, {!r})'.format(self.split, self.softwords)


    def words(self):
        return [s.word for s in self.softwords]


    def highest_cohesion(self):
        return sum(s.highest_cohesion() for s in self.softwords)


    def best_expansion(self):
        return marker.join(s.best_expansion() for s in self.softwords)


def find_best_split(potential_splits):
    '''Return the split with the highest cohesion; the first one wins in case
    of ties.  Returns an empty PotentialSplit if the list is empty.'''
    best = None
    best_cohesion = None
    for candidate in potential_splits:
        cohesion = candidate.highest_cohesion()
        if best is None or cohesion > best_cohesion:
            best = candidate
            best_cohesion = cohesion
    return best if best is not None else PotentialSplit()
