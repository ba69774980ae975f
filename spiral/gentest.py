#!/usr/bin/env python3
#
# @file    gentest.py
# @brief   GenTest identifier splitter and expander
# @author  Michael Hucka
#
# <!---------------------------------------------------------------------------
# Copyright (C) 2015 by the California Institute of Technology.
# This software is part of CASICS, the Comprehensive and Automated Software
# Inventory Creation System.  For more information, visit http://casics.org.
# ------------------------------------------------------------------------- -->

# Summary
# .............................................................................
# GenTest is the generate-and-test splitting approach of Lawrie, Binkley and
# Morrell (2010), "Normalizing source code vocabulary", WCRE 2010, 3-12.
#
# Each hardword (the parts of an identifier separated by underscores) is
# split in every possible way with at most two cuts.  Every part of every
# candidate (a softword) is matched against a dictionary: a dictionary word
# is a possible expansion of a softword if the letters of the softword appear
# in it in the same order, e.g., "str" -> "string".  Each expansion gets a
# cohesion value from a pluggable metric, and the candidate whose softwords
# have the highest total cohesion wins.
#
# A cohesion metric is any callable taking (softword, expansion) and
# returning a number.  Two are provided here; corpus-based metrics can be
# supplied by the caller.

from   itertools import combinations
import math

from .config import SplitterConfig
from .constants import marker
from .exceptions import SplitterError
from .logger import Logger
from .potential_split import Expansion, Softword, PotentialSplit, find_best_split
from .simple_splitters import split_on_markers


# Cohesion metrics.
# .............................................................................

def length_ratio_cohesion(softword, expansion):
    '''Squared ratio of the lengths.  An exact match scores 1, and splitting a
    word into parts that map to the same expansion always scores lower than
    not splitting it.'''
    return (len(softword) / len(expansion)) ** 2


class FrequencyCohesion(object):
    '''Length ratio cohesion weighted by how common the expansion is.'''

    def __init__(self, table):
        self._table = table


    def __call__(self, softword, expansion):
        weight = math.log10(1 + self._table.frequency(expansion))
        return length_ratio_cohesion(softword, expansion) * weight


# Candidate generation and expansion.
# .............................................................................

def generate_potential_splits(token):
    '''Return every split of 'token' with zero, one or two cuts.  The unsplit
    token comes first, then single cuts, then pairs of cuts.'''
    n = len(token)
    splits = []
    for num_cuts in range(3):
        for cuts in combinations(range(1, n), num_cuts):
            bounds = (0,) + cuts + (n,)
            parts = [token[start:end] for start, end in zip(bounds, bounds[1:])]
            parts = [p for p in parts if p]
            splits.append(PotentialSplit(marker.join(parts),
                                         [Softword(p) for p in parts]))
    return splits


def find_expansions(word, dictionary):
    '''Return the words in 'dictionary' that contain the characters of 'word'
    in the same order, though not necessarily next to each other.'''
    if not word or word.isspace():
        return []
    return [entry for entry in dictionary if _is_subsequence(word, entry)]


def _is_subsequence(word, entry):
    # Each 'in' consumes the iterator up to and including the match.
    chars = iter(entry)
    return all(c in chars for c in word)


# Main class.
# .............................................................................

class GenTest(object):
    def __init__(self, config=None, cohesion=None, log=None):
        self._config = config if config is not None else SplitterConfig()
        self._dictionary = self._config.dictionary
        self._cohesion = cohesion if cohesion else length_ratio_cohesion
        self._log = log if log else Logger().get_log()
        limit = self._config.max_dictionary_size
        if limit is not None and len(self._dictionary) > limit:
            raise SplitterError('Dictionary has {} words; the limit is {}'
                                .format(len(self._dictionary), limit))


    def split(self, token):
        '''Return the list of words that make up the identifier 'token'.'''
        result = []
        for best in self.best_splits(token):
            result += best.words()
        self._log.debug('gentest split {} -> {}'.format(token, result))
        return result


    def expand(self, token):
        '''Return the best expansion of 'token', e.g., 'str_len' ->
        'string_length'.'''
        return marker.join(best.best_expansion() for best in self.best_splits(token))


    def best_splits(self, token):
        '''Return the winning PotentialSplit for each hardword of 'token'.'''
        if not isinstance(token, str):
            raise ValueError('Arg must be a string: {}'.format(token))
        found = {}
        return [self._best_split(hardword, found)
                for hardword in split_on_markers(token)]


    def find_expansions(self, word):
        return find_expansions(word, self._dictionary)


    def _best_split(self, hardword, found):
        candidates = generate_potential_splits(hardword)
        for candidate in candidates:
            for softword in candidate.softwords:
                softword.expansions = self._expansions(softword.word, found)
        best = find_best_split(candidates)
        self._log.debug('best split of {} is {} (cohesion {})'
                        .format(hardword, best.split, best.highest_cohesion()))
        return best


    def _expansions(self, word, found):
        lookup = word.lower() if self._config.case_fold else word
        if lookup not in found:
            found[lookup] = [Expansion(e, self._cohesion(lookup, e))
                             for e in self.find_expansions(lookup)]
        return list(found[lookup])


# Module-level interface.
# .............................................................................

def gentest_split(identifier, config=None):
    return GenTest(config).split(identifier)
