#!/usr/bin/env python3
#
# @file    samurai.py
# @brief   Samurai identifier splitter
# @author  Michael Hucka
#
# <!---------------------------------------------------------------------------
# Copyright (C) 2015 by the California Institute of Technology.
# This software is part of CASICS, the Comprehensive and Automated Software
# Inventory Creation System.  For more information, visit http://casics.org.
# ------------------------------------------------------------------------- -->

# Summary
# .............................................................................
# This is an implementation of the Samurai algorithm described in:
#
#   Enslen, E., Hill, E., Pollock, L. and Vijay-Shanker, K. (2009).  Mining
#   source code to automatically split identifiers for software analysis.
#   Proceedings of the 6th IEEE International Working Conference on Mining
#   Software Repositories, 71-80.
#
# Identifiers are first cut at certain boundaries (digits and forward camel
# case), giving hardwords.  Each hardword is then split recursively wherever
# the frequencies of the parts are sufficiently higher than the frequency of
# the whole, as measured by frequencies.score().
#
# The paper's camel case step decides whether an upper case letter followed
# by lower case letters belongs to the preceding run of capitals ("ASTVisitor"
# -> "AST" "Visitor" vs "ASTV" "isitor").  Historically this decision was
# computed but not used, and only the same-case split determined the result.
# That remains the default.  Set apply_camel_cut=True in SplitterConfig to
# cut hardwords at the chosen position before the same-case split.

import math
import re

from .config import SplitterConfig
from .frequencies import score
from .logger import Logger
from .simple_splitters import mark_boundaries, split_on_markers


# Global constants.
# .............................................................................

_cut_location = re.compile(r'[A-Z][a-z]')


# Main class.
# .............................................................................

class Samurai(object):
    def __init__(self, config=None, log=None):
        self._config = config if config is not None else SplitterConfig()
        self._local = self._config.local_table
        self._global = self._config.global_table
        self._prefixes = self._config.prefixes
        self._suffixes = self._config.suffixes
        self._log = log if log else Logger().get_log()


    def split(self, token):
        '''Return the list of words that make up the identifier 'token'.'''
        if not isinstance(token, str):
            raise ValueError('Arg must be a string: {}'.format(token))
        result = []
        for word in split_on_markers(mark_boundaries(token)):
            cut = self.camel_cut(word)
            if cut is not None:
                self._log.debug('camel cut for {} at {}'.format(word, cut))
            if self._config.apply_camel_cut and cut is not None:
                parts = [word[:cut], word[cut:]]
            else:
                parts = [word]
            for part in parts:
                result += self.same_case_split(part, self.score(part))
        self._log.debug('samurai split {} -> {}'.format(token, result))
        return result


    def camel_cut(self, word):
        '''Return the index where 'word' should be cut at an upper-to-lower
        case transition, or None if there is no such place.'''
        location = _cut_location.search(word)
        if len(word) <= 1 or not location:
            return None
        n = len(word) - 1
        i = location.start()
        if i > 0:
            camel_score = self.score(word[i:n])
        else:
            camel_score = self.score(word[0:n])
        alt_camel_score = self.score(word[i+1:n])
        if camel_score > math.sqrt(alt_camel_score):
            return i if i > 0 else None
        else:
            return i + 1


    def same_case_split(self, token, base_score):
        '''Recursively split 'token', whose letters are assumed to have the
        same case.  Returns a new list; [token] if no split is found.'''
        return self._same_case_split(token, base_score, {})


    def _same_case_split(self, token, base_score, memo):
        if token in memo:
            return list(memo[token])

        max_score = -1.0
        split_token = [token]
        threshold = max(self.score(token), base_score)
        for i in range(1, len(token)):
            left = token[:i]
            right = token[i:]
            if self.is_prefix(left) or self.is_suffix(right):
                continue

            score_left = self.score(left)
            score_right = self.score(right)
            split_left = math.sqrt(score_left) > threshold
            split_right = math.sqrt(score_right) > threshold

            if split_left and split_right:
                if score_left + score_right > max_score:
                    max_score = score_left + score_right
                    split_token = [left, right]
            elif split_left:
                # Only the left part is strong enough; try to split the rest.
                # No mirror case for the right part.
                temp = self._same_case_split(right, base_score, memo)
                if len(temp) > 1:
                    split_token = [left] + temp

        memo[token] = tuple(split_token)
        return split_token


    def score(self, word):
        return score(word, self._local, self._global)


    def is_prefix(self, token):
        return token in self._prefixes


    def is_suffix(self, token):
        return token in self._suffixes


# Module-level interface.
# .............................................................................

def samurai_split(identifier, config=None):
    return Samurai(config).split(identifier)
