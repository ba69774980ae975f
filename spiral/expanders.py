#!/usr/bin/env python3
#
# @file    expanders.py
# @brief   Abbreviation expanders
# @author  Michael Hucka
#
# <!---------------------------------------------------------------------------
# Copyright (C) 2015 by the California Institute of Technology.
# This software is part of CASICS, the Comprehensive and Automated Software
# Inventory Creation System.  For more information, visit http://casics.org.
# ------------------------------------------------------------------------- -->

from .logger import Logger


# Basic expander
# .............................................................................
# The "basic" expansion approach of Lawrie, Feild and Binkley (2007),
# "Extracting meaning from abbreviated identifiers", SCAM 2007.  It only
# consults lists: a stoplist, a table of known phrases (acronyms mapped to
# hyphenated words, e.g., 'gui' -> 'graphical-user-interface'), and a set of
# words known to appear in the source.  Searching the dictionary for words
# that match an abbreviation is not done, so tokens that appear in none of
# the lists produce no expansions.

class Basic(object):
    def __init__(self, src_words=None, src_phrases=None, stop_list=None,
                 dictionary=None, log=None):
        self._src_words = frozenset(src_words or [])
        self._src_phrases = dict(src_phrases or {})
        self._stop_list = frozenset(stop_list or [])
        self._dictionary = frozenset(dictionary or [])
        self._log = log if log else Logger().get_log()


    def expand(self, token):
        '''Return a list of possible expansions of 'token'.'''
        if not isinstance(token, str):
            raise ValueError('Arg must be a string: {}'.format(token))
        token = token.lower()
        if token in self._stop_list:
            return [token]
        phrase = self._src_phrases.get(token)
        if phrase:
            return phrase.split('-')
        if token in self._src_words:
            return [token]
        self._log.debug('no expansion found for {}'.format(token))
        return []
