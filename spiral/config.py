#!/usr/bin/env python3
#
# @file    config.py
# @brief   Shared, read-only resources used by the splitters
# @author  Michael Hucka
#
# <!---------------------------------------------------------------------------
# Copyright (C) 2015 by the California Institute of Technology.
# This software is part of CASICS, the Comprehensive and Automated Software
# Inventory Creation System.  For more information, visit http://casics.org.
# ------------------------------------------------------------------------- -->

from .constants import common_prefixes, common_suffixes
from .frequencies import FrequencyTable


# Configuration object.
# .............................................................................
# Build one of these at start-up and hand it to each splitter.  Anything not
# supplied gets a default: empty frequency tables, the built-in lists of
# common prefixes and suffixes, and an empty dictionary.  The collections are
# converted to immutable types here, so a config can be shared by several
# splitters (and threads) without copying.

class SplitterConfig(object):
    def __init__(self, local_table=None, global_table=None, prefixes=None,
                 suffixes=None, dictionary=None, apply_camel_cut=False,
                 case_fold=True, max_dictionary_size=None):
        self.local_table = local_table if local_table is not None else FrequencyTable()
        self.global_table = global_table if global_table is not None else FrequencyTable()
        self.prefixes = frozenset(prefixes if prefixes is not None else common_prefixes)
        self.suffixes = frozenset(suffixes if suffixes is not None else common_suffixes)
        self.dictionary = tuple(dictionary) if dictionary is not None else ()
        self.apply_camel_cut = apply_camel_cut
        self.case_fold = case_fold
        self.max_dictionary_size = max_dictionary_size


    def __repr__(self):
        return ('<SplitterConfig: local {}, global {}, {} prefixes, {} suffixes,'
                ' {} dictionary words>'.format(self.local_table, self.global_table,
                                               len(self.prefixes), len(self.suffixes),
                                               len(self.dictionary)))
