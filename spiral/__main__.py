#!/usr/bin/env python3
#
# @file    __main__.py
# @brief   Command-line interface to the Spiral splitters
# @author  Michael Hucka
#
# <!---------------------------------------------------------------------------
# Copyright (C) 2015 by the California Institute of Technology.
# This software is part of CASICS, the Comprehensive and Automated Software
# Inventory Creation System.  For more information, visit http://casics.org.
# ------------------------------------------------------------------------- -->

import os
import plac

from .config import SplitterConfig
from .exceptions import SplitterError
from .frequencies import FrequencyTable, load_dictionary, nltk_dictionary
from .gentest import GenTest
from .logger import Logger
from .samurai import Samurai
from .simple_splitters import simple_split, safe_simple_split


# Helpers.
# .............................................................................

def load_table(filename, log):
    if not os.path.exists(filename):
        raise SystemExit('File {} not found'.format(filename))
    try:
        if filename.endswith(('.pkl', '.pickle')):
            return FrequencyTable.from_pickle(filename)
        return FrequencyTable.from_file(filename)
    except ValueError as err:
        log.fail(str(err))


def split_identifiers(identifiers, split, expand=None):
    '''Return table rows of (identifier, split) or, if an 'expand' function
    is given, (identifier, split, expansion).'''
    rows = []
    for identifier in identifiers:
        row = [identifier, ' '.join(split(identifier))]
        if expand:
            row.append(expand(identifier))
        rows.append(row)
    return rows


def tabulate_splits(rows, format='plain'):
    from tabulate import tabulate
    return tabulate(rows, tablefmt=format)


# Entry point
# .............................................................................
# Argument annotations are: (help, kind, abbrev, type, choices, metavar)
# Plac automatically adds a -h argument for help, so no need to do it here.

@plac.annotations(
    algorithm  = ('splitter to use',                      'option', 'a', str,
                  ['samurai', 'gentest', 'simple', 'safe']),
    local      = ('file of local word frequencies',       'option', 'l'),
    glob       = ('file of global word frequencies',      'option', 'g'),
    dictionary = ('file of dictionary words (GenTest)',   'option', 'd'),
    words      = ('use the NLTK words corpus (GenTest)',  'flag',   'w'),
    camelcut   = ('apply the camel case cut (Samurai)',   'flag',   'x'),
    expand     = ('print the best expansion (GenTest)',   'flag',   'e'),
    loglevel   = ('logging level: "debug" or "info"',     'option', 'L'),
    identifier = 'identifier to split',
)

def main(algorithm='samurai', local=None, glob=None, dictionary=None,
         words=False, camelcut=False, expand=False, loglevel='warn',
         *identifier):
    '''Split program identifiers into words.'''
    if len(identifier) < 1:
        raise SystemExit('Need at least one identifier as argument')
    if expand and algorithm != 'gentest':
        raise SystemExit('Option -e can only be used with -a gentest')
    log = Logger(console=True).get_log()
    log.set_level(loglevel)

    local_table = load_table(local, log) if local else None
    global_table = load_table(glob, log) if glob else None
    dict_words = None
    if dictionary:
        if not os.path.exists(dictionary):
            raise SystemExit('File {} not found'.format(dictionary))
        dict_words = load_dictionary(dictionary)
    elif words:
        log.info('Loading NLTK words corpus')
        dict_words = nltk_dictionary()

    config = SplitterConfig(local_table=local_table, global_table=global_table,
                            dictionary=dict_words, apply_camel_cut=camelcut)
    log.debug('Using {}'.format(config))
    if algorithm == 'simple':
        rows = split_identifiers(identifier, simple_split)
    elif algorithm == 'safe':
        rows = split_identifiers(identifier, safe_simple_split)
    elif algorithm == 'gentest':
        try:
            splitter = GenTest(config)
        except SplitterError as err:
            log.fail(str(err))
        rows = split_identifiers(identifier, splitter.split,
                                 splitter.expand if expand else None)
    else:
        rows = split_identifiers(identifier, Samurai(config).split)
    print(tabulate_splits(rows))


def console_scripts_main():
    plac.call(main)


if __name__ == '__main__':
    plac.call(main)
