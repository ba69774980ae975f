#!/usr/bin/env python3
#
# @file    simple_splitters.py
# @brief   Simple identifier splitters and boundary markers
# @author  Michael Hucka
#
# <!---------------------------------------------------------------------------
# Copyright (C) 2015 by the California Institute of Technology.
# This software is part of CASICS, the Comprehensive and Automated Software
# Inventory Creation System.  For more information, visit http://casics.org.
# ------------------------------------------------------------------------- -->

from   itertools import chain
import re

from .constants import marker, delimiter_chars, hard_split_chars


# Boundary markers
# .............................................................................
# The smarter splitters start by inserting explicit markers at places where a
# split is certain: between digits and letters, and at forward camel case
# transitions (lower-to-upper case).  The marked token is then split into
# hardwords.  Note that digits are kept; "foo2bar" becomes "foo_2_bar".

_digit_boundary    = re.compile(r'(?<=[0-9])(?=[^\W\d_])|(?<=[^\W\d_])(?=[0-9])')
_lower_upper       = re.compile(r'(?<=[a-z])(?=[A-Z])')
_two_capitals      = re.compile(r'[A-Z][A-Z]')
_camel_case        = re.compile(r'((?<=[a-z])[A-Z])')

def add_markers_on_digits(token):
    '''Insert a marker between any digit and an adjacent letter.'''
    return _digit_boundary.sub(marker, token)


def add_markers_on_lower_to_upper(token):
    '''Insert a marker between a lower case letter and a following upper case
    letter: 'getString' -> 'get_String'.'''
    return _lower_upper.sub(marker, token)


def mark_boundaries(token):
    return add_markers_on_lower_to_upper(add_markers_on_digits(token))


def split_on_markers(token):
    '''Split a marked token into hardwords, dropping empty segments.'''
    return [part for part in token.split(marker) if part]


# Delimiter-based splitter
# .............................................................................
#
# This does nothing fancy. It splits by explicit delimiter characters like '_'.

_delimiter_splitter = str.maketrans(delimiter_chars, ' '*len(delimiter_chars))
_hard_splitter      = str.maketrans(hard_split_chars, ' '*len(hard_split_chars))

def delimiter_split(identifier):
    '''Split identifier by explicit delimiters only.'''
    parts = str.translate(identifier, _delimiter_splitter).split(' ')
    return [p for p in parts if p]


def naive_camelcase_split(identifier):
    '''Split identifiers by forward camel case only, i.e., lower-to-upper case
    transitions.  This means it will split fooBarBaz into 'foo', 'Bar' and
    'Baz', but it won't change SQLlite or similar identifiers.'''
    return re.sub(_camel_case, r' \1', identifier).split()


def safe_camelcase_split(identifier):
    '''Like naive_camelcase_split(), but does not split identifiers that have
    multiple adjacent uppercase letters.'''
    if re.search(_two_capitals, identifier):
        return [identifier]
    return naive_camelcase_split(identifier)


def safe_simple_split(identifier):
    '''Split identifiers by hard delimiters such as underscores, digits, and
    forward camel case only.  Digits are dropped.  Does not split identifiers
    that have multiple adjacent uppercase letters anywhere in them, because
    doing so is risky if the uppercase letters are not an acronym.  Example:
    aFastNDecoder -> ['aFastNDecoder'].
    '''
    parts = str.translate(identifier, _hard_splitter).split(' ')
    return list(chain.from_iterable(safe_camelcase_split(p) for p in parts))


def simple_split(identifier):
    '''Split identifiers by delimiters, digits and forward camel case.  Unlike
    safe_simple_split(), digits are kept as parts of their own and adjacent
    capitals are not treated specially: 'aFastNDecoder' -> ['a', 'Fast',
    'NDecoder'], 'utf8decode' -> ['utf', '8', 'decode'].'''
    token = marker.join(delimiter_split(identifier))
    return split_on_markers(mark_boundaries(token))
