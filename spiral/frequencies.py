#!/usr/bin/env python3
#
# @file    frequencies.py
# @brief   Word frequency tables and the Samurai score function
# @author  Michael Hucka
#
# <!---------------------------------------------------------------------------
# Copyright (C) 2015 by the California Institute of Technology.
# This software is part of CASICS, the Comprehensive and Automated Software
# Inventory Creation System.  For more information, visit http://casics.org.
# ------------------------------------------------------------------------- -->

import math
import os
import pickle

from .logger import Logger


# Frequency table class.
# .............................................................................
# A frequency table maps words to the number of times they were seen in some
# corpus.  The total number of occurrences is kept separately, because it is
# the number of tokens observed in the corpus, which need not be the sum of
# the counts in the table (e.g., if rare words were pruned from the table).
#
# Tables are treated as read-only once created; there are no methods to
# change them.

class FrequencyTable(object):
    def __init__(self, counts=None, total=None):
        self._counts = {}
        for word, count in (counts or {}).items():
            if not isinstance(count, int) or count < 0:
                raise ValueError('Invalid count for "{}": {}'.format(word, count))
            self._counts[word] = count
        if total is None:
            total = sum(self._counts.values())
        elif not isinstance(total, int) or total < 0:
            raise ValueError('Invalid total occurrences: {}'.format(total))
        self._total = total


    def __len__(self):
        return len(self._counts)


    def __contains__(self, word):
        return word in self._counts


    def __iter__(self):
        return iter(self._counts)


    def __repr__(self):
        return '<FrequencyTable: {} words, {} occurrences>'.format(
            len(self._counts), self._total)


    def frequency(self, word):
        '''Return the count for 'word', or 0 if the word is unknown.'''
        return self._counts.get(word, 0)


    def total_occurrences(self):
        return self._total


    def most_common(self, n=None):
        items = sorted(self._counts.items(), key=lambda x: (-x[1], x[0]))
        return items[:n] if n is not None else items


    @classmethod
    def from_words(cls, words, lowercase=False):
        '''Count the words in an iterable of words.'''
        from nltk.probability import FreqDist
        if lowercase:
            words = (w.lower() for w in words)
        dist = FreqDist(words)
        return cls(dict(dist), dist.N())


    @classmethod
    def from_pickle(cls, filename):
        '''Read a pickled table.  The pickle may contain a FrequencyTable, a
        dictionary of counts, or a tuple (dictionary, total).'''
        if not os.path.exists(filename):
            raise ValueError('File {} not found'.format(filename))
        with open(filename, 'rb') as f:
            content = pickle.load(f)
        if isinstance(content, cls):
            return content
        elif isinstance(content, dict):
            return cls(content)
        elif isinstance(content, tuple) and len(content) == 2:
            return cls(content[0], content[1])
        else:
            raise ValueError('Unrecognized content in {}'.format(filename))


    @classmethod
    def from_file(cls, filename, total=None):
        '''Read a plain text table with one "word count" pair per line.  Blank
        lines and lines beginning with '#' are ignored.'''
        if not os.path.exists(filename):
            raise ValueError('File {} not found'.format(filename))
        log = Logger().get_log()
        counts = {}
        with open(filename, 'r', encoding='utf-8') as f:
            for num, line in enumerate(f, 1):
                line = line.strip()
                if not line or line.startswith('#'):
                    continue
                parts = line.split()
                if len(parts) != 2 or not parts[1].isdigit():
                    raise ValueError('Malformed line {} in {}: {}'
                                     .format(num, filename, line))
                counts[parts[0]] = counts.get(parts[0], 0) + int(parts[1])
        log.debug('read {} entries from {}'.format(len(counts), filename))
        return cls(counts, total)


# Score function.
# .............................................................................
# This is the Samurai scoring function of Enslen, Hill, Pollock and
# Vijay-Shanker (2009):
#
#   score(s) = Freq(s, p) + globalFreq(s) / log10(AllStrsFreq(p))
#
# where p is the program under analysis.  When the local table has seen at
# most one occurrence, log10 is zero or negative; the global term is then
# taken to be 0, which leaves only the local frequency.

def score(word, local_table, global_table):
    local_freq = local_table.frequency(word)
    all_strs_freq = local_table.total_occurrences()
    if all_strs_freq <= 1:
        return float(local_freq)
    return local_freq + global_table.frequency(word) / math.log10(all_strs_freq)


def load_dictionary(filename):
    '''Read a word list with one word per line.  Blank lines and lines
    beginning with '#' are ignored.  Returns a tuple of words in file order.'''
    if not os.path.exists(filename):
        raise ValueError('File {} not found'.format(filename))
    with open(filename, 'r', encoding='utf-8') as f:
        words = [line.strip() for line in f]
    return tuple(w for w in words if w and not w.startswith('#'))


def nltk_dictionary():
    '''Return the words of the NLTK "words" corpus.  The corpus data must have
    been downloaded beforehand (e.g., nltk.download('words')).'''
    from nltk.corpus import words
    return tuple(words.words())
