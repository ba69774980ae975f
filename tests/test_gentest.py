#!/usr/bin/env python3

from math import comb
from timeit import default_timer as timer

import pytest

from spiral import (FrequencyTable, GenTest, SplitterConfig, SplitterError,
                    find_expansions, generate_potential_splits, gentest_split)
from spiral.gentest import FrequencyCohesion, length_ratio_cohesion


_words = ['car', 'cart', 'bar', 'get', 'set', 'string', 'gps', 'state',
          'ast', 'visitor', 'no', 'not', 'type']

_small_dict = ['car', 'string', 'steer', 'set', 'riflemen', 'lender', 'bar',
               'length', 'kamikaze']


class TestClass:
    @pytest.mark.parametrize('token, expected', [
        ('car',        ['car']),
        ('getString',  ['get', 'String']),
        ('GPSstate',   ['GPS', 'state']),
        ('ASTVisitor', ['AST', 'Visitor']),
        ('notype',     ['no', 'type']),
    ])
    def test_split_known_identifiers(self, token, expected):
        gentest = GenTest(SplitterConfig(dictionary=_words))
        assert(gentest.split(token) == expected)

    def test_split_on_underscores_first(self):
        gentest = GenTest(SplitterConfig(dictionary=_words))
        assert(gentest.split('get_car') == ['get', 'car'])

    def test_split_reconstructs_token(self):
        gentest = GenTest(SplitterConfig(dictionary=_words))
        for token in ['getStringState', 'xq', 'a', 'cartype', 'no_type_car']:
            assert(''.join(gentest.split(token)) == token.replace('_', ''))

    def test_empty_token(self):
        assert(GenTest().split('') == [])
        assert(GenTest().expand('') == '')

    def test_without_case_folding(self):
        config = SplitterConfig(dictionary=_words, case_fold=False)
        # 'GPS' no longer matches 'gps', so the best it can do is 'state'.
        assert(GenTest(config).split('GPSstate')[-1] == 'state')

    def test_expand(self):
        gentest = GenTest(SplitterConfig(dictionary=['string', 'length']))
        assert(gentest.split('str_len') == ['str', 'len'])
        assert(gentest.expand('str_len') == 'string_length')

    def test_best_splits(self):
        gentest = GenTest(SplitterConfig(dictionary=_words))
        splits = gentest.best_splits('notype_car')
        assert([s.split for s in splits] == ['no_type', 'car'])

    def test_dictionary_size_limit(self):
        config = SplitterConfig(dictionary=_words, max_dictionary_size=5)
        with pytest.raises(SplitterError):
            GenTest(config)

    def test_non_string_argument(self):
        with pytest.raises(ValueError):
            GenTest().split(None)

    def test_module_function(self):
        config = SplitterConfig(dictionary=_words)
        assert(gentest_split('notype', config) == ['no', 'type'])

    def test_custom_cohesion(self):
        config = SplitterConfig(dictionary=['no', 'note'])
        assert(GenTest(config).expand('n') == 'no')
        gentest = GenTest(config, cohesion=lambda s, e: 1.0 if e == 'note' else 0.0)
        assert(gentest.expand('n') == 'note')

    @pytest.mark.parametrize('token, expected', [
        ('car',  {'car', 'c_ar', 'c_a_r', 'ca_r'}),
        ('bond', {'bond', 'b_ond', 'b_o_nd', 'b_on_d', 'bo_nd', 'bo_n_d', 'bon_d'}),
    ])
    def test_generate_potential_splits(self, token, expected):
        splits = [p.split for p in generate_potential_splits(token)]
        assert(len(splits) == len(expected))
        assert(set(splits) == expected)

    def test_generate_potential_splits_counts(self):
        for n in range(1, 12):
            gaps = n - 1
            expected = 2**gaps if gaps <= 2 else 1 + gaps + comb(gaps, 2)
            assert(len(generate_potential_splits('x' * n)) == expected)

    def test_generate_potential_splits_order_and_softwords(self):
        splits = generate_potential_splits('abc')
        assert(splits[0].split == 'abc')
        for p in splits:
            assert(''.join(p.words()) == 'abc')
            assert(all(s.expansions == [] for s in p.softwords))

    def test_generate_potential_splits_empty(self):
        splits = generate_potential_splits('')
        assert(len(splits) == 1)
        assert(splits[0].split == '' and splits[0].softwords == [])

    @pytest.mark.parametrize('word, expected', [
        ('st',   ['string', 'steer', 'set']),
        ('rlen', ['riflemen']),
        ('str',  ['string', 'steer']),
        ('len',  ['lender', 'length', 'riflemen']),
        ('',     []),
        (' ',    []),
        ('zzz',  []),
    ])
    def test_find_expansions(self, word, expected):
        assert(sorted(find_expansions(word, _small_dict)) == sorted(expected))

    def test_find_expansions_is_exact(self):
        assert(find_expansions('ST', _small_dict) == [])
        assert(find_expansions('.', ['a.b', 'ab']) == ['a.b'])

    def test_find_expansions_near_miss_is_fast(self):
        start = timer()
        assert(find_expansions('a'*14 + 'b', ['a'*28]) == [])
        assert(timer() - start < 1)

    def test_split_long_near_miss_is_fast(self):
        gentest = GenTest(SplitterConfig(dictionary=['a'*26, 'aardvark']))
        start = timer()
        assert(''.join(gentest.split('a'*20 + 'b')) == 'a'*20 + 'b')
        assert(timer() - start < 5)

    def test_find_expansions_method(self):
        gentest = GenTest(SplitterConfig(dictionary=_small_dict))
        assert(gentest.find_expansions('rlen') == ['riflemen'])

    def test_length_ratio_cohesion(self):
        assert(length_ratio_cohesion('car', 'car') == 1)
        assert(length_ratio_cohesion('str', 'string') == pytest.approx(0.25))

    def test_frequency_cohesion(self):
        cohesion = FrequencyCohesion(FrequencyTable({'string': 99}))
        assert(cohesion('str', 'string') == pytest.approx(0.5))
        assert(cohesion('str', 'steer') == 0)
