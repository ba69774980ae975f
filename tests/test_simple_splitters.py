#!/usr/bin/env python3

import pytest

from spiral.simple_splitters import *


class TestClass:
    @pytest.mark.parametrize('token, expected', [
        ('foo2bar',  'foo_2_bar'),
        ('utf8',     'utf_8'),
        ('2d',       '2_d'),
        ('x11y22',   'x_11_y_22'),
        ('12',       '12'),
        ('',         ''),
    ])
    def test_add_markers_on_digits(self, token, expected):
        assert(add_markers_on_digits(token) == expected)

    @pytest.mark.parametrize('token, expected', [
        ('getString',  'get_String'),
        ('GPSstate',   'GPSstate'),
        ('ASTVisitor', 'ASTVisitor'),
        ('fooBarBaz',  'foo_Bar_Baz'),
    ])
    def test_add_markers_on_lower_to_upper(self, token, expected):
        assert(add_markers_on_lower_to_upper(token) == expected)

    def test_mark_boundaries(self):
        assert(mark_boundaries('get2ndValue') == 'get_2_nd_Value')

    def test_split_on_markers(self):
        assert(split_on_markers('__get__value_') == ['get', 'value'])
        assert(split_on_markers('') == [])
        assert(split_on_markers('_') == [])

    def test_delimiter_split(self):
        assert(delimiter_split('os.path_join:x') == ['os', 'path', 'join', 'x'])

    def test_naive_camelcase_split(self):
        assert(naive_camelcase_split('fooBarBaz') == ['foo', 'Bar', 'Baz'])
        assert(naive_camelcase_split('SQLlite') == ['SQLlite'])

    def test_safe_simple_split(self):
        assert(safe_simple_split('foo2barBaz') == ['foo', 'bar', 'Baz'])
        assert(safe_simple_split('aFastNDecoder') == ['aFastNDecoder'])

    def test_simple_split(self):
        assert(simple_split('aFastNDecoder') == ['a', 'Fast', 'NDecoder'])
        assert(simple_split('utf8decode') == ['utf', '8', 'decode'])
        assert(simple_split('os.path_join') == ['os', 'path', 'join'])
