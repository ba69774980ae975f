#!/usr/bin/env python3

import logging

import plac
import pytest

from spiral.__main__ import main
from spiral.logger import Logger


class TestClass:
    def test_samurai(self, tmp_path, capsys):
        freq = tmp_path / 'local.txt'
        freq.write_text('GPS 30\nstate 60\n')
        plac.call(main, ['-l', str(freq), 'GPSstate', 'getValue'])
        out = capsys.readouterr().out.splitlines()
        assert(out[0].split() == ['GPSstate', 'GPS', 'state'])
        assert(out[1].split() == ['getValue', 'get', 'Value'])

    def test_gentest_expand(self, tmp_path, capsys):
        words = tmp_path / 'words.txt'
        words.write_text('string\nlength\n')
        plac.call(main, ['-a', 'gentest', '-d', str(words), '-e', 'str_len'])
        out = capsys.readouterr().out.split()
        assert(out == ['str_len', 'str', 'len', 'string_length'])

    def test_simple_splitters(self, capsys):
        plac.call(main, ['-a', 'simple', 'aFastNDecoder', 'utf8_decode'])
        plac.call(main, ['-a', 'safe', 'aFastNDecoder', 'utf8_decode'])
        out = capsys.readouterr().out.splitlines()
        assert(out[0].split() == ['aFastNDecoder', 'a', 'Fast', 'NDecoder'])
        assert(out[1].split() == ['utf8_decode', 'utf', '8', 'decode'])
        assert(out[2].split() == ['aFastNDecoder', 'aFastNDecoder'])
        assert(out[3].split() == ['utf8_decode', 'utf', 'decode'])

    def test_malformed_frequency_file(self, tmp_path):
        freq = tmp_path / 'local.txt'
        freq.write_text('GPS thirty\n')
        with pytest.raises(SystemExit, match='Malformed line 1'):
            plac.call(main, ['-l', str(freq), 'GPSstate'])

    def test_missing_identifier(self):
        with pytest.raises(SystemExit):
            plac.call(main, [])

    def test_missing_file(self):
        with pytest.raises(SystemExit):
            plac.call(main, ['-l', '/nonexistent/local.txt', 'foo'])

    def test_expand_needs_gentest(self):
        with pytest.raises(SystemExit):
            plac.call(main, ['-e', 'foo'])


class TestLogger:
    def test_set_level(self):
        log = Logger('spiral-test').get_log()
        log.set_level('debug')
        assert(log.get_level() == logging.DEBUG)
        with pytest.raises(ValueError):
            log.set_level('loud')

    def test_fail_exits(self):
        log = Logger('spiral-test').get_log()
        with pytest.raises(SystemExit):
            log.fail('cannot continue')
