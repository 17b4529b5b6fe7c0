from __future__ import annotations

import random

import pytest

from passgen.charsets import SPECIAL
from passgen.main import main, parse_args, run, split_clusters, usage_text
from passgen.password_generator import PasswordGenerator


def password_lines(out: str) -> list[str]:
    return [line for line in out.splitlines() if line[:1].isdigit()]


def test_default_run(capsys):
    assert run([]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == 'Generated password:'
    assert lines[1] == 'Length: 12 characters'
    assert lines[2] == 'Character sets: Uppercase, Lowercase, Numbers'
    assert lines[3] == 'Excluded similar characters: 0, O, I, l, 1'
    assert lines[4] == ''
    assert lines[5].startswith('1: ')
    assert len(lines[5]) == len('1: ') + 12
    assert len(lines) == 6


def test_count_and_length(capsys):
    assert run(['-c', '5', '-l', '10']) == 0
    out = capsys.readouterr().out
    assert out.startswith('Generated passwords:\n')
    lines = password_lines(out)
    assert len(lines) == 5
    for number, line in enumerate(lines, start=1):
        prefix, password = line.split(': ', 1)
        assert prefix == str(number)
        assert len(password) == 10


def test_special_header(capsys):
    assert run(['-l', '16', '-s']) == 0
    out = capsys.readouterr().out
    assert 'Character sets: Uppercase, Lowercase, Numbers, Special characters' in out
    password = password_lines(out)[0].split(': ', 1)[1]
    assert any(c in SPECIAL for c in password)


def test_injected_generator_is_used(capsys):
    run(['-c', '2'], generator=PasswordGenerator(rng=random.Random(3)))
    first = capsys.readouterr().out
    run(['-c', '2'], generator=PasswordGenerator(rng=random.Random(3)))
    second = capsys.readouterr().out
    assert first == second


def test_help(capsys):
    assert run(['-h']) == 0
    captured = capsys.readouterr()
    assert captured.out == usage_text() + '\n'
    assert captured.out.startswith('Usage: passgen [OPTIONS]')
    assert captured.err == ''


@pytest.mark.parametrize(
    'argv',
    [['-x'], ['-sx'], ['-hx'], ['-s', '-x'], ['--length', '12'], ['-l', '8', '-5']],
)
def test_unknown_flag_prints_usage(capsys, argv):
    assert run(argv) == 1
    captured = capsys.readouterr()
    assert captured.out.startswith('Usage: passgen [OPTIONS]')
    assert 'Generated' not in captured.out


@pytest.mark.parametrize(
    ('argv', 'message'),
    [
        (['-l', '2'], 'at least 3'),
        (['-l', '129'], 'cannot exceed 128'),
        (['-c', '0'], 'Count must be at least 1'),
        (['-c', '101'], 'Count cannot exceed 100'),
        (['-s', '-l', '3'], 'at least 4 when using special characters'),
        (['-l', 'abc'], 'invalid int value'),
        (['-c', 'xyz'], 'invalid int value'),
        (['-l'], 'expected one argument'),
    ],
)
def test_validation_errors(capsys, argv, message):
    assert run(argv) == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err.startswith('Error: ')
    assert message in captured.err


def test_length_checked_before_count(capsys):
    assert run(['-l', '2', '-c', '0']) == 1
    assert 'length' in capsys.readouterr().err


@pytest.mark.parametrize('argv', [['-l', '3'], ['-l', '128'], ['-l', '4', '-s'], ['-c', '100']])
def test_boundaries_succeed(capsys, argv):
    assert run(argv) == 0
    capsys.readouterr()


def test_main_exits_with_status(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['-c', '0'])
    assert excinfo.value.code == 1

    with pytest.raises(SystemExit) as excinfo:
        main(['-l', '6'])
    assert excinfo.value.code == 0
    assert 'Length: 6 characters' in capsys.readouterr().out


@pytest.mark.parametrize(
    ('argv', 'expected'),
    [
        (['-sl', '8'], ['-s', '-l', '8']),
        (['-sl8'], ['-s', '-l', '8']),
        (['-sh'], ['-s', '-h']),
        (['-sx'], ['-s', '-x']),
        (['-l8', '-s'], ['-l8', '-s']),
        (['-l', '-sx'], ['-l', '-sx']),
        (['-c', '3', 'extra'], ['-c', '3', 'extra']),
    ],
)
def test_split_clusters(argv, expected):
    assert split_clusters(argv) == expected


def test_clustered_switches(capsys):
    assert run(['-sl', '8']) == 0
    out = capsys.readouterr().out
    assert 'Length: 8 characters' in out
    assert 'Special characters' in out


def test_parse_args_defaults():
    options = parse_args([])
    assert options.length == 12
    assert options.count == 1
    assert options.include_special is False
    assert options.help is False


def test_extra_words_are_ignored_with_warning(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['-l', '9', 'extra'])
    assert excinfo.value.code == 0
    captured = capsys.readouterr()
    assert 'Length: 9 characters' in captured.out
    assert len(password_lines(captured.out)) == 1
    assert 'WARNING' in captured.err
    assert 'Ignoring extra arguments: extra' in captured.err
