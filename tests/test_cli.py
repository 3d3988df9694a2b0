# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import sys

import pytest
import sympy

from primetools import __main__ as cli


def run_cli(monkeypatch, *argv: str) -> None:
    monkeypatch.setattr(sys, "argv", ["primetools", *argv])
    cli.main()


@pytest.mark.parametrize("fmt,expected", [("base10", "24"), ("base64", "AAAAGA=="), ("byte[]", "0 0 0 0 0 0 0 24")])
def test_modpow(monkeypatch, capsys, fmt, expected):
    run_cli(monkeypatch, "-n", "modpow", "--base", "2", "--exponent", "10", "--modulus", "1000", "--format", fmt)
    assert capsys.readouterr().out == f"Result 2^10 mod 1000 = {expected}\n"


def test_modpow_default_format(monkeypatch, capsys):
    run_cli(monkeypatch, "-n", "modpow", "-B", "7", "-E", "560", "-M", "561")
    assert capsys.readouterr().out == "Result 7^560 mod 561 = 1\n"


def test_modpow_invalid_modulus(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "-n", "modpow", "-B", "2", "-E", "3", "-M", "0")
    assert exc.value.code == 1
    assert capsys.readouterr().out == "Error: modulus must be > 0\n"


@pytest.mark.parametrize("num,expected", [(47, "is prime"), (3127, "is not prime"), (561, "is not prime")])
def test_baillie(monkeypatch, capsys, num, expected):
    run_cli(monkeypatch, "-n", "baillie", "--number", str(num))
    assert capsys.readouterr().out == f"Number {num} {expected}.\n"


@pytest.mark.parametrize("num,expected", [(7919, "is prime"), (561, "is not prime"), (1, "is not prime")])
def test_miller(monkeypatch, capsys, num, expected):
    run_cli(monkeypatch, "-n", "miller", "-N", str(num), "-k", "30")
    assert capsys.readouterr().out == f"Number {num} {expected}.\n"


@pytest.mark.parametrize("argv,missing", [
    (("-n", "miller", "-N", "7"), "iterations"),
    (("-n", "generate"), "bits"),
    (("-n",), "subcommand"),
])
def test_non_interactive_missing_argument(monkeypatch, capsys, argv, missing):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, *argv)
    assert exc.value.code == 1
    assert capsys.readouterr().out == f"Error: Argument {missing} is missing and non-interactive mode is active.\n"


def test_generate(monkeypatch, capsys):
    run_cli(monkeypatch, "-n", "generate", "--bits", "24")
    out = capsys.readouterr().out
    assert out.startswith("Generated prime number: ")
    prime = int(out.split(": ")[1])
    assert prime.bit_length() == 24
    assert sympy.isprime(prime)


def test_generate_invalid_bits(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "-n", "generate", "-b", "1")
    assert exc.value.code == 1
    assert "Error: bits must be > 1" in capsys.readouterr().out


def test_interactive(monkeypatch, capsys):
    answers = iter(["modpow", "two", "2", "", "10", "1000"])
    monkeypatch.setattr("builtins.input", lambda _: next(answers))
    run_cli(monkeypatch)
    out = capsys.readouterr().out
    assert "Welcome to Prime Tools!" in out
    assert "We could not convert your value to int." in out
    assert "Please provide a value." in out
    assert "Please specify the format!" not in out
    assert "Result 2^10 mod 1000 = 24" in out
    assert "Goodbye!" in out


def test_interactive_advanced_prompts_format(monkeypatch, capsys):
    answers = iter(["2", "10", "1000", "base16", "base64"])
    monkeypatch.setattr("builtins.input", lambda _: next(answers))
    run_cli(monkeypatch, "-a", "modpow")
    out = capsys.readouterr().out
    assert "Please specify the format!" in out
    assert "base10 (Default)" in out
    assert "Please select an option from the list." in out
    assert "Result 2^10 mod 1000 = AAAAGA==" in out


def test_format_is_advanced_only():
    assert [arg for arg, data in cli.help_dict.items() if data.advanced] == ["format"]


@pytest.mark.parametrize("fmt", ["base16", "BASE10", "bytes"])
def test_modpow_unknown_format(monkeypatch, capsys, fmt):
    run_cli(monkeypatch, "-n", "modpow", "-B", "2", "-E", "10", "-M", "1000", "-f", fmt)
    assert capsys.readouterr().out == "Result 2^10 mod 1000 = Invalid format\n"
