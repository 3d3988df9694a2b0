"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that generates the INTERACTIVE part
on-the-fly based on the missing components of the CLI interaction, including the option that none are included.

Typical usage example:

    primetools
    OR
    python -m primetools modpow --base 2 --exponent 10 --modulus 1000 --format base64
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import sys
import typing

import primetools
from primetools.formatting import OUTPUT_FORMATS


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None
    default: typing.Any = None
    advanced: bool = False


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in Prime Tools.",
            choices=["generate", "baillie", "miller", "modpow"],
        ),
    "generate":
        HelpData("Find a prime number with a specified number of bits."),
    "baillie":
        HelpData("Check a specific number for primality (Baillie-PSW)."),
    "miller":
        HelpData("Check a specific number for primality (Miller-Rabin)."),
    "modpow":
        HelpData("Quick exponentiation modulo."),
    "bits":
        HelpData(
            description="The number of bits for the prime number.",
            format=int,
        ),
    "number":
        HelpData(
            description="The number to check for primality.",
            format=int,
        ),
    "iterations":
        HelpData(
            description="The number of Miller-Rabin test iterations.",
            format=int,
        ),
    "base":
        HelpData(
            description="The base of the exponentiation.",
            format=int,
        ),
    "exponent":
        HelpData(
            description="The exponent of the exponentiation.",
            format=int,
        ),
    "modulus":
        HelpData(
            description="The modulus of the exponentiation.",
            format=int,
        ),
    "format":
        HelpData(
            description="Output format of the result.",
            choices=list(OUTPUT_FORMATS),
            default="base10",
            advanced=True,
        ),
}

needs = {
    "generate": ("bits",),
    "baillie": ("number",),
    "miller": ("number", "iterations"),
    "modpow": ("base", "exponent", "modulus", "format"),
}

number = argparse.ArgumentParser(add_help=False)
number.add_argument("--number", "-N", type=help_dict["number"].format, help=help_dict["number"].description)
corep = argparse.ArgumentParser(prog="primetools")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {primetools.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced",
                   "-a",
                   action="store_true",
                   help="Enable advanced mode, for interactive mode. Also prompts for options with defaults")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

generate = commands.add_parser("generate", help=help_dict["generate"].description)
generate.add_argument("--bits", "-b", type=help_dict["bits"].format, help=help_dict["bits"].description)

baillie = commands.add_parser("baillie", parents=[number], help=help_dict["baillie"].description)
miller = commands.add_parser("miller", parents=[number], help=help_dict["miller"].description)
miller.add_argument("--iterations",
                    "-k",
                    type=help_dict["iterations"].format,
                    help=help_dict["iterations"].description)

modpow = commands.add_parser("modpow", help=help_dict["modpow"].description)
modpow.add_argument("--base", "-B", type=help_dict["base"].format, help=help_dict["base"].description)
modpow.add_argument("--exponent", "-E", type=help_dict["exponent"].format, help=help_dict["exponent"].description)
modpow.add_argument("--modulus", "-M", type=help_dict["modulus"].format, help=help_dict["modulus"].description)
modpow.add_argument("--format", "-f", help=f"{help_dict['format'].description} One of: {', '.join(OUTPUT_FORMATS)}")


def checkmodes(arg: str, mode: tuple[bool, bool]):
    helper_data = help_dict[arg]
    if (mode[0] or (helper_data.advanced and not mode[1])) and helper_data.default:
        return helper_data.default
    if mode[0]:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    choices = helper_data.choices
    vald = set(choices)
    for choice in choices:
        defstring = " (Default)" if choice == helper_data.default else ""
        if help_dict.get(choice, None):
            prntr(f"{choice} - {help_dict[choice].description}" + defstring)
        else:
            prntr(f"{choice}" + defstring)
    if helper_data.default is not None:
        prntr("To accept default just click enter. Otherwise specify value.")
    while True:
        ch = input(f"{arg}: ")
        if ch in vald:
            return ch
        if not ch and helper_data.default is not None:
            return helper_data.default
        prntr("Please select an option from the list.")


def input_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    if helper_data.default is not None:
        prntr(f"Default value: {helper_data.default}")
        prntr("To accept default just click enter. Otherwise specify value.")
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if not ch and helper_data.default is not None:
            return helper_data.default
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def verdict(num: int, prime: bool) -> str:
    return f"Number {num} is prime." if prime else f"Number {num} is not prime."


def main():
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args()
    pstatus = (args.non_interactive, args.advanced)

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not pstatus[0]:
            print(text)

    pspr("Welcome to Prime Tools!\n")
    try:
        if not args.subcommand:
            args.subcommand = choice_handler("subcommand", pstatus)
        for reqs in needs[args.subcommand]:
            if getattr(args, reqs, None) is None:
                if help_dict[reqs].choices is not None:
                    res = choice_handler(reqs, pstatus)
                else:
                    res = input_handler(reqs, pstatus)
                setattr(args, reqs, res)
            else:
                pspr(f"{reqs}: {getattr(args, reqs)}")
    except IOError as exc:
        print(f"Error: {exc}")
        sys.exit(1)
    pspr("\nInput Complete! Executing...")
    try:
        match args.subcommand:
            case "generate":
                prime = primetools.generate_prime(args.bits)
                print(f"Generated prime number: {prime}")
            case "baillie":
                print(verdict(args.number, primetools.baillie_test(args.number)))
            case "miller":
                print(verdict(args.number, primetools.is_prime_rm(args.number, args.iterations)))
            case "modpow":
                result = primetools.mod_pow(args.base, args.exponent, args.modulus)
                formatted = primetools.convert_output(result, args.format)
                print(f"Result {args.base}^{args.exponent} mod {args.modulus} = {formatted}")
    except primetools.PrimeToolsError as exc:
        print(f"Error: {exc}")
        sys.exit(1)
    pspr("Thank you for using Prime Tools!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
