"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that generates the INTERACTIVE part
on-the-fly based on the missing components of the CLI interaction, including the option that none are included.

Typical usage example:

    compalg eea -x 45645 -y 43276
    OR
    python -m compalg
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import typing

import compalg


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None
    default: typing.Any = None


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in Computer Algebra Utils.",
            choices=["gcd", "eea", "stein", "isprime", "factor"],
        ),
    "gcd":
        HelpData("Greatest common divisor, Euclidean algorithm."),
    "eea":
        HelpData("Extended Euclidean algorithm, gcd and Bezout coefficients."),
    "stein":
        HelpData("Greatest common divisor, binary (Stein's) algorithm."),
    "isprime":
        HelpData("Primality test."),
    "factor":
        HelpData("Prime factorization."),
    "first":
        HelpData(
            description="The first integer operand.",
            format=int,
        ),
    "second":
        HelpData(
            description="The second integer operand.",
            format=int,
        ),
    "number":
        HelpData(
            description="The integer to test or factor.",
            format=int,
        ),
}

needs = {
    "gcd": ("first", "second"),
    "eea": ("first", "second"),
    "stein": ("first", "second"),
    "isprime": ("number",),
    "factor": ("number",),
}

pair = argparse.ArgumentParser(add_help=False)
pair.add_argument("--first", "-x", type=help_dict["first"].format, help=help_dict["first"].description)
pair.add_argument("--second", "-y", type=help_dict["second"].format, help=help_dict["second"].description)
single = argparse.ArgumentParser(add_help=False)
single.add_argument("--number", "-N", type=help_dict["number"].format, help=help_dict["number"].description)
corep = argparse.ArgumentParser(prog="compalg")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {compalg.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

for name in ("gcd", "eea", "stein"):
    commands.add_parser(name, parents=[pair], help=help_dict[name].description)
for name in ("isprime", "factor"):
    commands.add_parser(name, parents=[single], help=help_dict[name].description)


def checkmodes(arg: str, non_interactive: bool) -> typing.Any:
    """Resolve a missing argument without prompting, if the mode allows it.

    Args:
        arg: Key of the argument in `help_dict`.
        non_interactive: Whether prompting is disabled.

    Returns:
        The argument's default in non-interactive mode, otherwise its `HelpData` so the caller can prompt.

    Raises:
        IOError: Non-interactive mode is active and the argument has no default.
    """
    helper_data = help_dict[arg]
    if not non_interactive:
        return helper_data
    if helper_data.default is None:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data.default


def _announce(arg: str, helper_data: HelpData, prntr: typing.Callable) -> None:
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)


def choice_handler(arg: str, non_interactive: bool, prntr: typing.Callable = print) -> typing.Any:
    """Ask for one of the listed choices of `arg` until a valid one is given.

    Raises:
        IOError: Propagated from `checkmodes` in non-interactive mode.
    """
    helper_data = checkmodes(arg, non_interactive)
    if not isinstance(helper_data, HelpData):
        return helper_data
    _announce(arg, helper_data, prntr)
    for choice in helper_data.choices:
        line = f"{choice} - {help_dict[choice].description}" if choice in help_dict else choice
        prntr(line + (" (Default)" if choice == helper_data.default else ""))
    if helper_data.default is not None:
        prntr("To accept default just click enter. Otherwise specify value.")
    valid = set(helper_data.choices)
    while True:
        ch = input(f"{arg}: ")
        if ch in valid:
            return ch
        if not ch and helper_data.default is not None:
            return helper_data.default
        prntr("Please select an option from the list.")


def input_handler(arg: str, non_interactive: bool, prntr: typing.Callable = print) -> typing.Any:
    """Ask for a free-form value of `arg`, converted with its `HelpData.format`.

    Conversion failures and empty answers are reported and asked again.

    Raises:
        IOError: Propagated from `checkmodes` in non-interactive mode.
    """
    helper_data = checkmodes(arg, non_interactive)
    if not isinstance(helper_data, HelpData):
        return helper_data
    _announce(arg, helper_data, prntr)
    if helper_data.default is not None:
        prntr(f"Default value: {helper_data.default}")
        prntr("To accept default just click enter. Otherwise specify value.")
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if not ch:
            if helper_data.default is not None:
                return helper_data.default
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def main(argv: list[str] | None = None):
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)

    Raises:
        IOError: A required argument is missing and non-interactive mode is active.
    """
    args = corep.parse_args(argv)
    quiet = args.non_interactive

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not quiet:
            print(text)

    pspr("Welcome to Computer Algebra Utils!\n")
    if not args.subcommand:
        args.subcommand = choice_handler("subcommand", quiet)
    for reqs in needs[args.subcommand]:
        if getattr(args, reqs, None) is None:
            setattr(args, reqs, input_handler(reqs, quiet))
        else:
            pspr(f"{reqs}: {getattr(args, reqs)}")
    pspr("\nInput Complete! Executing...")
    match args.subcommand:
        case "gcd":
            pspr("Greatest common divisor:")
            print(compalg.gcd(args.first, args.second))
        case "eea":
            g, x, y = compalg.extended_euclidean_algorithm(args.first, args.second)
            pspr(f"{args.first}*({x}) + {args.second}*({y}) = {g}")
            pspr("g x y:")
            print(g, x, y)
        case "stein":
            pspr("Greatest common divisor:")
            print(compalg.binary_gcd(args.first, args.second))
        case "isprime":
            if compalg.is_prime(args.number):
                print(f"{args.number} is prime.")
            else:
                print(f"{args.number} is not prime.")
        case "factor":
            factors = compalg.prime_factorization(args.number)
            pspr("Prime factors:")
            print(" ".join(str(f) for f in factors))
    pspr("Thank you for using Computer Algebra Utils!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
