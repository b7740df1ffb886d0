"""
Interactive menu — the default mode when ``datagen`` runs without a sub-command.

    1. Create new data file
    2. Exit

Bad input is reported and re-prompted; a failed write returns to the
menu.  Only end-of-input on stdin stops the loop early (click raises
``Abort``, exit status 1).
"""

from __future__ import annotations

import logging
import random

import click

from datagen.core.errors import InvalidCount, InvalidDataType, InvalidMenuChoice
from datagen.core.models.request import DataKind, GenerationRequest, parse_count
from datagen.core.models.settings import GeneratorSettings
from datagen.core.use_cases.create_file import create_data_file

logger = logging.getLogger(__name__)

CHOICE_CREATE = 1
CHOICE_EXIT = 2

MENU_LINES = (
    "1. Create new data file",
    "2. Exit",
)


def parse_menu_choice(raw: str) -> int:
    """Map menu input to CHOICE_CREATE / CHOICE_EXIT."""
    text = raw.strip()
    if text == "1":
        return CHOICE_CREATE
    if text == "2":
        return CHOICE_EXIT
    raise InvalidMenuChoice(raw)


def _report(err: Exception) -> None:
    click.secho(f"❌ {err}", fg="red")


def prompt_data_kind() -> DataKind:
    """Ask for i/f until a valid data type is given."""
    while True:
        raw = click.prompt("Enter data type (i for integer, f for float)", type=str)
        try:
            return DataKind.parse(raw)
        except InvalidDataType as e:
            _report(e)


def prompt_count() -> int:
    """Ask for a positive element count until one is given."""
    while True:
        raw = click.prompt("Enter number of elements", type=str)
        try:
            return parse_count(raw)
        except InvalidCount as e:
            _report(e)


def prompt_filename() -> str:
    """Ask for a non-empty filename."""
    while True:
        raw = click.prompt("Enter filename", type=str).strip()
        if raw:
            return raw
        click.secho("❌ Filename must not be empty.", fg="red")


def collect_request() -> GenerationRequest:
    """Prompt for type, count and filename, in that order."""
    kind = prompt_data_kind()
    count = prompt_count()
    filename = prompt_filename()
    return GenerationRequest(kind=kind, count=count, filename=filename)


def run_menu(
    settings: GeneratorSettings | None = None,
    rng: random.Random | None = None,
) -> None:
    """Run the menu loop until the user picks Exit."""
    settings = settings or GeneratorSettings()

    while True:
        click.echo()
        for line in MENU_LINES:
            click.echo(line)

        raw = click.prompt("Enter your choice", type=str)
        try:
            choice = parse_menu_choice(raw)
        except InvalidMenuChoice as e:
            logger.debug("Rejected menu input %r", e.raw)
            click.secho("Invalid choice!", fg="red")
            continue

        if choice == CHOICE_EXIT:
            break

        request = collect_request()
        result = create_data_file(request, settings=settings, rng=rng)

        if result.ok:
            click.secho("✅ File created successfully!", fg="green")
            click.echo(f"   {result.written} values → {result.path}")
        else:
            click.secho(f"❌ Error creating file: {result.error}", fg="red")

    click.echo("Program terminated.")
