"""Command-line front end: pick an XML file, convert it, print the summary.

Usage:
    conversorxml                      # interactive picker over ./*.xml
    conversorxml comissao_jan2024.xml # convert one file, no prompts
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from conversorxml.conversion.executor import ConversionPipeline
from conversorxml.core.config import AppSettings
from conversorxml.core.exceptions import NoInputFoundError
from conversorxml.core.protocols import IFileStore
from conversorxml.models.document import DocumentVariant
from conversorxml.models.outputs import ConversionOutcome, Converted, Failed, NoData
from conversorxml.persistence import create_file_store

VERSION = "0.1.0"
AUTHOR = "Jorge Beserra <jorgebeserra@gmail.com>"
ABOUT = "Converts commission or vale payroll XML files to CSV"
REPOSITORY_URL = "https://github.com/jorgebeserra/conversorxmlcsv"

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2

logger = logging.getLogger(__name__)


class UserInterface:
    """Console output and prompts."""

    @staticmethod
    def display_banner() -> None:
        print("Welcome to the XML to CSV converter!")
        print(f"Developed by {AUTHOR}")
        print(f"GitHub repository: {REPOSITORY_URL}\n")

    @staticmethod
    def display_error(message: str) -> None:
        print(f"Error: {message}")

    @staticmethod
    def display_warning(message: str) -> None:
        print(f"Warning: {message}")

    @staticmethod
    def display_outcome(outcome: ConversionOutcome) -> None:
        if isinstance(outcome, Converted):
            summary = outcome.summary
            print(f"Data exported to {outcome.output_path} successfully!")
            print(f"Number of employees: {summary.row_count}")
            if summary.variant is DocumentVariant.COMMISSION:
                print(f"Total commission: R$ {summary.total_primary_amount:.2f}")
                print(f"Total bonus target: R$ {summary.total_secondary_amount:.2f}")
            else:
                print(f"Total vales: R$ {summary.total_primary_amount:.2f}")
        elif isinstance(outcome, NoData):
            UserInterface.display_warning(
                "The XML file contains no employees. No data was exported to CSV."
            )
        else:
            UserInterface.display_error(outcome.reason)

    @staticmethod
    def choose_file(candidates: list[str]) -> Optional[str]:
        """Numbered menu; Enter picks the first entry. Returns None on EOF."""
        print("Choose the XML file to convert:")
        for number, name in enumerate(candidates, 1):
            print(f"  {number}. {name}")
        while True:
            try:
                response = input(f"Selection [1-{len(candidates)}, default 1]: ").strip()
            except EOFError:
                return None
            if not response:
                return candidates[0]
            if response.isdigit() and 1 <= int(response) <= len(candidates):
                return candidates[int(response) - 1]
            print(f"Please enter a number between 1 and {len(candidates)}.")

    @staticmethod
    def wait_for_exit() -> None:
        try:
            input("Press Enter to exit...")
        except EOFError:
            pass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conversorxml",
        description=ABOUT,
        epilog=f"Author: {AUTHOR}. Files must be named comissao_*.xml or vales_*.xml.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="XML file to convert; omit to pick one from the input directory",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def list_candidates(file_store: IFileStore, settings: AppSettings) -> list[str]:
    """Files matching the configured pattern, sorted by name.

    Raises:
        NoInputFoundError: nothing matches.
    """
    candidates = file_store.list_files(settings.cli.input_pattern)
    if not candidates:
        raise NoInputFoundError(settings.cli.input_dir, settings.cli.input_pattern)
    return candidates


def exit_code_for(outcome: ConversionOutcome) -> int:
    return EXIT_FAILED if isinstance(outcome, Failed) else EXIT_OK


def _run_interactive(pipeline: ConversionPipeline, file_store: IFileStore, settings: AppSettings) -> int:
    if settings.cli.show_banner:
        UserInterface.display_banner()

    try:
        candidates = list_candidates(file_store, settings)
    except NoInputFoundError as exc:
        logger.info("%s", exc)
        UserInterface.display_warning("No XML files were found in the folder.")
        return EXIT_OK

    selected = UserInterface.choose_file(candidates)
    if selected is None:
        UserInterface.display_error("No file selected.")
        return EXIT_USAGE

    outcome = pipeline.convert(selected)
    UserInterface.display_outcome(outcome)

    if settings.cli.pause_on_exit:
        UserInterface.wait_for_exit()
    return exit_code_for(outcome)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = AppSettings()
    except ValidationError as exc:
        UserInterface.display_error(f"Invalid configuration: {exc}")
        return EXIT_USAGE
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    file_store = create_file_store(settings)
    pipeline = ConversionPipeline(file_store=file_store)

    if args.path:
        outcome = pipeline.convert(str(Path(args.path).absolute()))
        UserInterface.display_outcome(outcome)
        return exit_code_for(outcome)

    return _run_interactive(pipeline, file_store, settings)


if __name__ == "__main__":
    raise SystemExit(main())
