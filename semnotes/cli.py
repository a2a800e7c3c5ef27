"""CLI interface for Semnotes - index notes and inspect models from the terminal."""

import argparse
import logging
import sys

from semnotes.config import get_settings
from semnotes.errors import SemnotesError
from semnotes.indexer import IndexReport, NoteIndexer
from semnotes.llm import ModelCatalog
from semnotes.logging_setup import setup_logging
from semnotes.storage import (
    NoteRepository,
    create_db_engine,
    create_session_factory,
    init_database,
)


# ANSI color codes
class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"


def print_report(report: IndexReport) -> None:
    """Print an indexing report."""
    print(f"{Colors.BOLD}Indexed {report.indexed} notes{Colors.RESET} from {report.directory}")
    print(f"{Colors.DIM}  created: {report.created}, updated: {report.updated}{Colors.RESET}")
    if report.failures:
        print(f"{Colors.YELLOW}  {report.failed} failed:{Colors.RESET}")
        for failure in report.failures:
            print(f"    - {failure.path}: {failure.reason}")


def run_index(settings) -> IndexReport:
    engine = create_db_engine(settings.database_url)
    init_database(engine)
    repository = NoteRepository(create_session_factory(engine))
    return NoteIndexer(settings.notes_directory, repository).index_notes()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="semnotes-cli",
        description="Index note files into the database and inspect OpenAI models.",
    )
    parser.add_argument(
        "--index",
        action="store_true",
        help="Index the notes directory and exit",
    )
    parser.add_argument(
        "--list-models",
        action="store_true",
        help="List available OpenAI models and exit",
    )
    parser.add_argument(
        "--model",
        type=str,
        metavar="ID",
        help="Show details of one OpenAI model and exit",
    )
    return parser


def cli(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not (args.index or args.list_models or args.model):
        parser.print_help()
        return 0

    setup_logging("WARNING")

    try:
        settings = get_settings()
    except Exception as e:
        print(f"{Colors.RED}Failed to load settings: {e}{Colors.RESET}")
        print(f"{Colors.RED}Make sure you have a .env file with NOTES_DIRECTORY.{Colors.RESET}")
        return 1

    try:
        if args.index:
            print_report(run_index(settings))

        if args.list_models or args.model:
            catalog = ModelCatalog(settings.openai_api_key).activate()
            if args.list_models:
                for model in sorted(catalog.list_models(), key=lambda m: m.id):
                    print(f"{model.id}  {Colors.DIM}{model.owned_by}{Colors.RESET}")
            if args.model:
                model = catalog.get_model(args.model)
                print(f"{Colors.BOLD}{model.id}{Colors.RESET}")
                print(f"  owned_by: {model.owned_by}")
                print(f"  created:  {model.created}")
    except SemnotesError as e:
        logging.getLogger(__name__).debug("Command failed", exc_info=True)
        print(f"{Colors.RED}Error: {e}{Colors.RESET}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(cli())
