"""
Command-line entrypoint replaying a recorded keypad session.

This script:
- Loads a session file (plain text or archive) of key labels
- Presses every key on a fresh calculator
- Writes the display after each line next to the input file
"""

import argparse
from pathlib import Path
from typing import List

from pydantic import BaseModel, FilePath, ValidationError

from keypad_calculator.calculator.store import CalculatorStore
from keypad_calculator.common.config import CalculatorConfig
from keypad_calculator.common.logger import configure_logging, logger
from keypad_calculator.session.loader import load_session
from keypad_calculator.session.replay import SessionLine, replay_session


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    file_path : FilePath
        Path to the session file containing key labels.
    log_level : str
        Logging level name.
    reproduce_operator_bug : bool
        Make every operator key store "+".
    """

    file_path: FilePath
    log_level: str = "INFO"
    reproduce_operator_bug: bool = False


def parse_args(argv: List[str] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param List[str] argv: Arguments to parse, defaults to sys.argv

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(description="Replay a keypad calculator session")

    parser.add_argument(
        "file_path",
        help="Path to the session file (.txt, .zip, .tar.xz or .7z)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument(
        "--reproduce-operator-bug",
        action="store_true",
        help="Make every operator key behave as '+'",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(
            file_path=args.file_path,
            log_level=args.log_level,
            reproduce_operator_bug=args.reproduce_operator_bug,
        )
    except ValidationError as exc:
        parser.error(str(exc))


def build_output_path(input_path: Path) -> Path:
    """
    Construct the results file path based on the session file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: sessions/basic.7z
    output: sessions/basic_7z_results.txt

    :param input_path: Path to the session file
    :return: Path to the results file
    """
    # Path.stem only strips the last suffix, so "ops.tar.xz" needs the full name split
    base = input_path.name.split(".")[0]
    suffix_safe = "".join(input_path.suffixes).replace(".", "_")
    return input_path.with_name(f"{base}{suffix_safe}_results.txt")


def write_results(results: List[SessionLine], output_path: Path) -> None:
    """
    Write replay results, one line per session line.

    :param List[SessionLine] results: Replay results
    :param Path output_path: Destination file
    """
    with output_path.open("w", encoding="utf-8") as f_out:
        for line in results:
            f_out.write(line.to_text() + "\n")


def main(argv: List[str] = None) -> None:
    """
    Replay the session given on the command line and write its results.
    """
    cli_args = parse_args(argv)
    configure_logging(cli_args.log_level)

    input_path: Path = Path(cli_args.file_path)
    output_path: Path = build_output_path(input_path)

    config = CalculatorConfig(reproduce_operator_bug=cli_args.reproduce_operator_bug)
    store = CalculatorStore(config=config)

    logger.info(f"🏁 Replaying {input_path}")
    results = replay_session(load_session(input_path), store)
    write_results(results, output_path)
    logger.info(f"✅ Results written to {output_path}")


if __name__ == "__main__":
    main()
