"""
CLI main entry point.
"""

import argparse
import base64
import json
import logging
import sys
from pathlib import Path
from typing import Any

from ..config import Config, create_default_config, load_config
from ..engine import SmartInputEngine
from ..evaluation import generate_report, run_ocr_evaluation, run_voice_evaluation
from ..recognition import create_provider
from ..service import SmartInputService

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, level: int = logging.INFO) -> None:
    """Configure logging."""
    if verbose:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_cli() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="smart-input",
        description="Extract transaction drafts from receipt text and voice transcripts",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("config.yaml"),
        help="Path to config file (default: config.yaml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # ocr command
    ocr_parser = subparsers.add_parser("ocr", help="Extract from recognized receipt lines")
    ocr_parser.add_argument("lines", nargs="*", help="Receipt lines, in detection order")
    ocr_parser.add_argument(
        "--file",
        type=Path,
        help="Read receipt lines from a UTF-8 text file (one line per row)",
    )

    # voice command
    voice_parser = subparsers.add_parser("voice", help="Parse a voice transcript")
    voice_parser.add_argument("text", help="Transcript, e.g. 在超市花了五十块钱")

    # scan command
    scan_parser = subparsers.add_parser("scan", help="Recognize a receipt image and extract")
    scan_parser.add_argument("--image", type=Path, required=True, help="Receipt image file")

    # listen command
    listen_parser = subparsers.add_parser("listen", help="Recognize an audio clip and parse")
    listen_parser.add_argument("--audio", type=Path, required=True, help="Audio file")
    listen_parser.add_argument(
        "--format",
        dest="audio_format",
        default="wav",
        choices=["wav", "pcm", "amr", "m4a"],
        help="Audio format (default: wav)",
    )
    listen_parser.add_argument(
        "--rate",
        type=int,
        default=16000,
        choices=[8000, 16000],
        help="Sample rate (default: 16000)",
    )

    # evaluate command
    evaluate_parser = subparsers.add_parser(
        "evaluate", help="Run the labelled accuracy samples and print a report"
    )
    evaluate_parser.add_argument("--output", type=Path, help="Write the Markdown report here")

    # init-config command
    subparsers.add_parser("init-config", help="Write a default config file")

    return parser


def _print_json(data: dict[str, Any]) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _read_base64(path: Path) -> str:
    return base64.b64encode(path.read_bytes()).decode("ascii")


def cmd_ocr(config: Config, lines: list[str], file: Path | None = None) -> int:
    """Extract from receipt lines given on the command line or in a file."""
    if file is not None:
        if not file.exists():
            print(f"❌ File not found: {file}")
            return 1
        lines = file.read_text(encoding="utf-8").splitlines()

    if not lines:
        print("❌ No receipt lines given")
        return 1

    engine = SmartInputEngine(config.extraction)
    _print_json(engine.extract_transaction_info(lines).to_dict())
    return 0


def cmd_voice(config: Config, text: str) -> int:
    """Parse a transcript."""
    engine = SmartInputEngine(config.extraction)
    _print_json(engine.parse_voice_input(text).to_dict())
    return 0


def _build_service(config: Config) -> SmartInputService:
    return SmartInputService(
        provider=create_provider(config.recognition),
        engine=SmartInputEngine(config.extraction),
    )


def cmd_scan(config: Config, image: Path) -> int:
    """Run OCR on an image through the configured provider."""
    if not image.exists():
        print(f"❌ Image not found: {image}")
        return 1

    outcome = _build_service(config).process_ocr_result(_read_base64(image))
    _print_json(outcome.to_dict())
    return 0 if outcome.success else 1


def cmd_listen(config: Config, audio: Path, audio_format: str, rate: int) -> int:
    """Run speech recognition on an audio file through the configured provider."""
    if not audio.exists():
        print(f"❌ Audio file not found: {audio}")
        return 1

    outcome = _build_service(config).process_speech_result(
        _read_base64(audio), audio_format, rate
    )
    _print_json(outcome.to_dict())
    return 0 if outcome.success else 1


def cmd_evaluate(config: Config, output: Path | None = None) -> int:
    """Run both evaluations and print or write the report."""
    engine = SmartInputEngine(config.extraction)
    report = generate_report(run_ocr_evaluation(engine), run_voice_evaluation(engine))

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(report, encoding="utf-8")
        print(f"✅ Report written to {output}")
    else:
        print(report)
    return 0


def cmd_init_config(config_path: Path) -> int:
    """Write a default config file unless one exists."""
    if config_path.exists():
        print(f"❌ Config already exists: {config_path}")
        return 1

    create_default_config(config_path)
    print(f"✅ Created {config_path}")
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_cli()
    parsed = parser.parse_args(args)

    if not parsed.command:
        setup_logging(parsed.verbose)
        parser.print_help()
        return 1

    if parsed.command == "init-config":
        setup_logging(parsed.verbose)
        return cmd_init_config(parsed.config)

    # Load config
    try:
        config = load_config(parsed.config)
        config.validate_or_raise()
    except Exception as e:
        setup_logging(parsed.verbose)
        print(f"❌ Failed to load config: {e}")
        return 1

    setup_logging(parsed.verbose, config.log_level_value)
    logger.debug(f"Loaded config from {parsed.config}")

    # Route to command
    if parsed.command == "ocr":
        return cmd_ocr(config, parsed.lines, parsed.file)
    elif parsed.command == "voice":
        return cmd_voice(config, parsed.text)
    elif parsed.command == "scan":
        return cmd_scan(config, parsed.image)
    elif parsed.command == "listen":
        return cmd_listen(config, parsed.audio, parsed.audio_format, parsed.rate)
    elif parsed.command == "evaluate":
        return cmd_evaluate(config, parsed.output)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
