"""Main entry point for the PRD generator CLI."""

import argparse
import logging
import sys
from pathlib import Path

from prd_generator.config import get_settings
from prd_generator.ui.utils import (
    DOWNLOAD_EXTENSIONS,
    build_download_filename,
    build_prd_prompt,
)

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging at LOG_LEVEL, or DEBUG when verbose."""
    logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    level = logging.DEBUG if verbose else get_settings().log_level.upper()
    logging.getLogger().setLevel(level)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Generate product ideas and product requirements documents"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the API server")
    serve.add_argument("--host", type=str, default="127.0.0.1", help="Bind address")
    serve.add_argument("--port", type=int, default=8000, help="Bind port")

    subparsers.add_parser("ideas", help="Print a freshly generated idea list")

    prd = subparsers.add_parser("prd", help="Write a PRD for an idea to a file")
    prd.add_argument("idea", type=str, help="Idea phrase to write the PRD for")
    prd.add_argument(
        "--ext",
        type=str,
        choices=list(DOWNLOAD_EXTENSIONS),
        default="md",
        help="Output file extension (content is the same)",
    )
    prd.add_argument(
        "--output-dir",
        type=str,
        default=".",
        help="Directory to write the PRD file to",
    )
    return parser


def run_ideas() -> list[str]:
    """Generate and print an idea list."""
    from prd_generator.chains.idea_generator import IdeaGeneratorChain

    ideas = IdeaGeneratorChain().generate()
    for idx, idea in enumerate(ideas, 1):
        print(f"{idx}. {idea}")
    return ideas


def run_prd(idea: str, ext: str, output_dir: str) -> Path:
    """Generate a PRD and write it to ``output_dir``."""
    from prd_generator.chains.prd_writer import PRDWriterChain

    content = PRDWriterChain().write(build_prd_prompt(idea))
    path = Path(output_dir) / build_download_filename(idea, ext)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info(f"Wrote PRD to {path}")
    return path


def run_serve(host: str, port: int) -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "prd_generator.api.main:app",
        host=host,
        port=port,
        log_level=get_settings().log_level.lower(),
    )


def main(argv: list[str] | None = None):
    """Main function for the PRD generator CLI."""
    args = build_parser().parse_args(argv)

    configure_logging(verbose=args.verbose)

    try:
        if args.command == "serve":
            run_serve(args.host, args.port)
        elif args.command == "ideas":
            run_ideas()
        elif args.command == "prd":
            run_prd(args.idea, args.ext, args.output_dir)
    except Exception as e:
        logger.error(f"{args.command} failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
