"""
VOD Creator.

Entry point for encoding a local video and publishing it for streaming.
"""

import ddtrace.auto  # noqa: F401

import argparse
import sys
from pathlib import Path

from vod_creator.config import load_config
from vod_creator.dependencies import MediaServicesType, get_workflow
from vod_creator.domain import VodResult
from vod_creator.exceptions import InvalidMediaServicesTypeError, MissingAccountConfigError
from vod_creator.logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="vod-creator",
        description="Encode a video with Azure Media Services and print its streaming URLs",
    )
    parser.add_argument(
        "media_services_type",
        help=f"Account to use: {', '.join(t.value for t in MediaServicesType)}",
    )
    parser.add_argument("input_file", type=Path, help="Local video file to upload")
    return parser.parse_args(argv)


def print_urls(result: VodResult) -> None:
    """Prints the streaming block followed by the download block."""
    print()
    print("The following URLs are available for adaptive streaming:")
    for url in result.streaming_urls:
        print(url)

    print()
    print("The following URLs are available for downloads:")
    for url in result.download_urls:
        print(url)


def main(argv: list[str] | None = None) -> int:
    """Runs the VOD workflow and prints the resulting URLs."""
    args = parse_args(argv)
    config = load_config()
    logger = setup_logging(config.logging.level, config.logging.json_format)

    if not args.input_file.is_file():
        logger.error(
            "Input file not found", extra={"input_file": str(args.input_file)}
        )
        return 2

    try:
        workflow = get_workflow(args.media_services_type, config)
    except (InvalidMediaServicesTypeError, MissingAccountConfigError) as e:
        logger.error(str(e), extra={"media_services_type": args.media_services_type})
        return 2

    result = workflow.run(args.input_file)
    if not result.succeeded:
        return 1

    print_urls(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
