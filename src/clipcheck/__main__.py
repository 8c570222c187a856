"""Entry point: python -m clipcheck"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from rich.console import Console
from rich.logging import RichHandler

from clipcheck import __version__
from clipcheck.config import CheckConfig, Mode
from clipcheck.constants import API_KEY_ENV, DEFAULT_MODEL_KEY, MODELS
from clipcheck.errors import ConfigurationError, ProviderError, TransportError

EXIT_PROVIDER_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_TRANSPORT_ERROR = 3


def setup_logging(verbose: bool = False) -> None:
    """Configure logging with a rich handler on stderr."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="clipcheck",
        description="Ask an LLM to comment on or fix the Ruby code on your clipboard",
    )
    parser.add_argument(
        "-m", "--mode",
        choices=[m.value for m in Mode],
        default=Mode.COMMENT.value,
        help="Instruction verb sent with the code (default: %(default)s)",
    )
    parser.add_argument(
        "--model",
        default=DEFAULT_MODEL_KEY,
        help=f"Model key, one of {', '.join(MODELS)} (default: %(default)s)",
    )
    parser.add_argument(
        "--timeout", type=float, default=None,
        help="Seconds to wait for the completion (default: no limit)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"clipcheck {__version__}"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(verbose=args.verbose)

    logger = logging.getLogger("clipcheck")

    from clipcheck.ai.openai_completion import OpenAICompletionBackend
    from clipcheck.input.clipboard import Clipboard
    from clipcheck.output.presenter import Presenter
    from clipcheck.platform.detect import detect_platform

    config = CheckConfig(mode=Mode(args.mode), model_key=args.model, timeout=args.timeout)

    try:
        backend = OpenAICompletionBackend(
            api_key=os.environ.get(API_KEY_ENV, ""),
            timeout=config.timeout,
        )
        presenter = Presenter(clipboard=Clipboard(detect_platform()), backend=backend)
        presenter.run(config)
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        sys.exit(EXIT_CONFIG_ERROR)
    except ProviderError as e:
        logger.debug("Provider error: %s", e)
        sys.exit(EXIT_PROVIDER_ERROR)
    except TransportError:
        logger.exception("Completion request failed")
        sys.exit(EXIT_TRANSPORT_ERROR)


if __name__ == "__main__":
    main()
