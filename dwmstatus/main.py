"""Main entry point for the dwmstatus status line generator."""
import argparse

from .config.config_manager import DEFAULT_CONFIG_PATH, ConfigManager
from .core.composer import StatusComposer
from .core.sink import ConsoleSink, XsetrootSink
from .core.status_loop import StatusLoop
from .utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command line options."""
    parser = argparse.ArgumentParser(description="dwm status bar generator")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH)
    parser.add_argument("--once", action="store_true",
                        help="push a single status line and exit")
    parser.add_argument("--stdout", action="store_true",
                        help="print status lines instead of calling xsetroot")
    parser.add_argument("--log-level", default=None)
    return parser


def main(argv=None):
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)

    # Load configuration - let it crash if bad
    config = ConfigManager.load_config(args.config)
    setup_logging(args.log_level or config.log_level)
    logger.info(f"Loaded configuration from {args.config}")
    logger.debug(f"Configuration: {config}")

    sink = ConsoleSink() if args.stdout else XsetrootSink(config.sink.command)
    loop = StatusLoop(StatusComposer(config, sink))

    try:
        if args.once:
            loop.composer.tick()
        else:
            loop.run()
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
