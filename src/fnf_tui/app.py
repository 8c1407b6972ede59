# =============================================================================
# fnf-tui Main Application
# =============================================================================
# The Textual application and the command-line entry point.
#
# Startup order matters: configuration is validated and the first list of
# redirections is fetched before the terminal is taken over. Any failure
# there is fatal and reported on stderr with exit code 1.
# =============================================================================

import argparse
import logging
import shutil
import sys
from pathlib import Path

from textual.app import App
from textual.logging import TextualHandler

from fnf_tui import __version__, __app_name__
from fnf_tui.config import Config, ConfigError, print_paths
from fnf_tui.forward import ForwardError, ForwardProvider, OVHProvider
from fnf_tui.session import SessionController, SessionStyle
from fnf_tui.ui.screens.forward_list import ForwardListScreen

logger = logging.getLogger(__name__)


class ForwardApp(App):
    """
    The fnf-tui application.

    Owns the SessionController and shows it on a ForwardListScreen. Key
    handling, quitting included, is done by the screen and the controller.

    Attributes:
        controller: The session being displayed.
    """

    TITLE = "fnf-tui"
    SUB_TITLE = "Email forwards"

    # Every key belongs to the session
    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        provider: ForwardProvider,
        default_email: str,
        *,
        style: SessionStyle | None = None,
    ) -> None:
        """
        Initialize the application and load the redirections.

        Args:
            provider: Remote forwarding provider.
            default_email: Default destination address.
            style: Per-session visual settings.

        Raises:
            ForwardError: If the initial list fails.
        """
        super().__init__()
        self.controller = SessionController(
            provider,
            default_email,
            clipboard=self.copy_to_clipboard,
            width=shutil.get_terminal_size().columns,
            style=style,
        )

    def on_mount(self) -> None:
        self.push_screen(ForwardListScreen(self.controller))


# =============================================================================
# CLI Entry Point
# =============================================================================

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="fnf-tui: manage OVH email redirections from the terminal",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--paths",
        action="store_true",
        help="Print configuration paths and exit",
    )

    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Write the current configuration (without secrets) to the config file and exit",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: XDG config location)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (verbose logging)",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write log records to this file",
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool = False, log_file: Path | None = None) -> None:
    """
    Route log records away from the terminal the UI draws on.

    Records go to the Textual devtools console (`textual console`) and,
    optionally, to a file.
    """
    handlers: list[logging.Handler] = [TextualHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for fnf-tui.

    This function:
        1. Parses command-line arguments
        2. Handles special commands (--paths, --init-config)
        3. Loads and validates configuration
        4. Fetches the redirections and starts the Textual application

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = parse_args(argv)
    setup_logging(args.debug, args.log_file)

    if args.paths:
        print_paths()
        return 0

    try:
        config = Config.load(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.init_config:
        path = config.save(args.config)
        print(f"Configuration written to {path}")
        return 0

    try:
        config.validate()
        provider = OVHProvider.from_config(config)
        app = ForwardApp(
            provider,
            config.forward.default_email,
            style=config.ui.session_style(),
        )
    except (ConfigError, ForwardError) as e:
        logger.debug(f"Startup failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
