"""CLI command for looking up a single word."""

from word_lookup.cli.playback import play_and_wait
from word_lookup.config import ConfigManager
from word_lookup.controllers import LookupController
from word_lookup.models import Success
from word_lookup.presenters import ConsolePresenter
from word_lookup.services import DictionaryApiClient


def lookup_command(args) -> int:
    """Execute the lookup subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = entry found, 1 = anything else)
    """
    config = ConfigManager.load_config()
    presenter = ConsolePresenter()

    client = DictionaryApiClient(config)
    try:
        controller = LookupController(client)
        result = controller.submit(args.word)
    finally:
        client.close()

    presenter.show_result(result)

    if not isinstance(result, Success):
        return 1

    if args.play:
        audio_url = result.definition.audio_url
        if audio_url is None:
            presenter.show_info("\nNo pronunciation audio available")
        elif not play_and_wait(config, audio_url):
            presenter.show_error("Could not play pronunciation")

    return 0
