"""CLI command for looking up words interactively."""

from word_lookup.cli.playback import play_and_wait
from word_lookup.config import ConfigManager, LookupConfig
from word_lookup.controllers import LookupController
from word_lookup.interfaces import PresenterProtocol
from word_lookup.models import Success
from word_lookup.presenters import ConsolePresenter
from word_lookup.services import DictionaryApiClient

PROMPT = "Search for any word... "
QUIT_COMMANDS = {":q", ":quit"}
PLAY_COMMAND = ":play"


def interactive_command(args, input_func=input) -> int:
    """Execute the interactive subcommand.

    Every line is submitted as a query, so an empty line reports empty
    input just like pressing Enter in an empty search box.

    Args:
        args: Parsed command-line arguments
        input_func: Line reader (replaced in tests)

    Returns:
        Exit code (always 0)
    """
    config = ConfigManager.load_config()
    presenter = ConsolePresenter()
    client = DictionaryApiClient(config)
    controller = LookupController(client)
    controller.add_listener(presenter.show_result)

    presenter.show_info("Word Lookup - type ':play' for pronunciation, ':q' to quit")

    try:
        while True:
            try:
                line = input_func(PROMPT)
            except (EOFError, KeyboardInterrupt):
                presenter.show_info("")
                break

            command = line.strip()
            if command in QUIT_COMMANDS:
                break

            if command == PLAY_COMMAND:
                _play_current(controller, config, presenter)
                continue

            controller.submit(line)
    finally:
        client.close()

    return 0


def _play_current(
    controller: LookupController, config: LookupConfig, presenter: PresenterProtocol
) -> None:
    result = controller.result
    if not isinstance(result, Success):
        presenter.show_error("Look up a word first")
        return

    audio_url = result.definition.audio_url
    if audio_url is None:
        presenter.show_info("No pronunciation audio available")
        return

    if not play_and_wait(config, audio_url):
        presenter.show_error("Could not play pronunciation")
