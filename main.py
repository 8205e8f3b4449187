"""
WrathWord - Console Entry Point

Plays a game in the terminal against the configured storage backend.
Type a word to guess, "?" for the hint, "!abandon" to give up on the
current game and "!quit" to leave (the game stays saved). "--stats" prints
the player statistics and a summary of the answer list instead of playing.
"""

import argparse

from wrathword import create_game_module
from wrathword.config import Config, DEFAULT_LENGTH, DEFAULT_MAX_ROWS, get_word_statistics
from wrathword.models import GameConfig, GameConfigError, GameMode, GameSession, GameStatus, LengthStats, TileState
from wrathword.services import StartGameOutcome, SubmitGuessError, UseHintError
from wrathword.utils import today_iso

HINT_COMMAND = '?'
ABANDON_COMMAND = '!abandon'
QUIT_COMMAND = '!quit'

TILE_MARKS = {
    TileState.CORRECT: '[{}]',
    TileState.PRESENT: '({})',
    TileState.ABSENT: ' {} ',
}

GUESS_ERROR_MESSAGES = {
    SubmitGuessError.GAME_OVER: "The game is already over",
    SubmitGuessError.INVALID_LENGTH: "Wrong number of letters",
    SubmitGuessError.INCOMPLETE: "Fill in every letter",
    SubmitGuessError.NOT_IN_WORD_LIST: "Not in word list",
}

HINT_ERROR_MESSAGES = {
    UseHintError.GAME_OVER: "The game is already over",
    UseHintError.ALREADY_USED: "You already used your hint",
    UseHintError.NO_HINT_AVAILABLE: "Every letter is already solved, no hint available",
}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play WrathWord in the terminal.")
    parser.add_argument('--length', type=int, default=DEFAULT_LENGTH,
                        help="word length (4, 5 or 6)")
    parser.add_argument('--rows', type=int, default=DEFAULT_MAX_ROWS,
                        help="number of guesses allowed")
    parser.add_argument('--mode', choices=[m.value for m in GameMode], default=GameMode.DAILY.value,
                        help="daily puzzle or free play")
    parser.add_argument('--date', default=None,
                        help="puzzle date as YYYY-MM-DD (defaults to today)")
    parser.add_argument('--stats', action='store_true',
                        help="show player statistics and answer list facts, then exit")
    return parser.parse_args(argv)


def render_board(session: GameSession) -> str:
    """Text rendering of every guessed row plus the empty rows left."""
    lines = []
    for guess, fb in zip(session.guesses, session.feedback):
        lines.append(''.join(TILE_MARKS[state].format(letter) for letter, state in zip(guess, fb)))
    for _ in range(session.remaining_guesses):
        lines.append(' _ ' * session.config.length)
    if session.hint_used and session.hinted_cell is not None:
        lines.append(f"Hint: letter {session.hinted_cell.col + 1} is {session.hinted_letter}")
    return '\n'.join(lines)


def ask_keep_stale(stale: GameSession) -> bool:
    print(f"\nYou have an unfinished daily game from {stale.config.date_iso} "
          f"({stale.current_row}/{stale.config.max_rows} guesses).")
    while True:
        answer = input("Keep playing it? [y/n] ").strip().lower()
        if answer in ('y', 'yes'):
            return True
        if answer in ('n', 'no'):
            return False


def start_session(module, config: GameConfig):
    """Run StartGame and resolve a stale game with the player. None means nothing to play."""
    start_game = module.get_start_game_use_case()
    result = start_game.execute(config)

    if result.outcome is StartGameOutcome.ALREADY_COMPLETED:
        print(f"✓ You already finished the {config.length}x{config.max_rows} daily puzzle for {config.date_iso}")
        return None

    if result.outcome is StartGameOutcome.STALE_GAME:
        # A finished game from an earlier day has nothing left to resume
        stale = result.stale_session
        if not stale.is_game_over() and ask_keep_stale(stale):
            return stale
        module.get_abandon_game_use_case().execute()
        result = start_game.execute(config)
        if result.session is None:
            print("✗ Could not start today's puzzle")
            return None

    if result.outcome is StartGameOutcome.RESTORED:
        print("✓ Restored your saved game")
    else:
        print("✓ New game started")
    return result.session


def format_length_stats(length: int, stats: LengthStats) -> str:
    lines = [
        f"{length} letters: played {stats.games_played}, won {stats.win_rate}%, "
        f"streak {stats.current_streak} (best {stats.max_streak})"
    ]
    for guesses, count in sorted(stats.guess_distribution.items()):
        lines.append(f"  {guesses}: {'#' * count} {count}")
    return '\n'.join(lines)


def show_stats(module, length: int):
    """Print the player statistics and a summary of the answers for a length."""
    stats_repository = module.get_stats_repository()
    totals = stats_repository.get_total_stats()
    print(f"Played {totals.played}, won {totals.won} ({totals.win_rate}%), "
          f"streak {totals.current_streak} (best {totals.max_streak})")
    for each_length, stats in stats_repository.get_all_stats().items():
        if stats.games_played:
            print(format_length_stats(each_length, stats))

    word_stats = get_word_statistics(module.get_word_list().get_answers(length))
    if 'error' in word_stats:
        print(f"✗ {word_stats['error']}")
        return
    common = ' '.join(f"{letter}:{count}" for letter, count in word_stats['most_common_letters'])
    print(f"{word_stats['total_words']} answers with {length} letters, "
          f"{word_stats['avg_vowel_count']} vowels on average")
    print(f"Most common letters: {common}")


def play(module, session: GameSession):
    submit_guess = module.get_submit_guess_use_case()
    use_hint = module.get_use_hint_use_case()

    while not session.is_game_over():
        print()
        print(render_board(session))
        try:
            text = input(f"Guess {session.current_row + 1}/{session.config.max_rows}: ").strip()
        except EOFError:
            text = QUIT_COMMAND

        if text == QUIT_COMMAND:
            print("Game saved. See you later!")
            return
        if text == ABANDON_COMMAND:
            result = module.get_abandon_game_use_case().execute()
            print(f"Game abandoned. The word was {session.answer}")
            if result.abandoned_game and result.abandoned_game.mode is GameMode.DAILY:
                print("This daily puzzle now counts as played.")
            return
        if text == HINT_COMMAND:
            hint_result = use_hint.execute(session)
            if hint_result.success:
                session = hint_result.session
                print(f"✓ Letter {hint_result.position.col + 1} is {hint_result.letter}")
            else:
                print(f"✗ {HINT_ERROR_MESSAGES[hint_result.error]}")
            continue

        guess_result = submit_guess.execute(session, text)
        if not guess_result.success:
            print(f"✗ {GUESS_ERROR_MESSAGES[guess_result.error]}")
            continue
        session = guess_result.session

    print()
    print(render_board(session))
    if session.status is GameStatus.WON:
        print(f"\n✓ Solved in {session.current_row}!")
    else:
        print(f"\n✗ Out of guesses. The word was {session.answer}")
    print()
    print(session.to_share_string())
    print()
    length = session.config.length
    print(format_length_stats(length, module.get_stats_repository().get_stats(length)))


def main(argv=None):
    """Main function to build the game module and play one game."""
    args = parse_args(argv)

    try:
        config = GameConfig.create(args.length, args.rows, args.mode, args.date or today_iso())
    except GameConfigError as e:
        print(f"✗ {e}")
        return 2

    print("Initializing game...")
    module = create_game_module(Config)
    print(f"✓ Using '{Config.STORAGE_BACKEND}' storage")

    if args.stats:
        show_stats(module, config.length)
        return 0

    session = start_session(module, config)
    if session is None:
        return 0

    try:
        play(module, session)
    except KeyboardInterrupt:
        print("\nGame saved. See you later!")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
