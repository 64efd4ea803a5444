"""The command-line game: setup from arguments and the command loop."""

from __future__ import annotations

import random
import sys
from collections import Counter, deque

from raiinet.abilities import use_ability
from raiinet.ability import AbilityName
from raiinet.board import DEFAULT_ABILITIES, Board, Direction, GameError
from raiinet.display import DisplayBoard

LINK_PIECES = ("V1", "V2", "V3", "V4", "D1", "D2", "D3", "D4")
_RULE = "___________________________"
_PROMPT = "Enter a command: "
_ARGUMENT_COUNTS = {
    AbilityName.FIREWALL: 2,
    AbilityName.EXCHANGE_LOCATION: 2,
    AbilityName.TAUNT: 2,
}
_OWN_LETTERS = {1: "abcdefgh", 2: "ABCDEFGH"}


def has_excess_duplicates(text):
    """Whether any character appears more than twice."""
    return any(count > 2 for count in Counter(text).values())


def random_links(rng):
    """A shuffled link placement string such as 'V1D3...'."""
    pieces = list(LINK_PIECES)
    rng.shuffle(pieces)
    return "".join(pieces)


def read_link_file(path):
    """The link placement in a file, its whitespace-separated parts joined."""
    with open(path, encoding="utf-8") as handle:
        return "".join(handle.read().split())


class _Tokens:
    """Whitespace-separated words drawn from lines of text."""

    def __init__(self, lines):
        self._lines = iter(lines)
        self._pending = deque()

    def next(self):
        while not self._pending:
            line = next(self._lines, None)
            if line is None:
                return None
            self._pending.extend(line.split())
        return self._pending.popleft()

    def discard_line(self):
        self._pending.clear()


def _read_sequence(path):
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read().splitlines()
    except OSError:
        return []


def _argument_count(board, ability_id):
    abilities = board.players[board.current - 1].abilities
    if not 1 <= ability_id <= min(5, len(abilities)):
        return 0
    ability = abilities[ability_id - 1]
    if ability.used:
        return 0
    return _ARGUMENT_COUNTS.get(ability.name, 1)


def run_game(board, commands, out):
    """Play commands from the given lines against the board; return the winner."""
    primary = _Tokens(commands)
    source = primary
    from_primary = True
    display = DisplayBoard(board.players, 1)
    ability_left = True

    def say(text=""):
        out.write(text + "\n")

    def show_board():
        say(_RULE)
        out.write(display.render())
        say(_RULE)
        say()

    say(_RULE)
    out.write(display.render())
    say(_RULE)
    out.write(_PROMPT)

    while (cmd := source.next()) is not None:
        if cmd == "quit":
            break
        if cmd == "sequence":
            filename = primary.next()
            source = _Tokens(_read_sequence(filename) if filename is not None else [])
            from_primary = False
        elif cmd == "board":
            show_board()
        elif cmd == "move":
            letter = source.next()
            direction_name = source.next()
            if letter is None or direction_name is None:
                break
            if letter not in _OWN_LETTERS[board.current] or len(letter) != 1:
                say(f"Invalid move! You don't own: {letter}")
                say()
                continue
            try:
                direction = Direction(direction_name)
            except ValueError:
                say("Invalid Direction")
                say()
                continue
            try:
                board.move_link(letter, direction)
            except GameError as error:
                say(str(error))
            display.update(board)
            show_board()
            ability_left = True
            if board.is_over:
                say(f"Congratulations! Player {board.winner} Won!")
                break
        elif cmd == "ability":
            if not ability_left:
                say("You have already used an ability in this turn")
                continue
            token = source.next()
            if token is None:
                break
            try:
                ability_id = int(token)
            except ValueError:
                ability_id = 0
            args = [source.next() for _ in range(_argument_count(board, ability_id))]
            try:
                spent = use_ability(board, ability_id, [arg for arg in args if arg is not None])
            except GameError as error:
                say(str(error))
                spent = False
            display.update(board)
            show_board()
            if spent:
                ability_left = False
        elif cmd == "abilities":
            out.write(display.ability_card(board.current))
        else:
            source.discard_line()
            say("Invalid Command. Please Try Again.")
        if from_primary:
            out.write(_PROMPT)
    return board.winner


def _ability_choice(value):
    if has_excess_duplicates(value):
        raise ValueError("A player may have at most 2 of the same ability")
    if len(value) != 5:
        raise ValueError("A player may only have up to 5 abilities")
    return value


def main(argv=None):
    """Set up a game from command-line options and play it on standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    rng = random.Random()
    links = [random_links(rng), random_links(rng)]
    abilities = [DEFAULT_ABILITIES, DEFAULT_ABILITIES]
    options = iter(args)
    try:
        for arg in options:
            if arg in ("-link1", "-link2"):
                path = next(options, None)
                if path is None:
                    raise ValueError(f"{arg} needs a placement file")
                links[0 if arg == "-link1" else 1] = read_link_file(path)
            elif arg in ("-ability1", "-ability2"):
                value = next(options, None)
                if value is None:
                    raise ValueError(f"{arg} needs a list of abilities")
                abilities[0 if arg == "-ability1" else 1] = _ability_choice(value)
            elif arg == "-graphics":
                continue
        board = Board(links[0], links[1], abilities[0], abilities[1])
    except (OSError, ValueError) as error:
        print(error)
        return 1
    run_game(board, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())