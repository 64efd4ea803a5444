# raiinet

A two-player game played in the terminal on an 8×8 board.

Each player controls eight links. Player 1's links are lettered `a`–`h` and player 2's are lettered `A`–`H`. A link is either data (`D`) or a virus (`V`), and it has a strength. Player 1 starts on the top rows and player 2 on the bottom rows. Each side's two server ports (`S`) sit in columns 3 and 4 of its home row.

A player who has downloaded four data links wins. A player who has downloaded four viruses loses.

## Installing

```
pip install .
```

## Playing

```
raiinet
```

Commands are read from standard input. By default each player gets a random arrangement of `V1`–`V4` and `D1`–`D4` and the abilities `LFDSP`.

### Options

| Option | Meaning |
| --- | --- |
| `-link1 FILE` | Read player 1's links from `FILE`. Its whitespace-separated parts are joined, so `V1 D4 V3 V2 D3 V4 D2 D1` works. |
| `-link2 FILE` | Read player 2's links from `FILE`. |
| `-ability1 XXXXX` | Five ability initials for player 1. |
| `-ability2 XXXXX` | Five ability initials for player 2. |
| `-graphics` | Accepted and ignored. |

An ability list must hold exactly five initials, and no initial may appear more than twice. If it does not, or a link file cannot be read, the command prints the problem and exits with status 1.

### Commands

- `move <link> <up|down|left|right>`: move one of your links. This ends your turn.
- `ability <id> [args...]`: play the ability with that id (1–5) from your card. You may play one ability per turn.
- `abilities`: show the current player's ability card.
- `board`: show the board.
- `sequence <file>`: read all further commands from `file`. The game ends when the file runs out.
- `quit`: leave the game.

Any other word prints `Invalid Command. Please Try Again.`, and the rest of that line is skipped.

### Moving

A link moves one square, or two after LinkBoost.

- Onto an empty square: it moves there.
- Onto an opponent's link: both links are revealed and they battle. The link with lower strength is downloaded by its opponent. On a tie, the moving link wins.
- Off the opponent's edge of the board: you download your own link.
- Onto the opponent's server port: your opponent downloads the link.
- Onto a firewall of your own: it moves there. Onto your opponent's firewall: a data link is revealed, and a virus is downloaded by its owner.

Moving onto your own links, onto your own server ports, off the other edges, or moving a downloaded link is refused, and the turn stays with you.

Player 1's firewalls are shown as `m` and player 2's as `w`.

### Abilities

| Initial | Ability | Arguments |
| --- | --- | --- |
| `L` | LinkBoost | one of your links: it moves two squares at a time from then on |
| `F` | Firewall | a row and a column: places your firewall on a square with no link on it |
| `D` | Download | an opponent's link: you download it |
| `P` | Polarize | a link: switches it between data and virus |
| `S` | Scan | a link: reveals it |
| `B` | BoostStrength | one of your links: raises its strength by one |
| `E` | ExchangeLocation | two of your links: swaps their places |
| `T` | Taunt | one of your links and one of your opponent's: they battle at once, wherever they are |

## Using it as a library

```python
from raiinet.board import Board, Direction, GameError
from raiinet.abilities import use_ability
from raiinet.display import DisplayBoard

board = Board("V1V2V3V4D1D2D3D4", "D1D2D3D4V1V2V3V4")
board.move_link("a", Direction.DOWN)   # player 1 moves; turn passes to player 2

try:
    use_ability(board, 5, ["a"])       # player 2 plays Polarize on link a
except GameError as error:
    print(error)

display = DisplayBoard(board.players)
display.update(board)
print(display.render())
print(display.ability_card(board.current))
```

- `Board(links1, links2, abilities1="LFDSP", abilities2="LFDSP")` holds the grid (`squares`), both `players`, `current`, `is_over` and `winner`. `move_link`, `battle`, `download_link` and `own_download` apply the rules above. A move that is not allowed raises `GameError`.
- `use_ability(board, ability_id, args)` plays a card. It takes the arguments as strings and returns whether the card was spent. It raises `GameError` when the play is refused.
- `DisplayBoard` renders the text view from the current player's side. Your own links show their type and strength. Your opponent's links show `?` until they are revealed.
- `raiinet.cli.run_game(board, commands, out)` plays the command loop over any iterable of lines, writes to `out`, and returns the winner (0 if none).

## What it does not do

The game is played in text only. There is no graphical window, and `-graphics` does nothing. Games are not saved.