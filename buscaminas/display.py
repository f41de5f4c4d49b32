"""Text rendering of games, banners and prompts for an ANSI terminal."""

from __future__ import annotations

from .game import Game

BLACK = "\x1b[30m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
WHITE = "\x1b[37m"
ORANGE = "\x1b[38;2;255;128;0m"
ROSE = "\x1b[38;2;255;151;203m"
LBLUE = "\x1b[38;2;53;149;240m"
DBLUE = "\x1b[38;2;11;11;100m"
LGREEN = "\x1b[38;2;17;245;120m"
DGREEN = "\x1b[38;1;50;32;120m"
DRED = "\x1b[38;1;128;0;0m"
GRAY = "\x1b[38;2;176;174;174m"
RESET = "\x1b[0m"

BG_BLACK = "\x1b[40m"
BG_RED = "\x1b[41m"
BG_GREEN = "\x1b[42m"
BG_YELLOW = "\x1b[43m"
BG_BLUE = "\x1b[44m"
BG_MAGENTA = "\x1b[45m"
BG_CYAN = "\x1b[46m"
BG_WHITE = "\x1b[47m"
BG_ORANGE = "\x1b[48;2;255;128;0m"
BG_LBLUE = "\x1b[48;2;53;149;240m"
BG_LGREEN = "\x1b[48;2;17;245;120m"
BG_GRAY = "\x1b[48;2;176;174;174m"
BG_ROSE = "\x1b[48;2;255;151;203m"

N_SPACE = 2

_RULE = "+------------------------------+"

_NUMBER_COLORS = {
    1: BLUE,
    2: GREEN,
    3: RED,
    4: DBLUE,
    5: DGREEN,
    6: DRED,
}


def _box(color: str, text: str) -> str:
    return f"{color}{_RULE}\n|{text}|\n{_RULE}{RESET}\n"


def render_banner() -> str:
    """The title shown when the program starts."""
    return _box(MAGENTA, "          Buscaminas          ")


def render_result(game: Game) -> str:
    """The banner for a finished game: lost, won or given up."""
    if game.mine_exploded:
        return _box(RED, "          GAME  OVER          ")
    if game.is_complete():
        return _box(LGREEN, "           VICTORIA           ")
    return _box(RED, "           RENDIDO            ")


def render_prompt() -> str:
    """Instructions asking the player for coordinates."""
    return (
        "Por favor, introduzca las coordenadas deseadas\n"
        "Opciones:\n"
        "\t+ -3 -3 (Deshacer ultimo movimiento)\n"
        "\t+ -2 -2 (Activar modo bandera)\n"
        "\t+ -1 -1 (Rendirse. Contara como derrota)\n"
        "\t+ 0+ 0+ (Coordenadas sobre las que se desea jugar)\n"
    )


def _status(game: Game) -> str:
    if game.mode:
        flag = f"{LGREEN}ON{MAGENTA}{'|':>20}"
    else:
        flag = f"{RED}OFF{MAGENTA}{'|':>19}"
    return (
        f"{MAGENTA}{_RULE}\n"
        f"|Jugadas: {LBLUE}{game.moves:<21}{MAGENTA}|\n"
        f"|Minas:   {LBLUE}{game.display_mines:<21}{MAGENTA}|\n"
        f"|Bandera: {flag}\n"
        f"{_RULE}{RESET}\n"
    )


def _header(game: Game) -> str:
    columns = "".join(f"{LBLUE}{col:>{N_SPACE}}{RESET}|" for col in range(game.cols))
    return f"\t  |{columns}\n"


def _delimiter(game: Game) -> str:
    return "\t -+" + ("-" * N_SPACE + "+") * game.cols + "\n"


def _cell(game: Game, row: int, col: int) -> str:
    parts = [BG_GRAY, BLACK]
    if not game.is_revealed(row, col):
        if game.is_flagged(row, col):
            parts += [BG_ORANGE, ORANGE]
        parts += [" " * N_SPACE, RESET]
    else:
        parts.append(BG_BLACK)
        if game.has_mine(row, col):
            parts += [RED, "*".rjust(N_SPACE), RESET]
        else:
            number = game.number(row, col)
            parts.append(_NUMBER_COLORS.get(number, ""))
            parts += [(str(number) if number else "").rjust(N_SPACE), RESET]
    parts.append("|")
    return "".join(parts)


def render_game(game: Game) -> str:
    """The status box followed by the board grid."""
    delimiter = _delimiter(game)
    lines = [_status(game), _header(game), delimiter]
    for row in range(game.rows):
        cells = "".join(_cell(game, row, col) for col in range(game.cols))
        lines.append(f"{LBLUE}\t{row:>{N_SPACE}}{RESET}|{cells}\n")
        lines.append(delimiter)
    return "".join(lines)