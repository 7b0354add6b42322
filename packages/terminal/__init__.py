from .keys import command_for_key
from .view import draw_board, init_colors

__all__ = ["command_for_key", "draw_board", "init_colors"]
