"""
Game configuration for TicTacToe.
Board dimensions, marks, and the text shown to players.
"""


class GameConfig:
    """
    Configuration class for game settings.
    The board is always 3x3 with two marks.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells, indexed 0-8 row by row

    # ==================== TEXT SETTINGS ====================
    # Status line
    WINNER_TEMPLATE = "Winner: {mark}"
    NEXT_PLAYER_TEMPLATE = "Next Player: {mark}"

    # History navigation labels
    GAME_START_LABEL = "Go to game start"
    MOVE_LABEL_TEMPLATE = "Go to move #{number}"
