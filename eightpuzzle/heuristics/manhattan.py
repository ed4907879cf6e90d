from eightpuzzle.domains.board import Board


def manhattan(board: Board) -> int:
    return board.manhattan_score()
