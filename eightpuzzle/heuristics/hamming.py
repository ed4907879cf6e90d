from eightpuzzle.domains.board import Board


def hamming(board: Board) -> int:
    """Misplaced-tile count (blank ignored)."""
    return board.hamming_score()
