from npuzzle.engine.loader.loader import load_board, parse_board

__all__ = ["load_board", "parse_board"]
