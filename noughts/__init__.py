"""
Noughts - N×N tic tac toe engine

A small, deterministic engine for noughts and crosses on any square board:
- Board state with placement validation
- Win/draw detection by scanning lines through the last move
- Move parsing for the "x,y" text protocol
- A game loop that reads from any input source, scripted or interactive
"""

__version__ = "0.1.0"
