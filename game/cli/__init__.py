"""
Command-line tools for the terminal snake.
"""
