"""
Collaborators around the snake engine: clocks, renderers and the curses terminal session.
"""
