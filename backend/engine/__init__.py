"""
Rock, Paper, Scissors game engine
Core rules and series bookkeeping without web framework or console I/O
"""

# Number of distinct plays; the choice generator scales its random source to this.
PLAY_COUNT = 3
